#!/usr/bin/env python3
"""Console-script wrapper for the trend analytics report.

After an editable install (``pip install -e .``) the following command becomes
available system-wide:

* ``trendlens-report`` – load a trends file, run growth / categorization /
  related / forecast analysis and emit a JSON report

Defaults come from :func:`trend_engine.config.get_settings`.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import EngineSettings, get_settings
from .input_loader import load_trends
from .report import build_report, save_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_parser(settings: EngineSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a trend analytics report")
    parser.add_argument("data_path", nargs="?", type=Path, default=settings.data_path,
                        help="Trends file (.json or .csv)")
    parser.add_argument("--period", type=int, default=settings.growth_period,
                        help="Growth look-back in samples")
    parser.add_argument("--months-ahead", type=int, default=settings.months_ahead,
                        help="Number of months to forecast")
    parser.add_argument("--limit", type=int, default=settings.related_limit,
                        help="Related trends per trend")
    parser.add_argument("--output", type=Path, default=None,
                        help="Write the report here instead of stdout")
    parser.add_argument("--log-level", default=settings.log_level,
                        help="Logging level (DEBUG, INFO, ...)")
    return parser


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """Run the report CLI and return its exit status."""
    try:
        settings = get_settings()
    except ValueError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logger.error("Invalid TRENDLENS_* environment settings: %s", e)
        return 1

    args = _build_parser(settings).parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )

    try:
        trends = load_trends(args.data_path)
    except (FileNotFoundError, ValidationError, ValueError) as e:
        logger.error("Could not load trends from %s: %s", args.data_path, e)
        return 1

    try:
        report = build_report(trends, args.period, args.months_ahead, args.limit)
    except ValueError as e:
        logger.error("Invalid report options: %s", e)
        return 1

    if args.output:
        save_report(report, args.output)
    else:
        print(json.dumps(report, indent=2))
    return 0


def report() -> None:
    """``trendlens-report`` console script."""
    sys.exit(main())


if __name__ == "__main__":
    report()
