"""Environment-driven settings for the report CLI.

Values are read from the process environment after ``.env`` has been loaded:

* ``TRENDLENS_DATA_PATH``     – trends file (default ``data/trends.json``)
* ``TRENDLENS_GROWTH_PERIOD`` – growth look-back in samples (default 3)
* ``TRENDLENS_MONTHS_AHEAD``  – forecast horizon (default 3)
* ``TRENDLENS_RELATED_LIMIT`` – related trends per trend (default 3)
* ``TRENDLENS_LOG_LEVEL``     – logging level name (default ``INFO``)
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class EngineSettings(BaseModel):
    """Defaults applied by :mod:`trend_engine.cli_entrypoints`."""

    data_path: Path = Path("data/trends.json")
    growth_period: int = Field(3, ge=0)
    months_ahead: int = Field(3, ge=0)
    related_limit: int = Field(3, ge=0)
    log_level: str = "INFO"

    model_config = {
        "frozen": True,
    }


def get_settings() -> EngineSettings:
    """Load ``.env`` (if any) and build :class:`EngineSettings` from the environment."""
    load_dotenv()
    return EngineSettings(
        data_path=Path(os.getenv("TRENDLENS_DATA_PATH", "data/trends.json")),
        growth_period=int(os.getenv("TRENDLENS_GROWTH_PERIOD", "3")),
        months_ahead=int(os.getenv("TRENDLENS_MONTHS_AHEAD", "3")),
        related_limit=int(os.getenv("TRENDLENS_RELATED_LIMIT", "3")),
        log_level=os.getenv("TRENDLENS_LOG_LEVEL", "INFO").upper(),
    )
