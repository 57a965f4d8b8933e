import csv
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from trend_engine.input_loader import load_trends


def _write_csv(path: Path, rows: list[dict[str, str | int]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=rows[0].keys())
        writer.writeheader()
        writer.writerows(rows)


def _trend_record(trend_id: str, scores: list[int]) -> dict:
    months = ["Jan 2024", "Feb 2024", "Mar 2024", "Apr 2024"]
    return {
        "id": trend_id,
        "name": trend_id.title(),
        "description": f"{trend_id} description",
        "color": "teal",
        "keyItems": ["Item A", "Item B"],
        "popularity": [{"month": m, "score": s} for m, s in zip(months, scores)],
    }


def test_load_json(tmp_path: Path) -> None:
    path = tmp_path / "trends.json"
    path.write_text(json.dumps({"trends": [_trend_record("mesh", [10, 20, 30]), _trend_record("boho", [50])]}))

    trends = load_trends(path)
    assert [t.id for t in trends] == ["mesh", "boho"]
    assert trends[0].key_items == ["Item A", "Item B"]
    assert [s.score for s in trends[0].popularity] == [10, 20, 30]
    assert trends[1].ai_analysis is None


def test_load_json_bare_list(tmp_path: Path) -> None:
    path = tmp_path / "trends.json"
    path.write_text(json.dumps([_trend_record("mesh", [10, 20])]))
    assert len(load_trends(path)) == 1


def test_load_csv_groups_rows_in_order(tmp_path: Path) -> None:
    path = tmp_path / "trends.csv"
    base = {"description": "Sheer layers", "color": "black", "key_items": "Mesh tops | Sheer skirts"}
    _write_csv(
        path,
        [
            {"id": "mesh", "name": "Mesh", **base, "month": "Jan 2024", "score": 30},
            {"id": "boho", "name": "Boho", **base, "month": "Jan 2024", "score": 70},
            {"id": "mesh", "name": "Mesh", **base, "month": "Feb 2024", "score": 45},
        ],
    )

    trends = load_trends(path)
    assert [t.id for t in trends] == ["mesh", "boho"]
    mesh = trends[0]
    assert mesh.key_items == ["Mesh tops", "Sheer skirts"]
    assert [(s.month, s.score) for s in mesh.popularity] == [("Jan 2024", 30), ("Feb 2024", 45)]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_trends(tmp_path / "nope.json")


def test_out_of_range_score_rejected(tmp_path: Path) -> None:
    path = tmp_path / "trends.json"
    path.write_text(json.dumps({"trends": [_trend_record("mesh", [10, 120])]}))
    with pytest.raises(ValueError, match="expected 0-100"):
        load_trends(path)


def test_duplicate_ids_rejected(tmp_path: Path) -> None:
    path = tmp_path / "trends.json"
    path.write_text(json.dumps({"trends": [_trend_record("mesh", [10]), _trend_record("mesh", [20])]}))
    with pytest.raises(ValueError, match="Duplicate"):
        load_trends(path)


def test_malformed_month_rejected(tmp_path: Path) -> None:
    record = _trend_record("mesh", [10])
    record["popularity"][0]["month"] = "2024-01"
    path = tmp_path / "trends.json"
    path.write_text(json.dumps({"trends": [record]}))
    with pytest.raises(ValidationError):
        load_trends(path)


def test_csv_missing_columns(tmp_path: Path) -> None:
    path = tmp_path / "trends.csv"
    _write_csv(path, [{"id": "mesh", "month": "Jan 2024", "score": 3}])
    with pytest.raises(ValueError, match="missing columns"):
        load_trends(path)


def test_unsupported_suffix(tmp_path: Path) -> None:
    path = tmp_path / "trends.txt"
    path.write_text("")
    with pytest.raises(ValueError, match="Unsupported"):
        load_trends(path)
