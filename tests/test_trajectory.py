import math

import pytest

from trend_engine.trajectory import fit_trend_line, predict


def test_constant_history_predicts_constant(make_trend) -> None:
    predictions = predict(make_trend("flat", [50, 50, 50]))
    assert len(predictions) == 3
    assert [p.score for p in predictions] == [50, 50, 50]
    assert all(p.is_prediction for p in predictions)


def test_year_wraps_after_december(make_trend) -> None:
    trend = make_trend("t", [10, 20, 30], last_month="Nov 2024")
    predictions = predict(trend, months_ahead=2)
    assert [p.month for p in predictions] == ["Dec 2024", "Jan 2025"]


def test_year_increments_only_once_per_wrap(make_trend) -> None:
    trend = make_trend("t", [10, 20, 30], last_month="Dec 2024")
    months = [p.month for p in predict(trend, months_ahead=14)]
    assert months[0] == "Jan 2025"
    assert months[11] == "Dec 2025"
    assert months[12] == "Jan 2026"
    assert months[13] == "Feb 2026"


def test_linear_history_extrapolates_next_positions(make_trend) -> None:
    # score = 10 + 5 * i, next positions are 4, 5, 6
    predictions = predict(make_trend("t", [10, 15, 20, 25]))
    assert [p.score for p in predictions] == [30, 35, 40]


def test_steep_growth_clamps_to_100(make_trend) -> None:
    predictions = predict(make_trend("t", [40, 70, 100]), months_ahead=6)
    assert all(p.score <= 100 for p in predictions)
    assert predictions[-1].score == 100


def test_steep_decline_clamps_to_0(make_trend) -> None:
    predictions = predict(make_trend("t", [60, 30, 0]), months_ahead=3)
    assert [p.score for p in predictions] == [0, 0, 0]


@pytest.mark.parametrize("scores", [[], [10], [10, 20]])
def test_short_history_gives_no_predictions(make_trend, scores) -> None:
    if not scores:
        assert predict(None) == []
    else:
        assert predict(make_trend("t", scores)) == []


def test_prediction_does_not_touch_trend(make_trend) -> None:
    trend = make_trend("t", [10, 20, 30])
    predict(trend, months_ahead=5)
    assert len(trend.popularity) == 3


def test_fit_trend_line() -> None:
    slope, intercept = fit_trend_line([1, 3, 5])
    assert slope == pytest.approx(2.0)
    assert intercept == pytest.approx(1.0)

    slope, intercept = fit_trend_line([7])
    assert math.isnan(slope) and math.isnan(intercept)


def test_rejects_negative_horizon(make_trend) -> None:
    with pytest.raises(ValueError):
        predict(make_trend("t", [1, 2, 3]), months_ahead=-1)


@pytest.mark.parametrize(
    ("last_month", "expected"),
    [("Oct 0999", ["Nov 0999", "Dec 0999", "Jan 1000"]), ("Dec 9999", ["Jan 10000", "Feb 10000", "Mar 10000"])],
)
def test_labels_round_trip_through_validation(make_trend, last_month, expected) -> None:
    trend = make_trend("t", [10, 20, 30], last_month=last_month)
    assert [p.month for p in predict(trend)] == expected
