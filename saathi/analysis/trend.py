import math
from typing import Any, Mapping, NamedTuple, Optional, Sequence

from saathi.data.fixtures import MOCK_ANALYTICS
from saathi.utils import get_logger

logger = get_logger(__name__)

PREDICTABLE_CATEGORIES = ("water", "electricity")

ALERT_COLORS = {
    "critical": "#dc2626",
    "warning": "#d97706",
    "positive": "#16a34a",
    "neutral": "#2563eb",
}

INSUFFICIENT_DATA_MESSAGE = "Insufficient historical data for reliable prediction."


class TrendPrediction(NamedTuple):
    alert: str
    message: str
    percent_change: Optional[float] = None


def js_round(x: float) -> int:
    # Half-up rounding, so -20.5 -> -20 and 20.5 -> 21
    return int(math.floor(x + 0.5))


def _value(point: Any, category: str) -> float:
    if isinstance(point, Mapping):
        return point[category]
    return getattr(point, category)


def predict_next_month_trend(category: str, trends: Optional[Sequence] = None) -> TrendPrediction:
    """
    Compares the latest month with the month two positions earlier and maps
    the percent change to an alert tag.
    """
    if category not in PREDICTABLE_CATEGORIES:
        raise ValueError(f"Unsupported category for prediction: {category}")

    data = MOCK_ANALYTICS.monthly_trends if trends is None else trends
    last_four = list(data)[-4:]

    if len(last_four) < 4:
        return TrendPrediction("neutral", INSUFFICIENT_DATA_MESSAGE)

    latest = _value(last_four[3], category)
    two_months_ago = _value(last_four[1], category)

    # Floor the base at 1; small bases inflate the percentage.
    base_value = two_months_ago if two_months_ago > 0 else 1
    percent_change = (latest - two_months_ago) / base_value * 100
    rounded = js_round(percent_change)

    category_name = category[:1].upper() + category[1:]
    logger.debug(f"{category}: latest={latest} two_ago={two_months_ago} change={percent_change:.1f}%")

    if percent_change > 15 and latest > 30:
        return TrendPrediction(
            "critical",
            f"{category_name} complaints are projected to increase by {rounded}% next month, "
            f"based on a sharp rise over the last three months. Proactive resource allocation is required.",
            percent_change,
        )
    if percent_change > 5:
        return TrendPrediction(
            "warning",
            f"{category_name} complaints show a steady upward trend ({rounded}% predicted growth). "
            f"Monitor staffing and resource levels.",
            percent_change,
        )
    if percent_change < -5:
        return TrendPrediction(
            "positive",
            f"{category_name} complaints are declining ({abs(rounded)}% predicted drop). "
            f"Recent resolutions are highly effective.",
            percent_change,
        )
    return TrendPrediction(
        "neutral",
        f"{category_name} complaint volume is stable. Maintain current operational levels.",
        percent_change,
    )


def predict_all(trends: Optional[Sequence] = None) -> dict:
    return {c: predict_next_month_trend(c, trends) for c in PREDICTABLE_CATEGORIES}
