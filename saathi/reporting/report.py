from typing import Optional, Sequence

from saathi.analysis.trend import predict_next_month_trend
from saathi.data.fixtures import CATEGORIES, MOCK_ANALYTICS, AnalyticsSnapshot, Complaint

CATEGORY_DISPLAY_NAMES = {
    "electricity": "Electricity",
    "water": "Water Supply",
    "healthcare": "Healthcare",
    "roads": "Roads & Infrastructure",
    "education": "Education",
    "waste-management": "Waste Management",
    "transportation": "Transportation",
    "other": "Other Services",
}

SENTIMENT_SCORES = {"positive": 1, "negative": -1}


def category_display_name(category: str) -> str:
    return CATEGORY_DISPLAY_NAMES[category]


def most_common_category(complaints: Sequence[Complaint]) -> str:
    counts = {c: 0 for c in CATEGORIES}
    for complaint in complaints:
        counts[complaint.category] += 1

    # Earlier category survives only when strictly larger; ties go to the later one.
    best = CATEGORIES[0]
    for category in CATEGORIES[1:]:
        if not counts[best] > counts[category]:
            best = category
    return best


def average_sentiment(complaints: Sequence[Complaint]) -> float:
    """
    Unweighted mean of +1/-1/0 sentiment scores. Raises ZeroDivisionError
    for an empty list.
    """
    scores = [SENTIMENT_SCORES.get(c.sentiment, 0) for c in complaints]
    return sum(scores) / len(scores)


def sentiment_wording(avg: float) -> str:
    if avg > 0.1:
        return "Generally Positive"
    if avg < -0.1:
        return "Strongly Negative"
    return "Mixed/Neutral"


def generate_smart_report(complaints: Sequence[Complaint],
                          analytics: Optional[AnalyticsSnapshot] = None,
                          trends: Optional[Sequence] = None) -> str:
    analytics = analytics or MOCK_ANALYTICS
    total = len(complaints)
    top = most_common_category(complaints)
    top_name = category_display_name(top)
    avg = average_sentiment(complaints)
    urgent_count = sum(1 for c in complaints if c.priority == "urgent")

    water = predict_next_month_trend("water", trends).message
    electricity = predict_next_month_trend("electricity", trends).message

    return f"""📊 AI Generated Monthly Report (Realistic Analysis)

📈 Executive Summary (Last Month):
• Total complaints received: {total}
• Most pressing issue (Volume): {top_name}
• Overall public sentiment: {sentiment_wording(avg)}
• Critical cases (Urgent priority): {urgent_count}

🔮 Predictive Insights (Next Month):
• Water Supply: {water}
• Electricity: {electricity}

🔍 Detailed Analysis:
• The high volume in {top_name} ({analytics.category_breakdown.get(top, 0)} cases) coupled with the strong negative sentiment suggests a severe bottleneck in handling this specific service.
• **Actionable Alert**: The predictive model suggests that Water and Electricity complaints follow seasonal trends, with the steepest rise observed in the last two months leading into summer. This requires pre-emptive maintenance and increased staffing capacity in the respective control rooms.

💡 Recommendations:
1. Immediately audit the resolution process for {top_name} complaints.
2. Pre-stock essential maintenance supplies (e.g., transformers, pipes) in high-risk districts (e.g., Bhopal, Gwalior).
3. Launch a proactive public communication campaign about expected seasonal issues."""
