"""
Plotly figure builders and card data for the analytics dashboard.
"""

from typing import Dict, List

import pandas as pd
import plotly.express as px

from saathi.analysis.trend import ALERT_COLORS
from saathi.data.fixtures import (
    CATEGORY_COLORS, MOCK_ANALYTICS, MOCK_DISTRICTS, PRIORITY_COLORS, SENTIMENT_COLORS,
    AnalyticsSnapshot, find_district,
)

def category_label(category: str) -> str:
    # "waste-management" -> "Waste Management"
    return category.replace("-", " ").title()

def stat_cards(analytics: AnalyticsSnapshot = MOCK_ANALYTICS) -> List[Dict]:
    total = analytics.total_complaints
    resolved = analytics.resolved_complaints
    rate = round(resolved / total * 100) if total else 0
    return [
        {"title": "Total Complaints", "value": total, "trend": 12, "is_positive": False},
        {"title": "Resolved Cases", "value": resolved, "trend": 8, "is_positive": True},
        {"title": "Pending Cases", "value": analytics.pending_complaints, "trend": 5, "is_positive": False},
        {"title": "Resolution Rate", "value": f"{rate}%", "trend": 3, "is_positive": True},
    ]

def category_frame(analytics: AnalyticsSnapshot = MOCK_ANALYTICS) -> pd.DataFrame:
    rows = [
        {"category": category_label(c), "count": n, "color": CATEGORY_COLORS[c]}
        for c, n in analytics.category_breakdown.items()
    ]
    return pd.DataFrame(rows)

def plot_category_bar(analytics: AnalyticsSnapshot = MOCK_ANALYTICS):
    df = category_frame(analytics)
    color_map = dict(zip(df["category"], df["color"]))
    fig = px.bar(df, x="category", y="count", color="category", color_discrete_map=color_map)
    fig.update_layout(margin=dict(l=10, r=10, t=10, b=10), showlegend=False)
    return fig

def plot_sentiment_pie(analytics: AnalyticsSnapshot = MOCK_ANALYTICS):
    df = pd.DataFrame({
        "Sentiment": [s.capitalize() for s in ("positive", "negative", "neutral")],
        "Count": [analytics.sentiment_breakdown.get(s, 0) for s in ("positive", "negative", "neutral")],
    })
    color_map = {k.capitalize(): v for k, v in SENTIMENT_COLORS.items()}
    fig = px.pie(df, names="Sentiment", values="Count",
                 color="Sentiment", color_discrete_map=color_map)
    fig.update_traces(textinfo="label+percent")
    fig.update_layout(margin=dict(l=10, r=10, t=10, b=10))
    return fig

def plot_priority_pie(analytics: AnalyticsSnapshot = MOCK_ANALYTICS):
    df = pd.DataFrame({
        "Priority": [p.capitalize() for p in analytics.priority_breakdown],
        "Count": list(analytics.priority_breakdown.values()),
    })
    color_map = {k.capitalize(): v for k, v in PRIORITY_COLORS.items()}
    fig = px.pie(df, names="Priority", values="Count", hole=0.45,
                 color="Priority", color_discrete_map=color_map)
    fig.update_traces(textinfo="label+percent")
    fig.update_layout(margin=dict(l=10, r=10, t=10, b=10))
    return fig

def trends_frame(analytics: AnalyticsSnapshot = MOCK_ANALYTICS) -> pd.DataFrame:
    return pd.DataFrame([t.model_dump() for t in analytics.monthly_trends])

def plot_monthly_trends(analytics: AnalyticsSnapshot = MOCK_ANALYTICS):
    df = trends_frame(analytics).rename(columns={"complaints": "Complaints", "resolved": "Resolved"})
    fig = px.line(df, x="month", y=["Complaints", "Resolved"],
                  color_discrete_map={"Complaints": "#ef4444", "Resolved": "#22c55e"})
    fig.update_traces(line=dict(width=3))
    fig.update_layout(margin=dict(l=10, r=10, t=10, b=10), legend_title_text="")
    return fig

def districts_frame() -> pd.DataFrame:
    return pd.DataFrame([
        {"district": d.name, "lat": d.coordinates[0], "lon": d.coordinates[1],
         "complaints": d.complaints, "avg_sentiment": d.avg_sentiment}
        for d in MOCK_DISTRICTS
    ])

def prediction_color(alert: str) -> str:
    return ALERT_COLORS.get(alert, ALERT_COLORS["neutral"])

def priority_hotspot(name: str = "Gwalior") -> str:
    district = find_district(name)
    if district is None:
        return ""
    return (
        f"{district.name} District has the lowest average sentiment ({district.avg_sentiment}) "
        f"and high volume of 'Urgent' complaints, signaling a critical need for attention."
    )
