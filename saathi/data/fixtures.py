"""
Static fixtures for the dashboard.

The analytics aggregates are hard-coded independently of the sample
complaints and are not expected to agree with them.
"""

from datetime import datetime
from typing import Dict, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict

ServiceCategory = Literal[
    "electricity", "water", "healthcare", "roads", "education",
    "waste-management", "transportation", "other",
]
Sentiment = Literal["positive", "negative", "neutral"]
Priority = Literal["low", "medium", "high", "urgent"]
Status = Literal["pending", "in-progress", "resolved"]

# Enumeration order matters: the report composer breaks ties with it.
CATEGORIES: Tuple[str, ...] = (
    "electricity", "water", "healthcare", "roads", "education",
    "waste-management", "transportation", "other",
)
PRIORITIES: Tuple[str, ...] = ("low", "medium", "high", "urgent")
SENTIMENTS: Tuple[str, ...] = ("positive", "negative", "neutral")


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    district: str
    coordinates: Tuple[float, float]


class Complaint(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    category: ServiceCategory
    location: Location
    timestamp: datetime
    sentiment: Sentiment
    priority: Priority
    status: Status
    user_id: str
    user_name: str


class MonthlyTrend(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: str
    complaints: int
    resolved: int
    water: int
    electricity: int


class AnalyticsSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_complaints: int
    resolved_complaints: int
    pending_complaints: int
    sentiment_breakdown: Dict[str, int]
    category_breakdown: Dict[str, int]
    priority_breakdown: Dict[str, int]
    monthly_trends: List[MonthlyTrend]


class District(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    coordinates: Tuple[float, float]
    complaints: int
    avg_sentiment: float


MOCK_COMPLAINTS: List[Complaint] = [
    Complaint(
        id="1",
        title="Frequent Power Outages in Sector 15",
        description=(
            "We are experiencing daily power cuts for 4-6 hours. This is affecting our work "
            "and daily life significantly. Please look into this urgent matter."
        ),
        category="electricity",
        location=Location(district="Bhopal", coordinates=(23.2599, 77.4126)),
        timestamp=datetime(2024, 1, 15),
        sentiment="negative",
        priority="high",
        status="in-progress",
        user_id="user1",
        user_name="Rajesh Sharma",
    ),
    Complaint(
        id="2",
        title="Water Quality Issues in North Nazimabad",
        description=(
            "The water supply has been contaminated for the past week. Many residents are "
            "falling sick. We need immediate action."
        ),
        category="water",
        location=Location(district="Indore", coordinates=(22.7196, 75.8577)),
        timestamp=datetime(2024, 1, 14),
        sentiment="negative",
        priority="urgent",
        status="pending",
        user_id="user2",
        user_name="Priya Verma",
    ),
    Complaint(
        id="3",
        title="Excellent Healthcare Service at DHQ Hospital",
        description=(
            "I want to appreciate the excellent service provided by the medical staff at DHQ "
            "Hospital. They were very professional and caring."
        ),
        category="healthcare",
        location=Location(district="Gwalior", coordinates=(26.2183, 78.1828)),
        timestamp=datetime(2024, 1, 13),
        sentiment="positive",
        priority="low",
        status="resolved",
        user_id="user3",
        user_name="Sunil Kumar",
    ),
    Complaint(
        id="4",
        title="Damaged Roads Need Urgent Repair",
        description=(
            "The main road in our area has large potholes that are causing accidents. Several "
            "vehicles have been damaged already."
        ),
        category="roads",
        location=Location(district="Jabalpur", coordinates=(23.1815, 79.9864)),
        timestamp=datetime(2024, 1, 12),
        sentiment="negative",
        priority="high",
        status="pending",
        user_id="user4",
        user_name="Kiran Devi",
    ),
    Complaint(
        id="5",
        title="School Infrastructure Improvements Needed",
        description=(
            "Our local school needs better facilities including proper desks, clean washrooms, "
            "and library resources for students."
        ),
        category="education",
        location=Location(district="Indore", coordinates=(22.7196, 75.8577)),
        timestamp=datetime(2024, 1, 11),
        sentiment="neutral",
        priority="medium",
        status="in-progress",
        user_id="user5",
        user_name="Mohammad Tariq",
    ),
]

# Monthly trends lead into peak heat (May-Jul); the last three rows stand in
# for the current period the predictor looks at.
_MONTHLY_ROWS = [
    ("Oct", 120, 90, 25, 30),
    ("Nov", 110, 85, 20, 25),
    ("Dec", 100, 75, 18, 20),
    ("Jan", 130, 105, 22, 35),
    ("Feb", 145, 110, 28, 40),
    ("Mar", 160, 120, 35, 45),
    ("Apr", 180, 130, 45, 55),
    ("May", 220, 150, 60, 70),
    ("Jun", 200, 140, 55, 65),
    ("Jul", 190, 145, 50, 60),
    ("Aug", 180, 150, 45, 55),
    ("Sep", 170, 140, 40, 50),
]

MOCK_ANALYTICS = AnalyticsSnapshot(
    total_complaints=1550,
    resolved_complaints=1100,
    pending_complaints=450,
    sentiment_breakdown={"positive": 200, "negative": 950, "neutral": 400},
    category_breakdown={
        "electricity": 450,
        "water": 350,
        "healthcare": 180,
        "roads": 250,
        "education": 150,
        "waste-management": 80,
        "transportation": 60,
        "other": 30,
    },
    priority_breakdown={"low": 250, "medium": 500, "high": 450, "urgent": 350},
    monthly_trends=[
        MonthlyTrend(month=m, complaints=c, resolved=r, water=w, electricity=e)
        for m, c, r, w, e in _MONTHLY_ROWS
    ],
)

MOCK_DISTRICTS: List[District] = [
    District(name="Bhopal", coordinates=(23.2599, 77.4126), complaints=420, avg_sentiment=-0.45),
    District(name="Indore", coordinates=(22.7196, 75.8577), complaints=380, avg_sentiment=-0.35),
    District(name="Gwalior", coordinates=(26.2183, 78.1828), complaints=250, avg_sentiment=-0.55),
    District(name="Jabalpur", coordinates=(23.1815, 79.9864), complaints=190, avg_sentiment=0.15),
    District(name="Ujjain", coordinates=(23.1765, 75.7885), complaints=150, avg_sentiment=0.05),
    District(name="Rewa", coordinates=(24.5385, 81.2985), complaints=90, avg_sentiment=0.25),
    District(name="Sagar", coordinates=(23.8385, 78.7378), complaints=70, avg_sentiment=-0.15),
]

CATEGORY_COLORS: Dict[str, str] = {
    "electricity": "#ef4444",
    "water": "#3b82f6",
    "healthcare": "#22c55e",
    "roads": "#f59e0b",
    "education": "#8b5cf6",
    "waste-management": "#06b6d4",
    "transportation": "#f97316",
    "other": "#6b7280",
}

PRIORITY_COLORS: Dict[str, str] = {
    "low": "#22c55e",
    "medium": "#f59e0b",
    "high": "#f97316",
    "urgent": "#ef4444",
}

SENTIMENT_COLORS: Dict[str, str] = {
    "positive": "#22c55e",
    "negative": "#ef4444",
    "neutral": "#6b7280",
}

def find_district(name: str):
    return next((d for d in MOCK_DISTRICTS if d.name == name), None)
