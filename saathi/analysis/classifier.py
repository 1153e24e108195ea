from abc import ABC, abstractmethod
from typing import Dict

from saathi.config import CONFIG
from saathi.utils import get_logger

logger = get_logger(__name__)

POSITIVE_WORDS = [
    "good", "excellent", "great", "amazing", "wonderful", "fantastic",
    "appreciate", "thank", "helpful", "professional",
]
NEGATIVE_WORDS = [
    "bad", "terrible", "awful", "horrible", "urgent", "emergency",
    "damaged", "broken", "contaminated", "sick", "dangerous",
]

# Checked in order; the first category with a matching keyword wins.
CATEGORY_KEYWORDS = [
    ("electricity", ["power", "electricity", "outage"]),
    ("water", ["water", "supply", "contaminated"]),
    ("healthcare", ["hospital", "health", "medical"]),
    ("roads", ["road", "pothole", "street"]),
    ("education", ["school", "education", "teacher"]),
    ("waste-management", ["waste", "garbage", "trash"]),
    ("transportation", ["transport", "bus", "train"]),
]
DEFAULT_CATEGORY = "other"

PRIORITY_KEYWORDS = [
    ("urgent", ["urgent", "emergency", "dangerous", "life-threatening", "immediate"]),
    ("high", ["serious", "major", "significant", "important", "critical"]),
    ("medium", ["moderate", "concerning", "needs attention"]),
]
DEFAULT_PRIORITY = "low"


def count_matches(text_lower: str, words) -> int:
    return sum(1 for w in words if w in text_lower)


def analyze_sentiment(text: str) -> str:
    """
    Returns "positive", "negative" or "neutral" depending on which keyword
    list has strictly more substring hits. Ties (including none) are neutral.
    """
    text_lower = (text or "").lower()
    positive_score = count_matches(text_lower, POSITIVE_WORDS)
    negative_score = count_matches(text_lower, NEGATIVE_WORDS)

    if positive_score > negative_score:
        return "positive"
    if negative_score > positive_score:
        return "negative"
    return "neutral"


def classify_complaint(text: str) -> str:
    text_lower = (text or "").lower()
    for category, words in CATEGORY_KEYWORDS:
        if any(w in text_lower for w in words):
            return category
    return DEFAULT_CATEGORY


def predict_priority(text: str) -> str:
    text_lower = (text or "").lower()
    for priority, words in PRIORITY_KEYWORDS:
        if any(w in text_lower for w in words):
            return priority
    return DEFAULT_PRIORITY


class ComplaintClassifier(ABC):
    @abstractmethod
    def classify(self, text: str) -> Dict[str, str]:
        """
        Classify a free-text complaint.
        Returns:
            {"sentiment": "positive"|"negative"|"neutral",
             "category": one of the service categories,
             "priority": "low"|"medium"|"high"|"urgent"}
        """
        pass


class KeywordClassifier(ComplaintClassifier):
    def classify(self, text: str) -> Dict[str, str]:
        return {
            "sentiment": analyze_sentiment(text),
            "category": classify_complaint(text),
            "priority": predict_priority(text),
        }


def get_classifier(name: str = None) -> ComplaintClassifier:
    name = (name or CONFIG.classifier).lower()
    if name == "vader":
        from saathi.analysis.sentiment import VaderClassifier
        return VaderClassifier()
    if name != "keyword":
        logger.warning(f"Classifier '{name}' not available, using keyword classifier.")
    return KeywordClassifier()
