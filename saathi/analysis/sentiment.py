from typing import Dict

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer as VaderAnalyzer

from saathi.analysis.classifier import ComplaintClassifier, classify_complaint, predict_priority
from saathi.utils import get_logger

logger = get_logger(__name__)

class VaderClassifier(ComplaintClassifier):
    """
    Drop-in replacement for the keyword classifier that scores sentiment with
    VADER. Category and priority stay keyword based.
    """

    THRESHOLD = 0.05

    def __init__(self):
        self.vader = VaderAnalyzer()

    def sentiment(self, text: str) -> Dict:
        """
        Returns: {"label": "positive"/"neutral"/"negative", "score": float}
        """
        if not text or not text.strip():
            return {"label": "neutral", "score": 0.0}

        comp = self.vader.polarity_scores(text)["compound"]
        if comp >= self.THRESHOLD:
            label = "positive"
        elif comp <= -self.THRESHOLD:
            label = "negative"
        else:
            label = "neutral"
        logger.debug(f"VADER compound={comp:.3f} -> {label}")
        return {"label": label, "score": abs(comp)}

    def classify(self, text: str) -> Dict[str, str]:
        return {
            "sentiment": self.sentiment(text)["label"],
            "category": classify_complaint(text),
            "priority": predict_priority(text),
        }
