import pytest

from saathi.analysis.classifier import (
    KeywordClassifier, analyze_sentiment, classify_complaint, get_classifier, predict_priority,
)
from saathi.analysis.sentiment import VaderClassifier

def test_end_to_end_road_complaint():
    result = KeywordClassifier().classify("The road is damaged and dangerous")
    assert result == {"category": "roads", "sentiment": "negative", "priority": "urgent"}

@pytest.mark.parametrize("text, expected", [
    ("The staff were helpful and professional", "positive"),
    ("Broken pipes, contaminated water", "negative"),
    ("Good effort but the pole is still broken", "neutral"),
    ("Please check the meter reading", "neutral"),
    ("", "neutral"),
])
def test_sentiment_majority_and_ties(text, expected):
    assert analyze_sentiment(text) == expected

def test_sentiment_is_case_insensitive():
    assert analyze_sentiment("EXCELLENT work, THANK you") == "positive"

def test_sentiment_counts_each_keyword_once():
    # "bad" three times is still one negative match against two positive ones
    assert analyze_sentiment("bad bad bad, but good and helpful") == "positive"

def test_category_first_match_wins():
    # both water and power keywords present: electricity is checked first
    assert classify_complaint("No water and no power since Monday") == "electricity"

@pytest.mark.parametrize("text, expected", [
    ("Frequent outage in sector 15", "electricity"),
    ("Water supply is irregular", "water"),
    ("The hospital has no doctors", "healthcare"),
    ("Huge pothole near the market", "roads"),
    ("The teacher did not come", "education"),
    ("Garbage has not been collected", "waste-management"),
    ("The bus never arrives on time", "transportation"),
    ("Noise from the neighbours at night", "other"),
])
def test_category_keywords(text, expected):
    assert classify_complaint(text) == expected

def test_urgent_priority_wins_over_other_tiers():
    assert predict_priority("A serious, moderate and major emergency") == "urgent"

@pytest.mark.parametrize("text, expected", [
    ("This is life-threatening", "urgent"),
    ("A significant delay in repairs", "high"),
    ("The situation is concerning", "medium"),
    ("This needs attention soon", "medium"),
    ("Streetlight flickers sometimes", "low"),
])
def test_priority_tiers(text, expected):
    assert predict_priority(text) == expected

def test_get_classifier_by_name():
    assert isinstance(get_classifier("keyword"), KeywordClassifier)
    assert isinstance(get_classifier("vader"), VaderClassifier)
    # unknown names fall back to the keyword classifier
    assert isinstance(get_classifier("bert"), KeywordClassifier)

def test_vader_classifier():
    clf = VaderClassifier()
    res = clf.sentiment("I am very happy with this service.")
    assert res["label"] == "positive"
    assert res["score"] > 0

    assert clf.sentiment("This is terrible.")["label"] == "negative"
    assert clf.sentiment("   ")["label"] == "neutral"

    result = clf.classify("The road is damaged and dangerous")
    assert result["category"] == "roads"
    assert result["priority"] == "urgent"
    assert set(result) == {"sentiment", "category", "priority"}
