import pytest

from saathi.assistant.speech.interface import Voice
from saathi.assistant.voices import best_voice_for_lang, detect_content_language

@pytest.mark.parametrize("text, tag", [
    ("नमस्ते, बिजली नहीं है", "hi-IN"),
    ("آپ کیسے ہیں", "ur-IN"),
    ("வணக்கம்", "ta-IN"),
    ("నమస్కారం", "te-IN"),
    ("ನಮಸ್ಕಾರ", "kn-IN"),
    ("നമസ്കാരം", "ml-IN"),
    ("নমস্কার", "bn-IN"),
    ("ਸਤ ਸ੍ਰੀ ਅਕਾਲ", "pa-IN"),
    ("નમસ્તે", "gu-IN"),
    ("ନମସ୍କାର", "or-IN"),
    ("Power cut since morning", "en-US"),
    ("", "en-US"),
])
def test_detect_content_language(text, tag):
    assert detect_content_language(text) == tag

def test_urdu_is_checked_before_devanagari():
    assert detect_content_language("नमस्ते سلام") == "ur-IN"

def test_exact_tag_match():
    voices = [Voice("US", "en-US"), Voice("Hindi", "hi-IN")]
    assert best_voice_for_lang("hi-IN", voices).name == "Hindi"

def test_base_language_match():
    voices = [Voice("US", "en-US"), Voice("Generic", "hi")]
    assert best_voice_for_lang("hi-IN", voices).name == "Generic"

def test_name_contains_base_language():
    voices = [Voice("US", "en-US"), Voice("hindi female", "")]
    assert best_voice_for_lang("hi-IN", voices).name == "hindi female"

def test_indian_region_fallback():
    voices = [Voice("US", "en-US"), Voice("Heera", "en-IN")]
    assert best_voice_for_lang("ta-IN", voices).name == "Heera"

def test_english_fallback():
    voices = [Voice("Anna", "de-DE"), Voice("Sam", "en-GB")]
    assert best_voice_for_lang("ta-IN", voices).name == "Sam"

def test_first_voice_fallback():
    voices = [Voice("Anna", "de-DE"), Voice("Marie", "fr-FR")]
    assert best_voice_for_lang("ta-IN", voices).name == "Anna"

def test_no_voices():
    assert best_voice_for_lang("hi-IN", []) is None
