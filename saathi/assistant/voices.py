import re
from typing import Optional, Sequence

from saathi.assistant.speech.interface import Voice

# Checked in order: Perso-Arabic first so Urdu text is not read as Hindi.
SCRIPT_LANGUAGES = [
    (re.compile("[\u0600-\u06FF]"), "ur-IN"),   # Urdu / Arabic (Kashmiri, Sindhi)
    (re.compile("[\u0900-\u097F]"), "hi-IN"),   # Devanagari
    (re.compile("[\u0980-\u09FF]"), "bn-IN"),   # Bengali / Assamese
    (re.compile("[\u0A00-\u0A7F]"), "pa-IN"),   # Gurmukhi
    (re.compile("[\u0A80-\u0AFF]"), "gu-IN"),   # Gujarati
    (re.compile("[\u0B00-\u0B7F]"), "or-IN"),   # Odia
    (re.compile("[\u0B80-\u0BFF]"), "ta-IN"),   # Tamil
    (re.compile("[\u0C00-\u0C7F]"), "te-IN"),   # Telugu
    (re.compile("[\u0C80-\u0CFF]"), "kn-IN"),   # Kannada
    (re.compile("[\u0D00-\u0D7F]"), "ml-IN"),   # Malayalam
    (re.compile("[\uABC0-\uABFF]"), "mni-IN"),  # Meetei Mayek
    (re.compile("[\u1C50-\u1C7F]"), "sat-IN"),  # Ol Chiki
]
DEFAULT_LANGUAGE = "en-US"

LANGUAGE_OPTIONS = [
    ("hi-IN", "हिंदी (Hindi)"),
    ("en-IN", "English (Indian)"),
    ("mr-IN", "मराठी (Marathi)"),
    ("ta-IN", "தமிழ் (Tamil)"),
    ("te-IN", "తెలుగు (Telugu)"),
    ("kn-IN", "ಕನ್ನಡ (Kannada)"),
    ("ml-IN", "മലയാളം (Malayalam)"),
    ("bn-IN", "বাংলা (Bengali)"),
    ("pa-IN", "ਪੰਜਾਬੀ (Punjabi)"),
    ("gu-IN", "ગુજરાતી (Gujarati)"),
    ("ur-IN", "اردو (Urdu)"),
    ("or-IN", "ଓଡ଼ିଆ (Odia)"),
]


def detect_content_language(text: str) -> str:
    for pattern, tag in SCRIPT_LANGUAGES:
        if pattern.search(text or ""):
            return tag
    return DEFAULT_LANGUAGE


def best_voice_for_lang(lang_code: str, voices: Sequence[Voice]) -> Optional[Voice]:
    """
    Pick a voice for lang_code, falling back through:
    exact tag prefix, base language prefix, base language anywhere in name or
    lang, any Indian-region voice, first English voice, first voice.
    """
    if not voices:
        return None

    tag = lang_code.lower()
    base = tag.split("-")[0]

    def lang(v):
        return (v.lang or "").lower()

    for match in (
        lambda v: lang(v).startswith(tag),
        lambda v: lang(v).startswith(base),
        lambda v: base in (v.name or "").lower() or base in lang(v),
        lambda v: "-in" in lang(v),
        lambda v: lang(v).startswith("en"),
    ):
        found = next((v for v in voices if match(v)), None)
        if found is not None:
            return found
    return voices[0]
