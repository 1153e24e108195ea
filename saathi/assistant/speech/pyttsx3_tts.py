from typing import List
try:
    import pyttsx3
except ImportError:
    pyttsx3 = None

from .interface import SpeechSynthesizer, Utterance, Voice
from saathi.utils import get_logger

logger = get_logger(__name__)

def _voice_lang(raw) -> str:
    # Drivers report languages as str or as bytes like b"\x05en-us"
    langs = getattr(raw, "languages", None) or []
    if not langs:
        return ""
    lang = langs[0]
    if isinstance(lang, bytes):
        lang = lang.decode("utf-8", errors="ignore").lstrip("\x00\x01\x02\x03\x04\x05")
    return str(lang).replace("_", "-")

class Pyttsx3Synthesizer(SpeechSynthesizer):
    BASE_RATE = 175  # words per minute at rate 1.0

    def __init__(self):
        if pyttsx3 is None:
            raise RuntimeError("pyttsx3 not installed.")
        self.engine = pyttsx3.init()

    def get_voices(self) -> List[Voice]:
        voices = []
        for raw in self.engine.getProperty("voices") or []:
            voices.append(Voice(name=raw.name or "", lang=_voice_lang(raw), id=raw.id))
        return voices

    def speak(self, utterance: Utterance) -> None:
        if utterance.voice is not None and utterance.voice.id:
            self.engine.setProperty("voice", utterance.voice.id)
        self.engine.setProperty("rate", int(self.BASE_RATE * utterance.rate))
        self.engine.setProperty("volume", utterance.volume)
        logger.debug(f"Speaking {len(utterance.text)} chars as {utterance.lang}")
        self.engine.say(utterance.text)
        self.engine.runAndWait()

    def cancel(self) -> None:
        self.engine.stop()
