import os
from typing import Iterator, Optional
try:
    from faster_whisper import WhisperModel
except ImportError:
    WhisperModel = None

from .interface import RecognitionResult, SpeechRecognitionError, SpeechRecognizer
from saathi.utils import get_logger

logger = get_logger(__name__)

class WhisperRecognizer(SpeechRecognizer):
    """
    Speech-to-text over a recorded audio file. Each decoded segment is
    reported as an interim result and the joined text as the final one.
    """

    def __init__(self, model_size: str = "small", device: str = "cpu", compute_type: str = "int8"):
        self.model = None
        self.audio_path: Optional[str] = None
        self.lang = None
        self.active = False
        if WhisperModel:
            try:
                logger.info(f"Loading Whisper model '{model_size}' on {device}...")
                self.model = WhisperModel(model_size, device=device, compute_type=compute_type)
            except Exception as e:
                logger.error(f"Failed to load Whisper model: {e}")
        else:
            logger.error("faster_whisper not installed.")

    def set_audio(self, audio_path: str) -> None:
        self.audio_path = audio_path

    def start(self, lang: str) -> None:
        if not self.model:
            raise SpeechRecognitionError("service-not-allowed", "Whisper model not loaded.")
        self.lang = lang
        self.active = True

    def results(self) -> Iterator[RecognitionResult]:
        if not self.audio_path or not os.path.exists(self.audio_path):
            self.active = False
            raise SpeechRecognitionError("audio-capture", f"Audio file not found: {self.audio_path}")

        # "hi-IN" -> "hi"
        language = (self.lang or "").split("-")[0].lower() or None
        try:
            segments_raw, info = self.model.transcribe(
                self.audio_path,
                language=language,
                vad_filter=True,
                vad_parameters=dict(min_silence_duration_ms=500),
                condition_on_previous_text=False,
            )
            parts = []
            # segments_raw is a generator, decoding happens while iterating
            for seg in segments_raw:
                if not self.active:
                    return
                text = seg.text.strip()
                if text:
                    parts.append(text)
                    yield RecognitionResult(" ".join(parts), False)
        except SpeechRecognitionError:
            raise
        except Exception as e:
            self.active = False
            logger.error(f"Whisper transcription failed: {e}")
            raise SpeechRecognitionError("network", str(e))

        self.active = False
        if not parts:
            raise SpeechRecognitionError("no-speech")
        yield RecognitionResult(" ".join(parts), True)

    def stop(self) -> None:
        self.active = False
