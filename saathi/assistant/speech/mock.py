from typing import Iterator, List, Optional, Sequence

from .interface import (
    RecognitionResult, SpeechRecognitionError, SpeechRecognizer, SpeechSynthesizer,
    Utterance, Voice,
)


class MockRecognizer(SpeechRecognizer):
    """Plays back a scripted session; an optional error is raised after the script."""

    def __init__(self, script: Sequence[RecognitionResult] = None, error: Optional[str] = None):
        self.script = list(script) if script is not None else [
            RecognitionResult("मेरे इलाके में", False),
            RecognitionResult("मेरे इलाके में बिजली नहीं है", True),
        ]
        self.error = error
        self.lang = None
        self.active = False
        self.start_count = 0
        self.stop_count = 0

    def start(self, lang: str) -> None:
        self.lang = lang
        self.active = True
        self.start_count += 1

    def results(self) -> Iterator[RecognitionResult]:
        for result in self.script:
            if not self.active:
                return
            yield result
        if self.error and self.active:
            self.active = False
            raise SpeechRecognitionError(self.error)

    def stop(self) -> None:
        self.active = False
        self.stop_count += 1


class MockSynthesizer(SpeechSynthesizer):
    def __init__(self, voices: Sequence[Voice] = None):
        self.voices = list(voices) if voices is not None else [
            Voice("Google हिन्दी", "hi-IN"),
            Voice("Microsoft Heera - English (India)", "en-IN"),
            Voice("Google US English", "en-US"),
        ]
        self.spoken: List[Utterance] = []
        self.cancel_count = 0

    def get_voices(self) -> List[Voice]:
        return list(self.voices)

    def speak(self, utterance: Utterance) -> None:
        self.spoken.append(utterance)

    def cancel(self) -> None:
        self.cancel_count += 1
