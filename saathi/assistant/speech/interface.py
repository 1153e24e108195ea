from abc import ABC, abstractmethod
from typing import Iterator, List, NamedTuple, Optional


class RecognitionResult(NamedTuple):
    transcript: str
    is_final: bool


class Voice(NamedTuple):
    name: str
    lang: str
    id: Optional[str] = None


class Utterance(NamedTuple):
    text: str
    lang: str
    voice: Optional[Voice] = None
    rate: float = 1.0
    pitch: float = 1.0
    volume: float = 1.0


class SpeechRecognitionError(Exception):
    """Raised by recognizers for permission denial, no speech, engine failure etc."""

    def __init__(self, error: str, message: str = ""):
        super().__init__(message or error)
        self.error = error


class SpeechRecognizer(ABC):
    continuous = True
    interim_results = True

    @abstractmethod
    def start(self, lang: str) -> None:
        """Begin a recognition session in the given BCP-47 language."""
        pass

    @abstractmethod
    def results(self) -> Iterator[RecognitionResult]:
        """
        Yield interim and final results for the current session.
        Raises SpeechRecognitionError when the session fails.
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        pass


class SpeechSynthesizer(ABC):
    @abstractmethod
    def get_voices(self) -> List[Voice]:
        pass

    @abstractmethod
    def speak(self, utterance: Utterance) -> None:
        pass

    @abstractmethod
    def cancel(self) -> None:
        """Stop the utterance in flight, if any."""
        pass
