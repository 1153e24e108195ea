import threading
import time
import uuid
from typing import Callable, Optional

from saathi.assistant.client import ChatClient, ChatError
from saathi.assistant.speech.interface import (
    SpeechRecognitionError, SpeechRecognizer, SpeechSynthesizer, Utterance,
)
from saathi.assistant.state import (
    TYPING_ID, AssistantState, ChatMessage, FinalResult, InputChanged, InterimResult,
    LanguageChanged, ListeningStarted, LiveCleared, MessagePosted, MessageSubmitted,
    RecognitionEnded, RecognitionFailed, ReplyFailed, ReplyReceived, RequestStarted,
    SpeakingChanged, reduce,
)
from saathi.assistant.voices import best_voice_for_lang, detect_content_language
from saathi.config import CONFIG, AppConfig
from saathi.utils import get_logger

logger = get_logger(__name__)

WELCOME_ID = "welcome-1"
WELCOME_MESSAGE = (
    "नमस्कार! मैं आपका डिजिटल साथी हूं। मैं हिंदी में बात कर सकता हूं और समझ सकता हूं। "
    "मैं आपकी कैसे मदद कर सकता हूं?"
)
TYPING_MESSAGE = "टाइप कर रहा है..."
MIC_ERROR_MESSAGE = "Sorry, there was an issue with the microphone. Please check permissions and try again."
RECOGNITION_START_ERROR = "वॉयस रिकग्निशन शुरू करने में त्रुटि।"
UNKNOWN_ERROR = "अज्ञात"

QUICK_ACTIONS = [
    "💡 बिजली की शिकायत करनी है",
    "📚 छात्रवृत्ति की जानकारी",
    "🖥️ मेरा ऐप काम नहीं कर रहा है",
    "🚨 नजदीकी पुलिस कहाँ है",
    "💦 पानी की समस्या की शिकायत",
    "🏘️ पीएम आवास योजना की जानकारी",
]

Schedule = Callable[[float, Callable[[], None]], None]


def timer_schedule(delay: float, fn: Callable[[], None]) -> None:
    timer = threading.Timer(delay, fn)
    timer.daemon = True
    timer.start()

def blocking_schedule(delay: float, fn: Callable[[], None]) -> None:
    time.sleep(delay)
    fn()

def immediate_schedule(delay: float, fn: Callable[[], None]) -> None:
    fn()


def fallback_error_message(error: Optional[BaseException]) -> str:
    detail = f"{str(error)[:30]}..." if isinstance(error, BaseException) else UNKNOWN_ERROR
    return f"मैं आपकी मदद नहीं कर पा रहा हूं। कृपया कुछ समय बाद फिर कोशिश करें। (त्रुटि: {detail})"


def _new_id() -> str:
    return uuid.uuid4().hex


class AssistantWidget:
    """
    Voice/text chat assistant. Owns one AssistantState and drives the
    injected recognizer, synthesizer and chat client.
    """

    def __init__(self,
                 recognizer: Optional[SpeechRecognizer] = None,
                 synthesizer: Optional[SpeechSynthesizer] = None,
                 client: Optional[ChatClient] = None,
                 config: AppConfig = None,
                 schedule: Schedule = timer_schedule):
        self.config = config or CONFIG
        self.recognizer = recognizer
        self.synthesizer = synthesizer
        self.client = client or ChatClient(self.config.chat_api_url, self.config.user_id,
                                           self.config.chat_timeout_s)
        self.schedule = schedule
        self._lock = threading.RLock()
        self.state = AssistantState(
            language_tag=self.config.default_language,
            voice_supported=recognizer is not None,
        )

    def dispatch(self, event) -> AssistantState:
        with self._lock:
            self.state = reduce(self.state, event)
            logger.debug(f"{type(event).__name__} -> {self.state.phase.value}")
            return self.state

    # Lifecycle

    def open(self) -> None:
        if self.state.messages:
            return
        welcome = ChatMessage(id=WELCOME_ID, type="ai", content=WELCOME_MESSAGE)
        self.dispatch(MessagePosted(welcome))
        self.schedule(self.config.welcome_delay, lambda: self.speak_text(welcome.content))

    def set_input(self, text: str) -> None:
        self.dispatch(InputChanged(text))

    def set_language(self, language_tag: str) -> None:
        # The recognizer picks up the new language on its next start.
        if self.state.is_listening and self.recognizer:
            self.recognizer.stop()
            self.dispatch(RecognitionEnded())
        self.dispatch(LanguageChanged(language_tag))
        logger.info(f"Assistant language set to {language_tag}")

    # Speech-to-text

    def toggle_voice_input(self) -> None:
        if not self.state.voice_supported:
            logger.error("Voice recognition is not supported in this environment.")
            return

        if self.state.is_listening:
            self.recognizer.stop()
            self.dispatch(RecognitionEnded())
            return

        self.dispatch(InputChanged(""))
        self.dispatch(LiveCleared())
        try:
            self.recognizer.start(self.state.language_tag)
        except Exception as e:
            logger.error(f"Could not start voice recognition: {e}")
            self.dispatch(RecognitionFailed(RECOGNITION_START_ERROR))
            return

        self.dispatch(ListeningStarted())
        self._consume_results()

    def _consume_results(self) -> None:
        try:
            for result in self.recognizer.results():
                transcript = result.transcript
                if result.is_final and transcript.strip():
                    self.recognizer.stop()
                    self.dispatch(FinalResult(transcript))
                    self.schedule(self.config.submit_delay, lambda: self._submit_voice(transcript))
                    return
                if not result.is_final:
                    self.dispatch(InterimResult(transcript))
        except SpeechRecognitionError as e:
            logger.error(f"Speech recognition error: {e.error}")
            self.dispatch(RecognitionFailed(MIC_ERROR_MESSAGE))
            self.schedule(self.config.error_clear_delay, lambda: self.dispatch(LiveCleared()))
            return
        self.dispatch(RecognitionEnded())

    def _submit_voice(self, transcript: str) -> None:
        self.dispatch(LiveCleared())
        self.send_message(transcript, is_voice=True)

    # Chat

    def send_message(self, text: Optional[str] = None, is_voice: bool = False) -> Optional[ChatMessage]:
        text = text or self.state.input_value
        if not text.strip():
            return None

        self.stop_speaking()
        self.dispatch(MessageSubmitted(ChatMessage(id=_new_id(), type="user", content=text, is_voice=is_voice)))
        self.speak_text(text)
        self.dispatch(RequestStarted(ChatMessage(id=TYPING_ID, type="ai", content=TYPING_MESSAGE)))

        try:
            reply = self.client.send(text, self.state.conversation_id, self.state.language_tag)
        except ChatError as e:
            logger.error(f"Failed to send message: {e}")
            error_message = ChatMessage(id=_new_id(), type="ai", content=fallback_error_message(e))
            self.dispatch(ReplyFailed(error_message))
            self.speak_text(error_message.content)
            return error_message

        ai_message = ChatMessage(id=_new_id(), type="ai", content=reply.ai_response)
        self.dispatch(ReplyReceived(reply.conversation_id, ai_message))
        self.schedule(self.config.reply_speak_delay, lambda: self.speak_text(ai_message.content))
        return ai_message

    # Text-to-speech

    def speak_text(self, text: str) -> Optional[Utterance]:
        if not text:
            return None
        if self.synthesizer is None:
            logger.warning("No speech synthesizer available")
            return None

        self.synthesizer.cancel()
        self.dispatch(SpeakingChanged(True))

        lang_hint = detect_content_language(text)
        voice = best_voice_for_lang(lang_hint, self.synthesizer.get_voices())
        utterance = Utterance(
            text=text,
            # Keep voice and language tag consistent when a voice was found
            lang=(voice.lang or lang_hint) if voice else lang_hint,
            voice=voice,
            rate=self.config.speech_rate,
            pitch=self.config.speech_pitch,
            volume=self.config.speech_volume,
        )
        try:
            self.synthesizer.speak(utterance)
        except Exception as e:
            logger.error(f"Speech synthesis error: {e}")
        finally:
            self.dispatch(SpeakingChanged(False))
        return utterance

    def stop_speaking(self) -> None:
        if self.synthesizer is not None:
            self.synthesizer.cancel()
            self.dispatch(SpeakingChanged(False))


def build_widget(config: AppConfig = None, schedule: Schedule = timer_schedule) -> AssistantWidget:
    """Create a widget with the speech engines named in the config."""
    config = config or CONFIG

    recognizer = None
    if config.stt_engine == "whisper_local":
        from saathi.assistant.speech.whisper_stt import WhisperRecognizer
        recognizer = WhisperRecognizer(config.whisper_model)
    elif config.stt_engine == "mock":
        from saathi.assistant.speech.mock import MockRecognizer
        recognizer = MockRecognizer()
    else:
        logger.warning(f"STT engine '{config.stt_engine}' not available, voice input disabled.")

    synthesizer = None
    if config.tts_engine == "pyttsx3":
        from saathi.assistant.speech.pyttsx3_tts import Pyttsx3Synthesizer
        try:
            synthesizer = Pyttsx3Synthesizer()
        except Exception as e:
            logger.warning(f"pyttsx3 unavailable ({e}), speech output disabled.")
    elif config.tts_engine == "mock":
        from saathi.assistant.speech.mock import MockSynthesizer
        synthesizer = MockSynthesizer()
    else:
        logger.warning(f"TTS engine '{config.tts_engine}' not available, speech output disabled.")

    return AssistantWidget(recognizer, synthesizer, config=config, schedule=schedule)
