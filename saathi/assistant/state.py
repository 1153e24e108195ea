"""
Assistant widget state and the reducer that moves it between phases.

    idle -> listening -> transcribing -> sent -> awaiting_reply -> idle

Typed messages skip straight to "sent". Every transition goes through
``reduce``; the widget never mutates state in place.
"""

from datetime import datetime
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

TYPING_ID = "typing"
LISTENING_PROMPT = "🎤 Listening... Please speak now."


class Phase(str, Enum):
    IDLE = "idle"
    LISTENING = "listening"
    TRANSCRIBING = "transcribing"
    SENT = "sent"
    AWAITING_REPLY = "awaiting_reply"


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: str  # "user" | "ai"
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)
    is_voice: bool = False


class AssistantState(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: Phase = Phase.IDLE
    messages: Tuple[ChatMessage, ...] = ()
    input_value: str = ""
    live_transcription: str = ""
    conversation_id: Optional[str] = None
    language_tag: str = "hi-IN"
    is_speaking: bool = False
    voice_supported: bool = False

    @property
    def is_listening(self) -> bool:
        return self.phase in (Phase.LISTENING, Phase.TRANSCRIBING)


# Events

class InputChanged(NamedTuple):
    text: str

class ListeningStarted(NamedTuple):
    pass

class InterimResult(NamedTuple):
    text: str

class FinalResult(NamedTuple):
    text: str

class RecognitionFailed(NamedTuple):
    message: str

class RecognitionEnded(NamedTuple):
    pass

class LiveCleared(NamedTuple):
    pass

class MessagePosted(NamedTuple):
    message: ChatMessage

class MessageSubmitted(NamedTuple):
    message: ChatMessage

class RequestStarted(NamedTuple):
    placeholder: ChatMessage

class ReplyReceived(NamedTuple):
    conversation_id: Optional[str]
    message: ChatMessage

class ReplyFailed(NamedTuple):
    message: ChatMessage

class SpeakingChanged(NamedTuple):
    speaking: bool

class LanguageChanged(NamedTuple):
    language_tag: str


Event = Union[
    InputChanged, ListeningStarted, InterimResult, FinalResult, RecognitionFailed,
    RecognitionEnded, LiveCleared, MessagePosted, MessageSubmitted, RequestStarted,
    ReplyReceived, ReplyFailed, SpeakingChanged, LanguageChanged,
]


def _without_typing(messages):
    return tuple(m for m in messages if m.id != TYPING_ID)


def reduce(state: AssistantState, event: Event) -> AssistantState:
    if isinstance(event, InputChanged):
        return state.model_copy(update={"input_value": event.text})

    if isinstance(event, ListeningStarted):
        return state.model_copy(update={
            "phase": Phase.LISTENING,
            "input_value": "",
            "live_transcription": LISTENING_PROMPT,
        })

    if isinstance(event, InterimResult):
        return state.model_copy(update={
            "phase": Phase.TRANSCRIBING,
            "live_transcription": event.text or "...",
        })

    if isinstance(event, FinalResult):
        return state.model_copy(update={
            "phase": Phase.SENT,
            "input_value": event.text,
            "live_transcription": event.text,
        })

    if isinstance(event, RecognitionFailed):
        return state.model_copy(update={
            "phase": Phase.IDLE,
            "live_transcription": event.message,
        })

    if isinstance(event, RecognitionEnded):
        # A finalized transcript keeps its phase until it is submitted.
        if state.is_listening:
            return state.model_copy(update={"phase": Phase.IDLE})
        return state

    if isinstance(event, LiveCleared):
        return state.model_copy(update={"live_transcription": ""})

    if isinstance(event, MessagePosted):
        return state.model_copy(update={"messages": state.messages + (event.message,)})

    if isinstance(event, MessageSubmitted):
        return state.model_copy(update={
            "phase": Phase.SENT,
            "messages": state.messages + (event.message,),
            "input_value": "",
        })

    if isinstance(event, RequestStarted):
        return state.model_copy(update={
            "phase": Phase.AWAITING_REPLY,
            "messages": state.messages + (event.placeholder,),
        })

    if isinstance(event, ReplyReceived):
        return state.model_copy(update={
            "phase": Phase.IDLE,
            "conversation_id": event.conversation_id,
            "messages": _without_typing(state.messages) + (event.message,),
        })

    if isinstance(event, ReplyFailed):
        return state.model_copy(update={
            "phase": Phase.IDLE,
            "messages": _without_typing(state.messages) + (event.message,),
        })

    if isinstance(event, SpeakingChanged):
        return state.model_copy(update={"is_speaking": event.speaking})

    if isinstance(event, LanguageChanged):
        return state.model_copy(update={"language_tag": event.language_tag})

    raise TypeError(f"Unknown assistant event: {event!r}")
