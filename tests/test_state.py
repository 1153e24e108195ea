import unittest

from pydantic import ValidationError

from saathi.assistant.state import (
    LISTENING_PROMPT, TYPING_ID, AssistantState, ChatMessage, FinalResult, InterimResult,
    LanguageChanged, ListeningStarted, LiveCleared, MessageSubmitted, Phase, RecognitionEnded,
    RecognitionFailed, ReplyFailed, ReplyReceived, RequestStarted, SpeakingChanged, reduce,
)

class TestAssistantReducer(unittest.TestCase):
    def setUp(self):
        self.state = AssistantState()

    def test_voice_session_phases(self):
        s = reduce(self.state, ListeningStarted())
        self.assertEqual(s.phase, Phase.LISTENING)
        self.assertEqual(s.live_transcription, LISTENING_PROMPT)
        self.assertTrue(s.is_listening)

        s = reduce(s, InterimResult("मेरे"))
        self.assertEqual(s.phase, Phase.TRANSCRIBING)
        self.assertEqual(s.live_transcription, "मेरे")

        s = reduce(s, InterimResult(""))
        self.assertEqual(s.live_transcription, "...")

        s = reduce(s, FinalResult("मेरे घर"))
        self.assertEqual(s.phase, Phase.SENT)
        self.assertEqual(s.input_value, "मेरे घर")

        # the recognizer ending after a final result does not drop the pending message
        s = reduce(s, RecognitionEnded())
        self.assertEqual(s.phase, Phase.SENT)

    def test_recognition_end_while_listening_goes_idle(self):
        s = reduce(reduce(self.state, ListeningStarted()), RecognitionEnded())
        self.assertEqual(s.phase, Phase.IDLE)

    def test_recognition_failure(self):
        s = reduce(reduce(self.state, ListeningStarted()), RecognitionFailed("mic error"))
        self.assertEqual(s.phase, Phase.IDLE)
        self.assertEqual(s.live_transcription, "mic error")
        s = reduce(s, LiveCleared())
        self.assertEqual(s.live_transcription, "")

    def test_reply_replaces_typing_placeholder(self):
        user = ChatMessage(id="1", type="user", content="hi")
        typing = ChatMessage(id=TYPING_ID, type="ai", content="...")
        ai = ChatMessage(id="2", type="ai", content="hello")

        s = reduce(self.state, MessageSubmitted(user))
        s = reduce(s, RequestStarted(typing))
        self.assertEqual(s.phase, Phase.AWAITING_REPLY)
        self.assertEqual([m.id for m in s.messages], ["1", TYPING_ID])

        s = reduce(s, ReplyReceived("conv-9", ai))
        self.assertEqual(s.phase, Phase.IDLE)
        self.assertEqual(s.conversation_id, "conv-9")
        self.assertEqual([m.id for m in s.messages], ["1", "2"])

    def test_failed_reply_keeps_conversation_id(self):
        s = self.state.model_copy(update={"conversation_id": "conv-1"})
        s = reduce(s, RequestStarted(ChatMessage(id=TYPING_ID, type="ai", content="...")))
        s = reduce(s, ReplyFailed(ChatMessage(id="e", type="ai", content="error")))
        self.assertEqual(s.conversation_id, "conv-1")
        self.assertEqual([m.id for m in s.messages], ["e"])

    def test_flags(self):
        s = reduce(self.state, SpeakingChanged(True))
        self.assertTrue(s.is_speaking)
        s = reduce(s, LanguageChanged("ta-IN"))
        self.assertEqual(s.language_tag, "ta-IN")

    def test_reducer_does_not_mutate(self):
        reduce(self.state, ListeningStarted())
        self.assertEqual(self.state.phase, Phase.IDLE)
        with self.assertRaises(ValidationError):
            self.state.phase = Phase.SENT

    def test_unknown_event(self):
        with self.assertRaises(TypeError):
            reduce(self.state, object())


if __name__ == "__main__":
    unittest.main()
