from typing import Any, NamedTuple, Optional

import requests

from saathi.config import CONFIG
from saathi.utils import get_logger

logger = get_logger(__name__)

GENERIC_SERVER_ERROR = "Backend server returned an error status."


class ChatError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ChatReply(NamedTuple):
    conversation_id: Optional[str]
    ai_response: str


class ChatClient:
    """
    Thin wrapper over POST {base_url}/api/chat. One attempt per message:
    no retry, no backoff, no timeout unless one is configured.
    """

    def __init__(self, base_url: str = None, user_id: str = None,
                 timeout_s: Optional[float] = None, session: Any = None):
        self.base_url = (base_url or CONFIG.chat_api_url).rstrip("/")
        self.user_id = user_id or CONFIG.user_id
        self.timeout_s = CONFIG.chat_timeout_s if timeout_s is None else timeout_s
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}/api/chat"

    def send(self, message: str, conversation_id: Optional[str], language_tag: str) -> ChatReply:
        payload = {
            "userId": self.user_id,
            "message": message,
            "conversationId": conversation_id,
            "languageTag": language_tag,
        }
        logger.info(f"POST {self.url} (conversation={conversation_id}, lang={language_tag})")
        try:
            resp = self.session.post(self.url, json=payload, timeout=self.timeout_s)
        except requests.RequestException as e:
            logger.error(f"Chat request failed: {e}")
            raise ChatError(str(e)) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise ChatError(f"Invalid JSON from chat backend: {e}", resp.status_code) from e

        if resp.status_code != 200:
            error = (data or {}).get("error") if isinstance(data, dict) else None
            logger.error(f"Chat backend returned HTTP {resp.status_code}: {error}")
            raise ChatError(error or GENERIC_SERVER_ERROR, resp.status_code)

        if not isinstance(data, dict):
            logger.error(f"Chat backend returned a non-object body: {type(data).__name__}")
            raise ChatError("Invalid JSON from chat backend", resp.status_code)

        return ChatReply(data.get("conversationId"), data.get("aiResponse") or "")
