import os
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from saathi.utils import get_logger

logger = get_logger(__name__)

class AppConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    chat_api_url: str = Field(default="http://localhost:5000", description="Base URL of the chat backend")
    user_id: str = Field(default="guest_user", description="User id sent with every chat message")
    default_language: str = Field(default="hi-IN", description="Initial BCP-47 tag for recognition and replies")
    classifier: str = Field(default="keyword", description="Complaint classifier: keyword, vader")
    stt_engine: str = Field(default="mock", description="Speech-to-text engine: mock, whisper_local")
    tts_engine: str = Field(default="mock", description="Text-to-speech engine: mock, pyttsx3")
    whisper_model: str = Field(default="small", description="faster-whisper model size")
    chat_timeout_s: Optional[float] = Field(default=None, description="HTTP timeout for chat calls (None waits forever)")
    output_dir: str = Field(default="outputs", description="Where exported reports are written")

    # Widget timings, in seconds
    submit_delay: float = 0.5
    error_clear_delay: float = 3.0
    reply_speak_delay: float = 0.5
    welcome_delay: float = 1.0

    # Utterance settings
    speech_rate: float = 1.1
    speech_pitch: float = 1.0
    speech_volume: float = 1.0

ENV_PREFIX = "SAATHI_"

# field name -> extra env var names accepted besides SAATHI_<FIELD>
ENV_ALIASES = {
    "chat_api_url": ["VITE_API_URL"],
}

def load_config(json_path: str = "config.json") -> AppConfig:
    import json
    config_data = {}
    if os.path.exists(json_path):
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                config_data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load {json_path}: {e}")

    # Environment variables override the config file
    for name in AppConfig.model_fields:
        for env_name in [ENV_PREFIX + name.upper()] + ENV_ALIASES.get(name, []):
            value = os.environ.get(env_name)
            if value:
                config_data[name] = value
                break

    return AppConfig(**config_data)

CONFIG = load_config()
