from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings


class ChatProvider(str, Enum):
    SLACK = "slack"
    KOKORO = "kokoro"


class Settings(BaseSettings):
    PROJECT_NAME: str = "hookrelay"
    LOG_LEVEL: str = "INFO"

    # Chat bot credentials, empty means "not configured"
    ACCESS_TOKEN: str = ""
    WEBHOOK_SECRET: str = ""

    CHAT_PROVIDER: ChatProvider = ChatProvider.SLACK
    CHAT_API_URL: str = ""  # Provider default when empty

    model_config = {
        "env_file": ".env"
    }


@lru_cache
def get_settings():
    return Settings()


settings = get_settings()
