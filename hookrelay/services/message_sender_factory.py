from typing import Dict, Type

from hookrelay.core.config import ChatProvider, Settings
from hookrelay.services.message_senders.base import MessageSender
from hookrelay.services.message_senders.kokoro import KokoroMessageSender
from hookrelay.services.message_senders.slack import SlackMessageSender


class MessageSenderFactory:
    _senders: Dict[ChatProvider, Type[MessageSender]] = {
        ChatProvider.SLACK: SlackMessageSender,
        ChatProvider.KOKORO: KokoroMessageSender,
    }

    @classmethod
    def get_sender(cls, settings: Settings) -> MessageSender:
        provider = settings.CHAT_PROVIDER
        if provider not in cls._senders:
            raise KeyError(f"No message sender registered for provider: {provider}")
        return cls._senders[provider](
            access_token=settings.ACCESS_TOKEN,
            base_url=settings.CHAT_API_URL or None,
        )
