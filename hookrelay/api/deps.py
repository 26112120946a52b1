from typing import Iterator

from fastapi import Depends

from hookrelay.core.config import Settings, get_settings
from hookrelay.services.authenticator import RequestAuthenticator
from hookrelay.services.message_sender_factory import MessageSenderFactory
from hookrelay.services.message_senders.base import MessageSender


def get_authenticator(
    settings: Settings = Depends(get_settings),
) -> RequestAuthenticator:
    return RequestAuthenticator.from_settings(settings)


def get_message_sender(
    settings: Settings = Depends(get_settings),
) -> Iterator[MessageSender]:
    sender = MessageSenderFactory.get_sender(settings)
    try:
        yield sender
    finally:
        sender.close()
