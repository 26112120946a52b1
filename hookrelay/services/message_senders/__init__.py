from .base import MessageSender
from .kokoro import KokoroMessageSender
from .slack import SlackMessageSender

__all__ = ["MessageSender", "KokoroMessageSender", "SlackMessageSender"]
