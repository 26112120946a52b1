from abc import ABC, abstractmethod


class MessageSender(ABC):
    @abstractmethod
    def send(self, channel_id: str, message: str) -> str:
        """
        Post a message to a chat channel

        Args:
            channel_id: The destination channel, as supplied by the webhook caller
            message: The Markdown message content

        Returns:
            The provider's identifier for the posted message

        Raises on delivery failure; nothing is retried.
        """
        pass

    def close(self) -> None:
        """Release any connections held by the sender"""
