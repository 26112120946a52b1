import logging
from typing import Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from .base import MessageSender

logger = logging.getLogger(__name__)


class SlackMessageSender(MessageSender):
    def __init__(self, access_token: str, base_url: Optional[str] = None):
        self.client = WebClient(
            token=access_token, base_url=base_url or WebClient.BASE_URL
        )

    def send(self, channel_id: str, message: str) -> str:
        """
        Post the message with the bot token
        https://api.slack.com/methods/chat.postMessage
        """
        try:
            response = self.client.chat_postMessage(
                channel=channel_id,
                text=message,
                mrkdwn=True,
            )

            # The timestamp doubles as the message id
            return response["ts"]

        except SlackApiError as e:
            logger.error(f"Slack API error: {e}")
            raise
