import logging
from typing import Optional
from urllib.parse import quote

import httpx

from .base import MessageSender

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://kokoro.io/api"


class KokoroMessageSender(MessageSender):
    """Posts through the kokoro.io bot API, which renders Markdown natively"""

    def __init__(
        self,
        access_token: str,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.client = httpx.Client(
            base_url=(base_url or DEFAULT_BASE_URL).rstrip("/"),
            headers={
                "X-Access-Token": access_token,
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    def send(self, channel_id: str, message: str) -> str:
        try:
            response = self.client.post(
                f"/v1/bot/channels/{quote(channel_id, safe='')}/messages",
                data={"message": message},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"kokoro.io API error: {e}")
            raise

        return str(response.json().get("id", ""))

    def close(self) -> None:
        self.client.close()
