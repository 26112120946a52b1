import hashlib
import hmac
import logging
import re
from typing import Mapping, Optional

from hookrelay.core.config import Settings
from hookrelay.core.errors import ConfigurationError, ValidationError
from hookrelay.schemas.webhook import EventType, WebhookRequest

SIGNATURE_HEADER = "X-Hub-Signature"
EVENT_HEADER = "X-Github-Event"
SIGNATURE_PREFIX = "sha1="
SHA1_HEX_DIGEST = re.compile(r"[0-9a-fA-F]{40}")


class RequestAuthenticator:
    """
    Checks an inbound GitHub delivery before anything is formatted or sent.

    Signature verification is opt-in: it only runs when a webhook secret is
    configured.
    https://docs.github.com/en/webhooks/using-webhooks/validating-webhook-deliveries
    """

    def __init__(self, access_token: str, webhook_secret: Optional[str] = None):
        self.access_token = access_token
        self.webhook_secret = webhook_secret or None
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RequestAuthenticator":
        return cls(settings.ACCESS_TOKEN, settings.WEBHOOK_SECRET)

    def authenticate(
        self,
        body: bytes,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
    ) -> WebhookRequest:
        """
        Validate a delivery and extract its channel and event type.

        Raises:
            ConfigurationError: no access token is configured
            ValidationError: bad or missing signature, or no channel parameter
        """
        if not self.access_token:
            raise ConfigurationError("Missing configuration: AccessToken")

        lowered = {key.lower(): value for key, value in headers.items()}

        if self.webhook_secret:
            self.verify_signature(body, lowered.get(SIGNATURE_HEADER.lower()))

        channel = query_params.get("channel")
        if not channel:
            raise ValidationError("Missing parameter: channel")

        event_name = lowered.get(EVENT_HEADER.lower()) or ""
        event_type = EventType.parse(event_name)
        self.logger.debug(f"Authenticated {event_type.value} delivery for channel {channel}")

        return WebhookRequest(
            body=body,
            channel=channel,
            event_type=event_type,
            event_name=event_name,
        )

    def verify_signature(self, body: bytes, signature_header: Optional[str]) -> None:
        """Compare the header's HMAC-SHA1 digest with one computed over the raw body"""
        if not signature_header:
            raise ValidationError(f"Missing HTTP Header: {SIGNATURE_HEADER}")

        if signature_header[: len(SIGNATURE_PREFIX)].lower() != SIGNATURE_PREFIX:
            raise ValidationError("Unknown Hash Algorithm")

        digest = signature_header[len(SIGNATURE_PREFIX):]
        if not SHA1_HEX_DIGEST.fullmatch(digest):
            raise ValidationError(f"Invalid {SIGNATURE_HEADER}")
        signature = bytes.fromhex(digest)

        expected = hmac.new(
            key=self.webhook_secret.encode(),
            msg=body,
            digestmod=hashlib.sha1,
        ).digest()

        if not hmac.compare_digest(expected, signature):
            raise ValidationError(f"Invalid {SIGNATURE_HEADER}")
