import json
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from hookrelay.api.deps import get_authenticator, get_message_sender
from hookrelay.core.errors import ValidationError
from hookrelay.services.authenticator import RequestAuthenticator
from hookrelay.services.event_formatter import format_event
from hookrelay.services.message_senders.base import MessageSender

logger = logging.getLogger(__name__)

router = APIRouter()


def load_payload(body: bytes) -> Dict[str, Any]:
    try:
        payload = json.loads(body)
    except ValueError:
        raise ValidationError("Invalid JSON payload")

    if not isinstance(payload, dict):
        raise ValidationError("Invalid JSON payload")
    return payload


@router.post("/webhooks/github", response_class=PlainTextResponse)
async def github_webhook(
    request: Request,
    authenticator: RequestAuthenticator = Depends(get_authenticator),
    sender: MessageSender = Depends(get_message_sender),
):
    # The signature covers the raw bytes, so read them before any parsing
    body = await request.body()

    webhook = authenticator.authenticate(body, request.headers, request.query_params)
    payload = load_payload(webhook.body)

    message = format_event(webhook.event_type, payload, webhook.event_name)
    if message is None:
        logger.info(f"Acknowledged {webhook.event_type.value} event without a message")
        return "OK"

    await run_in_threadpool(sender.send, webhook.channel, message)
    logger.info(f"Relayed {webhook.event_type.value} event to channel {webhook.channel}")
    return message
