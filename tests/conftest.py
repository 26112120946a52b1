import hashlib
import hmac
import json
from typing import Any, Dict, List, Tuple

import pytest
from fastapi.testclient import TestClient

from hookrelay.api.deps import get_message_sender
from hookrelay.core.config import Settings, get_settings
from hookrelay.main import app
from hookrelay.services.message_senders.base import MessageSender


class RecordingSender(MessageSender):
    """Keeps sent messages instead of posting them"""

    def __init__(self):
        self.sent: List[Tuple[str, str]] = []

    def send(self, channel_id: str, message: str) -> str:
        self.sent.append((channel_id, message))
        return str(len(self.sent))


@pytest.fixture
def settings():
    return Settings(ACCESS_TOKEN="test_token", WEBHOOK_SECRET="test_secret")


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def client(settings, sender):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_message_sender] = lambda: sender
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def webhook_signature():
    """Fixture to sign webhook bodies the way GitHub does"""
    def _generate_signature(webhook_secret: str, payload: Dict[str, Any]) -> Tuple[Dict[str, str], bytes]:
        payload_bytes = json.dumps(payload).encode()
        signature = hmac.new(
            key=webhook_secret.encode(),
            msg=payload_bytes,
            digestmod=hashlib.sha1
        ).hexdigest()

        headers = {
            "X-Hub-Signature": f"sha1={signature}"
        }

        return headers, payload_bytes

    return _generate_signature


@pytest.fixture
def repository():
    return {
        "full_name": "octocat/Hello-World",
        "html_url": "https://github.com/octocat/Hello-World"
    }


@pytest.fixture
def sender_account():
    return {
        "login": "octocat",
        "html_url": "https://github.com/octocat"
    }


@pytest.fixture
def issue(sender_account):
    return {
        "number": 1347,
        "title": "Found a bug",
        "html_url": "https://github.com/octocat/Hello-World/issues/1347",
        "body": "I'm having a problem with this.\n\nIt crashes on start.",
        "user": sender_account
    }


@pytest.fixture
def pull_request():
    return {
        "number": 42,
        "title": "Update the README",
        "html_url": "https://github.com/octocat/Hello-World/pull/42",
        "body": "This is a pretty simple change.",
        "requested_reviewers": []
    }


@pytest.fixture
def push_payload(repository, sender_account):
    return {
        "ref": "refs/heads/main",
        "compare": "https://github.com/octocat/Hello-World/compare/6113728f27ae...0d1a26e67d8f",
        "repository": repository,
        "sender": sender_account,
        "commits": [{
            "id": "0d1a26e67d8f5eaf1f6ba5c57fc3c7d91ac0fd1c",
            "message": "Update README.md",
            "url": "https://github.com/octocat/Hello-World/commit/0d1a26e67d8f5eaf1f6ba5c57fc3c7d91ac0fd1c",
            "author": {
                "name": "The Octocat",
                "email": "octocat@github.com",
                "username": "octocat"
            }
        }]
    }
