from unittest.mock import patch

import pytest
from slack_sdk.errors import SlackApiError

from hookrelay.services.message_senders.slack import SlackMessageSender

pytestmark = pytest.mark.integration


@pytest.fixture
def slack_sender():
    return SlackMessageSender(access_token="test_token")


def test_send_message(slack_sender):
    with patch('slack_sdk.WebClient.chat_postMessage') as mock_post:
        mock_post.return_value = {"ts": "1234567890.123456"}

        message_id = slack_sender.send("C123456", "__Ping received.__")

        assert message_id == "1234567890.123456"
        mock_post.assert_called_once_with(
            channel="C123456",
            text="__Ping received.__",
            mrkdwn=True
        )


def test_send_uses_access_token():
    sender = SlackMessageSender(access_token="xoxb-token", base_url="https://slack.example.com/api/")

    assert sender.client.token == "xoxb-token"
    assert sender.client.base_url == "https://slack.example.com/api/"


def test_send_error(slack_sender):
    with patch('slack_sdk.WebClient.chat_postMessage') as mock_post:
        mock_post.side_effect = SlackApiError("Error", {"error": "channel_not_found"})

        with pytest.raises(SlackApiError):
            slack_sender.send("C404", "Test message")
