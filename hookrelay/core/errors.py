"""Request-level failures that end a webhook delivery with a 400 response."""


class WebhookError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(WebhookError):
    """Required configuration (the access token) is absent"""


class ValidationError(WebhookError):
    """The request is malformed or could not be authenticated"""


class FormattingError(WebhookError):
    """The payload lacks a field the event's formatter needs"""
