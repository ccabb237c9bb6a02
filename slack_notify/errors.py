"""
Errors raised by Slack delivery.

Every failure surfaces to the caller as a DeliveryError subclass; nothing is
retried.
"""


class DeliveryError(Exception):
    """Base class for all Slack delivery failures."""


CONFIG_ERROR_MESSAGE = "Slack delivery config must contain either a webhook URL or a channel and token"


class ConfigError(DeliveryError):
    """Neither a webhook URL nor a channel and token were configured."""

    def __init__(self, message: str = CONFIG_ERROR_MESSAGE):
        super().__init__(message)


class MarshalError(DeliveryError):
    """The outgoing payload could not be serialized."""


class TransportError(DeliveryError):
    """Connection, DNS, TLS or read failure before a usable response."""


class NonOKStatusError(DeliveryError):
    def __init__(self, status_code: int, body: str | None = None):
        self.status_code = status_code
        self.body = body
        message = f"non-OK status code: {status_code}"
        if body is not None:
            message = f"{message}, body: {body}"
        super().__init__(message)


class ResponseParseError(DeliveryError):
    def __init__(self, reason: str, body: str = ""):
        self.body = body
        super().__init__(f"failed to parse response: {reason}")


class APIError(DeliveryError):
    """Slack answered HTTP 200 with ok=false."""

    def __init__(self, error: str | None):
        self.error = error or ""
        super().__init__(f"API error: {self.error}")
