from slack_notify.errors import (
    APIError,
    ConfigError,
    DeliveryError,
    MarshalError,
    NonOKStatusError,
    ResponseParseError,
    TransportError,
)
from slack_notify.logging import configure_logging
from slack_notify.output.base import DeliveryConfig, SendResult
from slack_notify.output.slack import Notifier, SlackSender, send_slack, send_to_slack
from slack_notify.slack.client import SlackClient

__all__ = [
    "DeliveryConfig",
    "SendResult",
    "Notifier",
    "SlackSender",
    "SlackClient",
    "send_slack",
    "send_to_slack",
    "configure_logging",
    "DeliveryError",
    "ConfigError",
    "MarshalError",
    "TransportError",
    "NonOKStatusError",
    "ResponseParseError",
    "APIError",
]
