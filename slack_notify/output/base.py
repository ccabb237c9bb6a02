from dataclasses import dataclass

from slack_notify.config import Settings
from slack_notify.errors import ConfigError


@dataclass
class SendResult:
    channel: str  # e.g. "slack"
    success: bool
    target: str  # webhook URL or channel name
    error: str | None = None


@dataclass(frozen=True)
class DeliveryConfig:
    """Caller-supplied Slack options. Validated when delivering, not here."""

    webhook_url: str | None = None
    token: str | None = None
    channel: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "DeliveryConfig":
        return cls(
            webhook_url=settings.SLACK_WEBHOOK_URL or None,
            token=settings.SLACK_TOKEN or None,
            channel=settings.SLACK_CHANNEL or None,
        )


@dataclass(frozen=True)
class WebhookDelivery:
    url: str


@dataclass(frozen=True)
class TokenDelivery:
    token: str
    channel: str


Delivery = WebhookDelivery | TokenDelivery


def resolve(config: DeliveryConfig) -> Delivery:
    """Pick the delivery mode. A webhook URL wins over token and channel."""
    if config.webhook_url:
        return WebhookDelivery(url=config.webhook_url)
    if config.channel and config.token:
        return TokenDelivery(token=config.token, channel=config.channel)
    raise ConfigError()
