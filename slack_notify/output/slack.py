"""
Slack output: send report text via incoming webhook or bot token.

- config has a webhook URL → webhook mode
- config has channel + token → Web API mode (chat.postMessage)
- anything else → ConfigError, nothing is sent
"""

from typing import Protocol

import structlog

from slack_notify.errors import APIError, DeliveryError, MarshalError
from slack_notify.output.base import (
    DeliveryConfig,
    SendResult,
    TokenDelivery,
    WebhookDelivery,
    resolve,
)
from slack_notify.schemas.slack import SlackPayload
from slack_notify.slack.client import SlackClient, slack_client

logger = structlog.get_logger()


class SlackSender(Protocol):
    def deliver(self, config: DeliveryConfig, text: str) -> None: ...


def _marshal(text: str, channel: str | None = None) -> bytes:
    try:
        return SlackPayload(text=text, channel=channel).to_json_bytes()
    except ValueError as e:
        raise MarshalError(f"failed to marshal payload: {e}") from e


class Notifier:
    """Delivers one text buffer per call. Holds no state besides the HTTP client."""

    def __init__(self, client: SlackClient | None = None):
        self.client = client or slack_client

    def deliver(self, config: DeliveryConfig, text: str) -> None:
        if not text:
            return

        delivery = resolve(config)
        if isinstance(delivery, WebhookDelivery):
            self.client.post_webhook(delivery.url, _marshal(text))
        elif isinstance(delivery, TokenDelivery):
            logger.info("slack.sending", channel=delivery.channel)
            result = self.client.post_message(delivery.token, _marshal(text, delivery.channel))
            if not result.ok:
                raise APIError(result.error)


def send_to_slack(sender: SlackSender, config: DeliveryConfig, text: str) -> None:
    """Deliver through any SlackSender; lets callers swap in a fake."""
    sender.deliver(config, text)


def send_slack(config: DeliveryConfig, text: str, *, notifier: Notifier | None = None) -> SendResult:
    """Deliver and report the outcome as a SendResult instead of raising.

    Args:
        config: Slack options from the caller.
        text: Preformatted report text. Empty text is a successful no-op.
    """
    notifier = notifier or Notifier()
    target = config.webhook_url or config.channel or ""
    log_target = target[:40]  # webhook URLs carry a secret path
    try:
        notifier.deliver(config, text)
    except DeliveryError as e:
        logger.exception("slack.failed", target=log_target, error_type=type(e).__name__)
        return SendResult(channel="slack", success=False, target=target, error=str(e))

    logger.info("slack.sent", target=log_target)
    return SendResult(channel="slack", success=True, target=target)
