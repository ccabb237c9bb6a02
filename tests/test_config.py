from slack_notify.config import Settings
from slack_notify.output.base import (
    DeliveryConfig,
    TokenDelivery,
    WebhookDelivery,
    resolve,
)

from conftest import CHANNEL, TOKEN, WEBHOOK_URL


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SLACK_TOKEN", TOKEN)
    monkeypatch.setenv("SLACK_CHANNEL", CHANNEL)
    monkeypatch.setenv("SLACK_HTTP_TIMEOUT", "30")

    s = Settings(_env_file=None)

    assert s.SLACK_TOKEN == TOKEN
    assert s.SLACK_CHANNEL == CHANNEL
    assert s.SLACK_HTTP_TIMEOUT == 30
    assert s.SLACK_WEBHOOK_URL == ""


def test_delivery_config_from_settings(monkeypatch):
    monkeypatch.setenv("SLACK_WEBHOOK_URL", WEBHOOK_URL)
    monkeypatch.delenv("SLACK_TOKEN", raising=False)
    monkeypatch.delenv("SLACK_CHANNEL", raising=False)

    config = DeliveryConfig.from_settings(Settings(_env_file=None))

    assert config == DeliveryConfig(webhook_url=WEBHOOK_URL)


def test_resolve_webhook():
    assert resolve(DeliveryConfig(webhook_url=WEBHOOK_URL, token=TOKEN)) == WebhookDelivery(
        url=WEBHOOK_URL
    )


def test_resolve_token():
    assert resolve(DeliveryConfig(token=TOKEN, channel=CHANNEL)) == TokenDelivery(
        token=TOKEN, channel=CHANNEL
    )
