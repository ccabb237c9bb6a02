"""
Slack HTTP client — singleton, shared by every Notifier that is not given its own.

Handles:
- Incoming webhook: post_webhook (no auth needed)
- Web API: post_message (bearer token, ok/error body)

One httpx.Client is created lazily and reused so repeated sends share the
connection pool. Tests inject a client built on httpx.MockTransport.
"""

import httpx
import structlog
from pydantic import ValidationError

from slack_notify.config import settings
from slack_notify.errors import NonOKStatusError, ResponseParseError, TransportError
from slack_notify.schemas.slack import APIResult

logger = structlog.get_logger()

JSON_HEADERS = {"Content-Type": "application/json"}


class SlackClient:
    def __init__(
        self,
        http: httpx.Client | None = None,
        api_url: str | None = None,
        timeout: float | None = None,
    ):
        self._http = http
        self.api_url = api_url or settings.SLACK_API_URL
        self.timeout = timeout if timeout is not None else settings.SLACK_HTTP_TIMEOUT

    @property
    def http(self) -> httpx.Client:
        if self._http is None:
            self._http = httpx.Client(timeout=self.timeout)
        return self._http

    def close(self):
        """Release pooled connections. Optional; the next call reopens them."""
        if self._http is not None:
            self._http.close()
            self._http = None
            logger.info("slack.client.closed")

    def _post(self, url: str, body: bytes, headers: dict[str, str]) -> tuple[int, str]:
        """POST and return (status, body text). The response is always drained and closed.

        Connection, read and body-decoding failures all surface as TransportError.
        """
        try:
            with self.http.stream("POST", url, content=body, headers=headers) as resp:
                resp.read()
                return resp.status_code, resp.text
        except httpx.RequestError as e:
            raise TransportError(str(e) or type(e).__name__) from e

    # ------------------------------------------------------------------
    # Webhook
    # ------------------------------------------------------------------

    def post_webhook(self, webhook_url: str, body: bytes) -> None:
        """Send a serialized payload to an incoming webhook. Only the status is checked."""
        status, _ = self._post(webhook_url, body, JSON_HEADERS)
        if status != httpx.codes.OK:
            raise NonOKStatusError(status)

    # ------------------------------------------------------------------
    # Web API
    # ------------------------------------------------------------------

    def post_message(self, token: str, body: bytes) -> APIResult:
        """Send a serialized payload to chat.postMessage and decode the reply.

        The caller decides what to do with ``ok == False``; HTTP 200 is
        returned for application-level errors too.
        """
        headers = {**JSON_HEADERS, "Authorization": f"Bearer {token}"}
        status, text = self._post(self.api_url, body, headers)
        if status != httpx.codes.OK:
            raise NonOKStatusError(status, text)

        try:
            return APIResult.model_validate_json(text)
        except ValidationError as e:
            raise ResponseParseError(str(e), body=text) from e


# Singleton instance
slack_client = SlackClient()
