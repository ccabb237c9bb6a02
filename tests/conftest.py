import json

import httpx
import pytest

from slack_notify.output.slack import Notifier
from slack_notify.slack.client import SlackClient

CHANNEL = "test"
TEXT = "Test!"
TOKEN = "xoxb-..."
WEBHOOK_URL = "https://hooks.slack.com/services/test"
API_URL = "https://slack.com/api/chat.postMessage"


class FakeSlack:
    """Records every request and answers with ``respond`` (200 "ok" by default)."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []
        self.respond = lambda request: httpx.Response(200, text="ok")

    def handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        response = self.respond(request)
        self.responses.append(response)
        return response

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_slack():
    return FakeSlack()


@pytest.fixture
def slack_client(fake_slack):
    http = httpx.Client(transport=httpx.MockTransport(fake_slack.handle))
    client = SlackClient(http=http, api_url=API_URL)
    yield client
    client.close()


@pytest.fixture
def notifier(slack_client):
    return Notifier(slack_client)


class ChunkedBody(httpx.SyncByteStream):
    """Response body streamed in chunks; ``fail`` raises after the first chunk."""

    def __init__(self, *chunks: bytes, fail: Exception | None = None):
        self.chunks = chunks
        self.fail = fail
        self.closed = False

    def __iter__(self):
        for i, chunk in enumerate(self.chunks):
            if self.fail is not None and i > 0:
                raise self.fail
            yield chunk

    def close(self):
        self.closed = True
