from pydantic import BaseModel


class SlackPayload(BaseModel):
    text: str
    channel: str | None = None  # omitted from the JSON body for webhooks

    def to_json_bytes(self) -> bytes:
        return self.model_dump_json(exclude_none=True).encode("utf-8")


class APIResult(BaseModel):
    """Body returned by chat.postMessage. Extra fields are ignored; ok must be a JSON boolean."""
    model_config = {"extra": "ignore", "strict": True}

    ok: bool
    error: str | None = None
