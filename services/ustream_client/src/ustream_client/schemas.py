"""Wire schemas for the chat backend."""
from pydantic import BaseModel, ConfigDict


class ChatRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt: str


class ChatResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    response: str
    timestamp: str | None = None  # accepted, not surfaced to callers
