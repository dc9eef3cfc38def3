"""Message model dispatched through a handler collection."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """An immutable unit of input: a type tag plus an opaque payload."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str = Field(description="Type tag used to resolve the handler")
    payload: Any = Field(default=None, description="Opaque message body")
