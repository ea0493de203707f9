"""Pydantic models for chat request/response payloads."""

from pydantic import BaseModel, ConfigDict
from typing import List


class ChatMessage(BaseModel):
	"""Single chat message; immutable once created."""
	model_config = ConfigDict(frozen=True)

	role: str  # "user" or "bot"
	content: str = ""


class RelayRequest(BaseModel):
	"""Payload for a relay request."""
	messages: List[ChatMessage]


class RelayResponse(BaseModel):
	"""Successful relay reply."""
	answer: str


class ErrorResponse(BaseModel):
	"""Relay reply for any failure."""
	error: str
