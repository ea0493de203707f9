"""Pydantic models for the generateContent request body."""

from pydantic import BaseModel
from typing import List


class Part(BaseModel):
	"""One text fragment of a content block."""
	text: str


class Content(BaseModel):
	parts: List[Part]


class GenerateContentRequest(BaseModel):
	"""Body sent to the provider's generateContent endpoint."""
	contents: List[Content]
