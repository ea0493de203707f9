"""Translation between the chat message format and the provider format."""

from typing import Any, Dict, List, Sequence

from healthbot.config import DEFAULT_GREETING, FALLBACK_ANSWER, SYSTEM_INSTRUCTION
from healthbot.schemas.chat import ChatMessage
from healthbot.schemas.provider import Content, GenerateContentRequest, Part


def user_parts(messages: Sequence[ChatMessage]) -> List[Part]:
    """Map the user turns to provider parts, keeping their order. Bot turns are dropped."""
    return [Part(text=m.content) for m in messages if m.role == "user"]


def build_provider_payload(messages: Sequence[ChatMessage]) -> Dict[str, Any]:
    """Build the generateContent body for a conversation.

    The system instruction is always the first part. It is followed by the
    user turns, or by a single greeting part when the conversation has none.

    Args:
        messages: The conversation as received from the client.

    Returns:
        The JSON-ready request body.
    """
    parts = user_parts(messages) or [Part(text=DEFAULT_GREETING)]
    request = GenerateContentRequest(
        contents=[Content(parts=[Part(text=SYSTEM_INSTRUCTION), *parts])]
    )
    return request.model_dump()


def extract_answer(data: Any) -> str:
    """Return ``candidates[0].content.parts[0].text`` or the fallback text.

    Any missing segment along the path, or an empty text, yields the
    fallback answer instead of an error.
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return FALLBACK_ANSWER
    if not isinstance(text, str) or not text:
        return FALLBACK_ANSWER
    return text
