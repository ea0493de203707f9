import json
import logging
from typing import Any, List

from healthbot.relay.errors import BadRequest, RelayError, RemoteError, ServerError
from healthbot.relay.payload import build_provider_payload, extract_answer
from healthbot.relay.provider import GeminiClient, ProviderConfig
from healthbot.schemas.chat import ChatMessage, RelayRequest, RelayResponse

logger = logging.getLogger("AnswerRelay")


def _user_turns(entries: List[Any]) -> List[ChatMessage]:
    """Keep the entries whose role is "user"; anything else is dropped unchecked."""
    turns = []
    for entry in entries:
        if not isinstance(entry, dict) or entry.get("role") != "user":
            continue
        content = entry.get("content")
        turns.append(ChatMessage(role="user", content="" if content is None else str(content)))
    return turns


class AnswerRelay:
    """
    Stateless translator between the chat page and the generation provider.

    Every call runs received -> validated -> payload-built -> remote-called
    and ends in an answer or a RelayError. Nothing is kept between calls.
    """

    def __init__(self, client: GeminiClient | None = None):
        """Initialize the relay and its provider client.

        Args:
            client: Optional pre-built provider client (for dependency injection/testing).
        """
        self.client = client or GeminiClient(ProviderConfig.from_config())

    @staticmethod
    def parse_request(raw_body: bytes | str) -> RelayRequest:
        """Decode a client body and keep its user turns.

        Raises:
            ServerError: If the body is not JSON at all.
            BadRequest: If ``messages`` is missing or not a list.
        """
        try:
            body = json.loads(raw_body)
        except ValueError as e:
            logger.error(f"Undecodable request body: {e}")
            raise ServerError() from e

        messages = body.get("messages") if isinstance(body, dict) else None
        if not isinstance(messages, list):
            logger.warning("Rejected request without a messages list")
            raise BadRequest()

        turns = _user_turns(messages)
        logger.info(f"Received {len(messages)} message(s), {len(turns)} from the user")
        return RelayRequest(messages=turns)

    def answer(self, raw_body: bytes | str) -> RelayResponse:
        """Relay one client conversation to the provider and return its answer.

        Args:
            raw_body: The undecoded client request body.

        Returns:
            The first candidate's text, or the fallback text when it is missing.

        Raises:
            BadRequest: Malformed client input.
            RemoteError: The provider returned a non-2xx status.
            ServerError: Any other failure.
        """
        request = self.parse_request(raw_body)

        try:
            payload = build_provider_payload(request.messages)
            response = self.client.generate_content(payload)

            if not 200 <= response.status_code < 300:
                logger.warning(f"Provider error {response.status_code} passed through")
                raise RemoteError(response.status_code, response.text)

            return RelayResponse(answer=extract_answer(response.json()))
        except RelayError:
            raise
        except Exception as e:
            logger.exception(f"Relay failed: {e}")
            raise ServerError() from e
