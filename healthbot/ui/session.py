"""In-memory state of one chat page.

The page re-renders from these fields on every Streamlit rerun; all
changes go through the methods below.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import requests

from healthbot.config import FALLBACK_ANSWER, UNREACHABLE_MESSAGE
from healthbot.schemas.chat import ChatMessage, RelayRequest
from healthbot.ui.relay_client import RelayClient

logger = logging.getLogger("HealthBotUI")


@dataclass
class ChatSession:
    messages: List[ChatMessage] = field(default_factory=list)
    input_text: str = ""
    busy: bool = False
    pending: Optional[RelayRequest] = None

    def submit(self, text: str) -> Optional[RelayRequest]:
        """Append the user's turn and queue the relay call for it.

        Returns the relay request to issue, or None when the text is blank
        or a call is already in flight (the transcript is left untouched).
        """
        if not text or not text.strip() or self.busy:
            return None

        user_message = ChatMessage(role="user", content=text)
        # Prior user turns are replayed; bot turns are not sent.
        history = [m for m in self.messages if m.role == "user"]
        request = RelayRequest(messages=[*history, user_message])

        self.messages.append(user_message)
        self.input_text = ""
        self.busy = True
        self.pending = request
        return request

    def take_pending(self) -> Optional[RelayRequest]:
        request, self.pending = self.pending, None
        return request

    def on_relay_result(self, data: Any) -> None:
        answer = data.get("answer") if isinstance(data, dict) else None
        self._reply(str(answer) if answer else FALLBACK_ANSWER)

    def on_relay_failure(self) -> None:
        self._reply(UNREACHABLE_MESSAGE)

    def dispatch(self, client: RelayClient) -> None:
        """Issue the pending relay call, if any, and record its outcome."""
        request = self.take_pending()
        if request is None:
            return
        try:
            data = client.ask(request)
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Relay call failed: {e}")
            self.on_relay_failure()
        else:
            self.on_relay_result(data)
        finally:
            self.busy = False

    def reset_conversation(self) -> None:
        # A call already in flight is not cancelled; its reply still lands here.
        self.messages = []

    def _reply(self, text: str) -> None:
        self.messages.append(ChatMessage(role="bot", content=text))
        self.busy = False
