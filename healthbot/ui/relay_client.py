import logging
from typing import Any, Optional

import requests

from healthbot.config import DEFAULT_RELAY_URL
from healthbot.config_manager import ConfigManager
from healthbot.schemas.chat import RelayRequest

logger = logging.getLogger("RelayClient")


class RelayClient:
    """Posts the page's conversation to the relay endpoint."""

    def __init__(self, relay_url: str = DEFAULT_RELAY_URL, session: Optional[requests.Session] = None):
        self.relay_url = relay_url
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls) -> "RelayClient":
        return cls(ConfigManager.get("ui", "relay_url", default=DEFAULT_RELAY_URL))

    def ask(self, request: RelayRequest) -> Any:
        """Send one relay request and return the decoded body.

        The body is returned whatever the status code; error bodies simply
        carry no ``answer``.

        Raises:
            requests.exceptions.RequestException: If the relay cannot be reached.
            ValueError: If the reply is not JSON.
        """
        response = self.session.post(self.relay_url, json=request.model_dump())
        if not response.ok:
            logger.warning(f"Relay answered with status {response.status_code}")
        return response.json()
