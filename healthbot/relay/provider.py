import os
import logging
from typing import Any, Dict, Optional
from dataclasses import dataclass

import requests

from healthbot.config import (
    API_KEY_HEADER,
    DEFAULT_API_KEY_ENV,
    DEFAULT_MODEL_NAME,
    DEFAULT_PROVIDER_BASE_URL,
)
from healthbot.config_manager import ConfigManager

logger = logging.getLogger("GeminiClient")


@dataclass(frozen=True)
class ProviderConfig:
    """Immutable configuration for the generation provider"""
    base_url: str = DEFAULT_PROVIDER_BASE_URL
    model_name: str = DEFAULT_MODEL_NAME
    api_key_env: str = DEFAULT_API_KEY_ENV
    timeout: Optional[float] = None

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model_name}:generateContent"

    @classmethod
    def from_config(cls) -> "ProviderConfig":
        """Build the provider settings from the "provider" config section."""
        section = ConfigManager.get_provider_config()
        return cls(
            base_url=section.get("base_url", DEFAULT_PROVIDER_BASE_URL),
            model_name=section.get("model_name", DEFAULT_MODEL_NAME),
            api_key_env=section.get("api_key_env", DEFAULT_API_KEY_ENV),
            timeout=section.get("timeout"),
        )


class GeminiClient:
    """Thin HTTP client for the generateContent endpoint.

    One POST per call: no retries and no streaming. The raw response is
    returned so callers can pass provider failures through untouched.
    """

    def __init__(self, config: ProviderConfig, session: requests.Session | None = None):
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def _api_key(self) -> str:
        # Read per request so a rotated key is picked up without a restart.
        api_key = os.getenv(self.config.api_key_env, "")
        if not api_key:
            logger.warning(f"{self.config.api_key_env} is not set; the provider will reject the call.")
        return api_key

    def generate_content(self, payload: Dict[str, Any]) -> requests.Response:
        """POST the payload to the configured model.

        Raises:
            requests.exceptions.RequestException: On transport failures.
        """
        logger.debug(f"POST {self.config.endpoint}")
        response = self.session.post(
            self.config.endpoint,
            json=payload,
            headers={API_KEY_HEADER: self._api_key()},
            timeout=self.config.timeout,
        )
        logger.info(f"Provider responded with status {response.status_code}")
        return response
