"""Dependency wiring for FastAPI routes.

Provide shared singletons like the relay and its provider client.
"""

from functools import lru_cache
from healthbot.relay.relay import AnswerRelay


@lru_cache(maxsize=1)
def get_relay() -> AnswerRelay:
	"""Return a cached `AnswerRelay` singleton instance."""
	return AnswerRelay()
