"""Central configuration constants for HealthBot.

Fixed texts shared by the relay and the UI live here. Tunable settings
(provider host, model, relay URL, logging) come from cfg/config.json via
ConfigManager; these values are the defaults when a key is missing.
"""

import os

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "cfg", "config.json")

# --- Provider ---
DEFAULT_PROVIDER_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL_NAME = "gemini-2.0-flash"
DEFAULT_API_KEY_ENV = "GEMINI_API_KEY"
API_KEY_HEADER = "X-goog-api-key"

# --- Prompting ---
SYSTEM_INSTRUCTION = (
    "You are a helpful assistant that only answers health-related questions. "
    "If the question is not about health, politely refuse to answer."
)
DEFAULT_GREETING = "Hello!"

# --- Relay outcomes ---
FALLBACK_ANSWER = "Sorry, I couldn't generate a response."
INVALID_REQUEST_MESSAGE = "Invalid request format"
SERVER_ERROR_MESSAGE = "Server error"

# --- UI ---
DEFAULT_RELAY_URL = "http://127.0.0.1:8000/api/chat"
UNREACHABLE_MESSAGE = "Error: Could not reach the server."
