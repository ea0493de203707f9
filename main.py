import argparse
import logging
import os
import subprocess
import sys

# Ensure Python can import modules from the 'healthbot' folder
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv

from healthbot.utils.logger import setup_logging
from healthbot.config_manager import ConfigManager

load_dotenv()
setup_logging()

logger = logging.getLogger("Launcher")

APP_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "healthbot", "app.py")


def main():
    """Start the relay API or the chat page."""
    parser = argparse.ArgumentParser(description="HealthBot launcher")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # --- COMMAND: API ---
    parser_api = subparsers.add_parser("api", help="Serve the answer relay")
    parser_api.add_argument("--host", help="Bind address (default: relay.host from config)")
    parser_api.add_argument("--port", type=int, help="Port (default: relay.port from config)")

    # --- COMMAND: UI ---
    subparsers.add_parser("ui", help="Serve the chat page")

    args = parser.parse_args()

    if args.command == "api":
        relay_cfg = ConfigManager.get_section("relay")
        host = args.host or relay_cfg.get("host", "127.0.0.1")
        port = args.port or relay_cfg.get("port", 8000)
        if not ConfigManager.validate_required_keys(["provider.base_url", "provider.model_name"]):
            logger.warning("Provider settings incomplete; built-in defaults will be used.")
        logger.info(f"Starting relay on {host}:{port}")
        command = [sys.executable, "-m", "uvicorn", "healthbot.api.main:app", "--host", host, "--port", str(port)]

    elif args.command == "ui":
        logger.info(f"Starting chat page (relay: {ConfigManager.get('ui', 'relay_url')})")
        command = [sys.executable, "-m", "streamlit", "run", APP_PATH]

    try:
        subprocess.run(command, check=True)
    except KeyboardInterrupt:
        logger.info("Stopped.")
    except subprocess.CalledProcessError as e:
        logger.error(f"{args.command} exited with status {e.returncode}")
        sys.exit(e.returncode)


if __name__ == "__main__":
    main()
