import logging
import os
import sys

from healthbot.config_manager import ConfigManager

NOISY_LOGGERS = ("urllib3", "watchdog")


def setup_logging(default_level=logging.INFO) -> None:
    """Initialize logging system for the entire application.

    Reads the "logging" section through ConfigManager, creates the log
    directory, and configures both file and console handlers.

    Args:
        default_level: Console level used when the config does not name one.
    """
    try:
        log_cfg = ConfigManager.get_section("logging")
    except FileNotFoundError:
        log_cfg = {}

    log_dir = log_cfg.get("log_dir", "logs")
    log_file = log_cfg.get("log_file", "app.log")
    file_level = getattr(logging, log_cfg.get("file_level", "DEBUG"))
    console_level = getattr(logging, log_cfg.get("console_level", logging.getLevelName(default_level)))

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_file)

    # Clear previous handlers to avoid duplicate logs if called multiple times
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)-20s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(file_level)
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"Logging initialized. File: {log_path}")
