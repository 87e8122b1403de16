import logging
import sys
from logging.handlers import RotatingFileHandler

# Shared logger; handlers are attached by setup_logging() at process start
logger = logging.getLogger("dev_notes")


def setup_logging(name: str = "dev_notes"):
    """
    Setup logging configuration.

    stdout carries the MCP protocol stream, so console output goes to stderr.
    """
    from .config import ensure_dirs, get_log_path
    from .config_loader import config

    ensure_dirs()
    log_file = get_log_path(name)
    level = getattr(logging, str(config.get("logging.level", "INFO")).upper(), logging.INFO)

    log = logging.getLogger(name)
    log.setLevel(level)

    # Prevent propagation to root logger (avoid duplicate logs from SDK handlers)
    log.propagate = False

    # Clear any existing handlers to prevent duplicates
    log.handlers.clear()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=int(config.get("logging.max_log_size", 10 * 1024 * 1024)),
        backupCount=int(config.get("logging.backup_count", 5)),
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    log.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    log.addHandler(stream_handler)

    return log
