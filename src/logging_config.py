"""Logging configuration for the job board backend."""
import logging
import logging.handlers
from pathlib import Path
from typing import Mapping, Optional


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    logger_levels: Optional[Mapping[str, str]] = None,
) -> None:
    """Configure application-wide logging.

    Call once at application startup (main.py, scripts).

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path for rotating file handler
        logger_levels: Per-logger overrides, e.g. {"src.matching": "DEBUG"}
            to see scoring counts for every recommendation call
    """
    # Named overrides apply even when handlers already exist
    for name, name_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(getattr(logging, name_level.upper(), logging.INFO))

    root = logging.getLogger()

    # Avoid duplicate handlers on repeated calls
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    root.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
        )
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    # Quiet noisy libraries
    for name in ("urllib3", "sqlalchemy"):
        logging.getLogger(name).setLevel(logging.WARNING)
