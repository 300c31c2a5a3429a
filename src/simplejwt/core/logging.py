import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
_CONFIGURED = False


def _resolve_log_level(override: str | None = None) -> int:
    raw = (override or os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    if raw in _LEVELS:
        return getattr(logging, raw, logging.INFO)
    return logging.INFO


def configure_logging(level: str | None = None) -> None:
    """Install the root handler once; ``level`` wins over ``LOG_LEVEL``."""
    global _CONFIGURED
    resolved = _resolve_log_level(level)
    if _CONFIGURED:
        if level is not None:
            logging.getLogger("simplejwt").setLevel(resolved)
        return

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("simplejwt").setLevel(resolved)
    logging.getLogger("uvicorn.error").setLevel(resolved)
    logging.getLogger("uvicorn.access").setLevel(resolved)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _CONFIGURED = True
