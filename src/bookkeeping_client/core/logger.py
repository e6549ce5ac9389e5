import logging
import sys
import contextvars
from typing import Optional

PACKAGE_LOGGER = "bookkeeping_client"

# Batch id of the payload currently being processed
_BATCH_ID: contextvars.ContextVar[str] = contextvars.ContextVar("batch_id", default="-")


class _BatchFilter(logging.Filter):
    """Logging filter that injects the batch_id from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.batch_id = _BATCH_ID.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | batch=%(batch_id)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure the root logger and the bookkeeping_client logger.

    Output goes to stderr so stdout stays free for command output. The root
    logger stays at INFO so third-party libraries stay quiet; only
    the bookkeeping_client namespace follows the requested level.

    Safe to call multiple times; it will not duplicate handlers.
    """
    root = logging.getLogger()

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _BatchFilter) for f in h.filters):
            logging.getLogger(PACKAGE_LOGGER).setLevel(_level(level))
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_BatchFilter())
    root.addHandler(handler)
    if root.level == logging.NOTSET or root.level > logging.INFO:
        root.setLevel(logging.INFO)

    logging.getLogger(PACKAGE_LOGGER).setLevel(_level(level))


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Get a module logger; handlers live on the root logger."""
    return logging.getLogger(name)


def push_batch_id(batch_id: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current batch id in context and return a token for later reset."""
    if not batch_id:
        return None
    return _BATCH_ID.set(batch_id)


def reset_batch_id(token: Optional[contextvars.Token]) -> None:
    """Reset the batch id context using the provided token (if any)."""
    if token is None:
        return
    _BATCH_ID.reset(token)


def current_batch_id() -> str:
    return _BATCH_ID.get()
