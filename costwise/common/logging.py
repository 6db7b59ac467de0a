import logging
import sys

from costwise.config import settings

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_ROOT_LOGGER = "costwise"


def setup_logging(level: str | None = None) -> None:
    """Attach a stream handler to the ``costwise`` logger tree.

    Safe to call more than once; the handler is only installed the first time.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not any(getattr(h, "_costwise", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._costwise = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    # Keep uvicorn's access log from duplicating AuditMiddleware output
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
