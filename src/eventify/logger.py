import logging
import sys
from typing import Any, Callable, Protocol

from eventify.errors import ConfigurationError

LOG_PREFIX = "[EVENTIFY_PRO]"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class InfoLogger(Protocol):
    def info(self, message: str) -> None: ...


class DefaultLogger:
    """Writes timestamped INFO lines to stdout.

    Used when no logger is passed to the publisher.
    """

    def __init__(self, name: str = "eventify_pro"):
        self._logger = logging.getLogger(name)
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self._logger.addHandler(handler)
        self._logger.setLevel(logging.INFO)
        # lines go to stdout only, never to root handlers
        self._logger.propagate = False

    def info(self, message: str) -> None:
        self._logger.info(message)


def ensure_info_logger(logger: Any) -> Callable[[str], None]:
    """Return the logger's bound ``info`` method.

    Args:
        logger: Any object expected to expose ``info(message)``.

    Returns:
        The callable used for every later log line.

    Raises:
        ConfigurationError: If the object has no callable ``info``.
    """
    info = getattr(logger, "info", None)
    if not callable(info):
        raise ConfigurationError("Logger should respond to info(message) call")
    return info


def format_log_message(method: str, params: dict, error: str | None = None) -> str:
    if error is None:
        outcome = f"#{method} call succeeded"
    else:
        outcome = f"#{method} call returned error: {error}"
    return f"{LOG_PREFIX} {outcome}\nParams: {params}"
