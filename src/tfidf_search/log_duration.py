"""Wall-clock timing through the logging module, plus an opt-in handler setup."""

from __future__ import annotations

from collections.abc import Callable
import functools
import logging
import sys
import time
from typing import Any

from tfidf_search.config import LOG_LEVEL

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "tfidf_search"


class LogDuration:
    """
    Logs how long a block took when it exits, including on error.

    Usage:
        with LogDuration("match_document"):
            ...

        @LogDuration("remove_duplicates", level=logging.INFO)
        def remove_duplicates(server): ...
    """

    def __init__(self, operation: str, level: int = logging.DEBUG, log: logging.Logger | None = None):
        self.operation = operation
        self.level = level
        self.log = log or logger
        self.elapsed_ms = 0.0
        self._start: float | None = None

    def __enter__(self) -> LogDuration:
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
        self.log.log(self.level, "%s: %.3f ms", self.operation, self.elapsed_ms)

    def __call__(self, func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with LogDuration(self.operation, self.level, self.log):
                return func(*args, **kwargs)

        return wrapper


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a single stdout handler to the package logger.

    Library modules only create loggers; hosts (CLIs, notebooks) call this
    when they want output. Calling it again replaces the previous handler.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = (level or LOG_LEVEL).upper()
    package_logger.setLevel(getattr(logging, resolved, logging.WARNING))

    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    package_logger.addHandler(handler)
    return package_logger
