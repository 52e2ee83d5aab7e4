"""CLI logging helpers."""

import functools
import logging
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


def get_cli_logger() -> logging.Logger:
    """Return the logger shared by CLI commands."""
    return logging.getLogger("runtime_metrics.cli")


def cli_command(command_name: str) -> Callable[[F], F]:
    """Log start, finish and duration of a CLI command at debug level."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = get_cli_logger()
            start = time.perf_counter()
            logger.debug("Running command %s", command_name)
            try:
                return func(*args, **kwargs)
            finally:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.debug("Finished command %s in %.2fms", command_name, duration_ms)

        return wrapper  # type: ignore[return-value]

    return decorator
