"""Logging utilities with Rich handler and simple setup."""

from __future__ import annotations

import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar
from rich.logging import RichHandler

F = TypeVar('F', bound=Callable[..., Any])


def setup_logging(verbose: bool = False, level: Optional[int | str] = None) -> None:
    """Configure global logging with Rich handler.

    Args:
        verbose: When True, set level to DEBUG; otherwise INFO.
        level: Optional explicit level to override verbose flag.
    """
    resolved_level = (
        level if level is not None else (logging.DEBUG if verbose else logging.INFO)
    )
    logging.basicConfig(
        level=resolved_level,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )

    # Reduce noise from the HTTP stack by default
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def trace(func: F) -> F:
    """Decorator that logs execution time of a function or coroutine function.

    Args:
        func: The function to wrap with timing logs.

    Returns:
        The wrapped function with timing logs.
    """
    logger = logging.getLogger(func.__module__)

    def done(start_time: float) -> None:
        elapsed = time.time() - start_time
        logger.debug(f"[dim]⏱️  `{func.__name__}` completed in {elapsed:.3f}s[/dim]")

    def failed(start_time: float, e: Exception) -> None:
        elapsed = time.time() - start_time
        logger.debug(f"[dim]⏱️  `{func.__name__}` failed after {elapsed:.3f}s: {e}[/dim]")

    if inspect.iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                failed(start_time, e)
                raise
            done(start_time)
            return result

        return async_wrapper  # type: ignore

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.time()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            failed(start_time, e)
            raise
        done(start_time)
        return result

    return wrapper  # type: ignore
