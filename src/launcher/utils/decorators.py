"""Decorator utilities for cross-cutting concerns."""
import time
import logging
import functools
from typing import Any, Callable, TypeVar, cast

# Setup logging
logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def async_log_execution_time(func: F) -> F:
    """Decorator to log async function execution time.

    Args:
        func: The async function to decorate

    Returns:
        Decorated async function that logs execution time
    """
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            result = await func(*args, **kwargs)
            duration = time.perf_counter() - start_time
            logger.info(f"{func.__name__} completed in {duration:.2f}s")
            return result
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(f"{func.__name__} failed after {duration:.2f}s: {str(e)}")
            raise
    return cast(F, wrapper)
