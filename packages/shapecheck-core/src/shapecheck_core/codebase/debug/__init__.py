import logging
import os
import time
from functools import wraps

_TRACE_LOGGER = logging.getLogger("shapecheck.trace")


def trace_enabled() -> bool:
    val = os.getenv("SHAPECHECK_TRACE", "0")
    return str(val).lower() not in {"", "0", "false", "no"}


def _outcome(result) -> str:
    # validation entry points return error lists
    if isinstance(result, list):
        return f"{len(result)} error(s)"
    return type(result).__name__


def trace(func):
    """Log entry, outcome and duration of a validation entry point when SHAPECHECK_TRACE is set."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        if not trace_enabled():
            return func(*args, **kwargs)
        _TRACE_LOGGER.debug("Entering %s", func.__qualname__)
        started = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            _TRACE_LOGGER.debug("Aborted %s: %s: %s", func.__qualname__, type(e).__name__, e)
            raise
        _TRACE_LOGGER.debug(
            "Exiting %s with %s in %.2f ms",
            func.__qualname__,
            _outcome(result),
            (time.perf_counter() - started) * 1000,
        )
        return result

    return wrapper


def configure_logging(level: int = logging.WARNING) -> None:
    """
    Ensure the shapecheck loggers have a handler in case the app didn't configure logging.
    Safe to call multiple times.
    """
    logger = logging.getLogger("shapecheck")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
