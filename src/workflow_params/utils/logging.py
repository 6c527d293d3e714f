from __future__ import annotations
import logging
from functools import wraps
from typing import Any, Callable, Sequence


def _call_arguments(func: Callable[..., Any], args: Sequence[Any]) -> Sequence[Any]:
    # Methods log their arguments without the bound instance
    if args and "." in func.__qualname__ and "<locals>" not in func.__qualname__:
        return args[1:]
    return args


def log_calls(
    logger_name: str | None = None,
    *,
    level: int = logging.DEBUG,
    redact: Callable[[Any], Any] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator to log calls and results, and to log-then-reraise failures.

    Args:
        logger_name: Logger to write to (defaults to the function's module)
        level: Level for the call and result records
        redact: Applied to every argument before it is logged
    """

    def _decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = logger_name or func.__module__
        logger = logging.getLogger(name)

        @wraps(func)
        def _wrapper(*args: Any, **kwargs: Any) -> Any:
            if logger.isEnabledFor(level):
                call_args = tuple(_call_arguments(func, args))
                if redact is not None:
                    call_args = tuple(redact(arg) for arg in call_args)
                    kwargs_shown = {key: redact(value) for key, value in kwargs.items()}
                else:
                    kwargs_shown = kwargs
                logger.log(level, "%s args=%s kwargs=%s", func.__qualname__, call_args, kwargs_shown)
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("%s failed", func.__qualname__)
                raise
            if result is not None:
                logger.log(level, "%s returned %r", func.__qualname__, result)
            return result

        return _wrapper

    return _decorator


def configure_logging(level: str = "WARNING") -> None:
    """Configure the root logger for command line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["log_calls", "configure_logging"]
