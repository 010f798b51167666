"""
Decorators for controller layer functionality.

This module provides decorators for controller-level concerns such as
logging the start, completion and failure of round operations.
"""

import functools
from typing import Any, Callable, Optional, TypeVar

F = TypeVar('F', bound=Callable[..., Any])


def logged_action(action_name: Optional[str] = None):
    """
    Decorator to automatically log controller actions.

    The decorated method's instance must expose a ``_logger`` attribute.
    Exceptions are logged and re-raised unchanged.

    Args:
        action_name: Optional custom name for the action. If not provided,
                    the function name will be used.

    Example:
        @logged_action("Player Hit")
        def hit(self) -> RoundSnapshot:
            ...
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, '_logger', None)
            name = action_name or func.__name__

            if logger:
                logger.debug(f"Starting {name}")

            try:
                result = func(self, *args, **kwargs)
            except Exception as e:
                if logger:
                    logger.error(f"Failed {name}: {e}")
                raise

            if logger:
                logger.debug(f"Completed {name} successfully")
            return result

        return wrapper  # type: ignore[return-value]
    return decorator
