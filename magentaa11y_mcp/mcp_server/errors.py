"""Tool error types and the decorator that turns failures into text replies."""

import logging
from functools import wraps
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class ToolError(Exception):
    """Base class for failures reported back to the caller as text."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ToolValidationError(ToolError):
    """A required parameter is missing, empty or out of range."""


class ComponentNotFoundError(ToolError):
    """A platform/component/section did not resolve."""


class UnknownToolError(ToolError):
    """The requested tool name is not one of the registered tools."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


def handle_tool_errors(operation: str) -> Callable[[F], F]:
    """Decorator for standardized tool error handling.

    ``ToolError`` subclasses become their message; anything else is logged
    and reported as ``Error <operation>: <message>``. A tool never raises,
    so one failing call cannot disturb other calls in the same batch.

    Usage:
        @handle_tool_errors("getting component")
        def get_web_component(self, component: str) -> str:
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ToolError as e:
                logger.info(f"{func.__name__}: {e.message}")
                return e.message
            except Exception as e:
                logger.error(f"Failed {operation}: {e}", exc_info=True)
                return f"Error {operation}: {e}"

        return wrapper

    return decorator
