"""
Error codes and exception types for screenshot rendering
Every failure ends up as a RenderException whose message is reported to the caller
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)


class ErrorCodes:
    """Standardized error code constants"""

    # Input validation errors
    INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
    INVALID_DIMENSION = "INVALID_DIMENSION"

    # Rendering errors
    BROWSER_ERROR = "BROWSER_ERROR"
    RENDERING_TIMEOUT = "RENDERING_TIMEOUT"

    # General errors
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


@dataclass
class RenderError:
    """Rendering error information"""
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    suggestions: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.code,
            "error_message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class RenderException(Exception):
    """Raised for any failure while producing a screenshot"""

    def __init__(self, error: RenderError):
        self.error = error
        super().__init__(str(error))

    @property
    def message(self) -> str:
        return self.error.message

    def to_dict(self) -> Dict[str, Any]:
        return self.error.to_dict()


class ErrorFactory:
    """Factory for error objects"""

    @staticmethod
    def missing_html() -> RenderError:
        return RenderError(
            code=ErrorCodes.INVALID_ARGUMENTS,
            message="No HTML content provided",
            suggestions="Pass the HTML string as the first argument, or '-' to read it from stdin",
        )

    @staticmethod
    def invalid_arguments(message: str) -> RenderError:
        return RenderError(
            code=ErrorCodes.INVALID_ARGUMENTS,
            message=f"Invalid arguments: {message}",
            suggestions="Usage: html [width] [height], put -- before HTML that starts with '--'",
        )

    @staticmethod
    def invalid_dimension(name: str, value: Any) -> RenderError:
        return RenderError(
            code=ErrorCodes.INVALID_DIMENSION,
            message=f"Invalid {name}: {value!r}",
            details={"name": name, "value": value},
            suggestions=f"{name.capitalize()} must be a positive integer",
        )

    @staticmethod
    def browser_error(stage: str = None, original_error: str = None) -> RenderError:
        """Browser operation failed"""
        return RenderError(
            code=ErrorCodes.BROWSER_ERROR,
            message=original_error or "Browser operation failed",
            details={"stage": stage} if stage else None,
            suggestions="Check that Chromium is installed (playwright install chromium)",
        )

    @staticmethod
    def rendering_timeout(stage: str = None, original_error: str = None) -> RenderError:
        """Browser operation timed out"""
        return RenderError(
            code=ErrorCodes.RENDERING_TIMEOUT,
            message=original_error or "Rendering operation timed out",
            details={"stage": stage} if stage else None,
            suggestions="Check external resources referenced by the HTML or raise BROWSER_TIMEOUT",
        )

    @staticmethod
    def unexpected_error(stage: str = None, original_error: str = None) -> RenderError:
        details = {"stage": stage} if stage else None
        return RenderError(
            code=ErrorCodes.UNEXPECTED_ERROR,
            message=original_error or "An unexpected error occurred",
            details=details,
        )


def handle_async_render_exception(stage: str):
    """Decorator converting exceptions of an async rendering stage into RenderException"""
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except RenderException:
                raise
            except PlaywrightTimeoutError as e:
                raise RenderException(
                    ErrorFactory.rendering_timeout(stage=stage, original_error=str(e))
                ) from e
            except PlaywrightError as e:
                raise RenderException(
                    ErrorFactory.browser_error(stage=stage, original_error=str(e))
                ) from e
            except Exception as e:
                logger.error(f"Unexpected error in {func.__name__}: {e}")
                raise RenderException(
                    ErrorFactory.unexpected_error(stage=stage, original_error=str(e))
                ) from e
        return wrapper
    return decorator
