"""
Request and result models for a single screenshot invocation
"""

import json
import re
from typing import Any, Optional

from pydantic import BaseModel, Field

from modules.errors import ErrorFactory, RenderException

# Leading integer of a CLI value, e.g. "800.5" -> "800", "640px" -> "640"
_INT_PREFIX = re.compile(r"^[+-]?\d+")


def parse_dimension(value: Any, default: int, name: str = "width") -> int:
    """
    Parse a width or height CLI argument

    Args:
        value: Raw argument, None when omitted
        default: Value used when the argument is omitted or empty
        name: Dimension name for error messages

    Returns:
        Positive integer dimension
    """
    if value is None:
        return default
    if isinstance(value, bool):
        raise RenderException(ErrorFactory.invalid_dimension(name, value))
    if isinstance(value, (int, float)):
        number = int(value)
    else:
        text = str(value).strip()
        if not text:
            return default
        match = _INT_PREFIX.match(text)
        if not match:
            raise RenderException(ErrorFactory.invalid_dimension(name, value))
        number = int(match.group(0))

    if number <= 0:
        raise RenderException(ErrorFactory.invalid_dimension(name, value))
    return number


class ScreenshotRequest(BaseModel):
    """Screenshot request model"""
    html: str
    width: int = Field(default=1200, gt=0, description="Viewport and clip width in pixels")
    height: int = Field(default=630, gt=0, description="Viewport and clip height in pixels")


class ScreenshotResult(BaseModel):
    """Result printed to stdout"""
    success: bool
    data: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: str) -> "ScreenshotResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: str) -> "ScreenshotResult":
        return cls(success=False, error=error)

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def to_json(self) -> str:
        return json.dumps(self.model_dump(exclude_none=True))
