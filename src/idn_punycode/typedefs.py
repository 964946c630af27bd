"""Type definitions for conversion results.

``ToolResult`` is the structured value returned by every function in
``idn_punycode.tools``. Failures never raise out of that layer; they are
reported through ``success`` and ``error`` instead.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ToolResult:
    """Stores the result of a conversion tool operation."""

    success: bool
    output: str | list[str] | dict[str, Any] | list[dict[str, Any]] | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
