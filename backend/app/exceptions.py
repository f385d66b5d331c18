"""
Exceptions raised by the progress engine.

Only configuration defects are exceptional here. A missing case is
reported as ``None`` by the service, and an unclassifiable description
falls back to the default service category.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ProgressEngineError(Exception):
    message: str
    code: str = "PE_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            result["details"] = self.details
        return result


@dataclass
class ConfigurationError(ProgressEngineError):
    """Rule, weight or keyword tables are incomplete or inconsistent."""

    code: str = "PE_CONFIGURATION_ERROR"
