from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol

from .rules import Violation


@dataclass(frozen=True)
class ValidationResult:
    success: bool
    errors: List[str]
    warnings: List[str]
    normalized: Optional[Dict[str, str]] = None
    violations: List[Violation] = field(default_factory=list)


class Validator(Protocol):
    def validate(self, config: Mapping[str, Any]) -> ValidationResult:
        ...
