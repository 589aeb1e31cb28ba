from .base import ValidationResult, Validator
from .config_validator import (
    CONFIG_SCHEMA,
    ConfigValidator,
    validate_connector_config,
)
from .rules import RULES, Rule, Violation, ViolationKind

__all__ = [
    "ValidationResult",
    "Validator",
    "CONFIG_SCHEMA",
    "ConfigValidator",
    "validate_connector_config",
    "RULES",
    "Rule",
    "Violation",
    "ViolationKind",
]
