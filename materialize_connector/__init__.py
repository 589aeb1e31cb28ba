"""Configuration for the Materialize destination connector."""

from __future__ import annotations

from .config import Config, load_from_env, parse
from .exceptions import ConfigurationError, ConnectorError, ValidationError
from .validators import ValidationResult, Violation, ViolationKind, validate_connector_config

__all__ = [
    "Config",
    "parse",
    "load_from_env",
    "ConnectorError",
    "ConfigurationError",
    "ValidationError",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "validate_connector_config",
]

__version__ = "0.1.0"
