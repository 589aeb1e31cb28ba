"""Materialize connector configuration record and parser."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from ..exceptions import ValidationError
from ..validators.config_validator import ConfigValidator
from ..validators.rules import FIELD_KEY, FIELD_TABLE, FIELD_URL, MAX_IDENTIFIER_LENGTH, evaluate

logger = logging.getLogger(__name__)

# Config names understood by the connector.
CONFIG_KEY_URL = FIELD_URL
CONFIG_KEY_TABLE = FIELD_TABLE
CONFIG_KEY_KEY = FIELD_KEY

ENV_PREFIX = "MATERIALIZE_"

__all__ = [
    "CONFIG_KEY_URL",
    "CONFIG_KEY_TABLE",
    "CONFIG_KEY_KEY",
    "ENV_PREFIX",
    "MAX_IDENTIFIER_LENGTH",
    "Config",
    "parse",
    "load_from_env",
]


@dataclass(frozen=True)
class Config:
    """Validated configuration needed to write to Materialize."""

    url: str
    # Table and key names are capped at MAX_IDENTIFIER_LENGTH characters.
    table: str = ""
    key: str = ""

    def validate(self) -> None:
        """Raise ``ValidationError`` listing every rule this config breaks."""

        violations = evaluate(asdict(self))
        if violations:
            raise ValidationError(violations)


def parse(raw: Optional[Mapping[str, Any]]) -> Config:
    """Parse a raw connector config mapping into a validated ``Config``.

    Missing keys read as empty strings and unrecognized keys are ignored.
    Raises ``ValidationError`` when any rule fails.
    """

    result = ConfigValidator().validate(raw)
    for warning in result.warnings:
        logger.debug("Connector config: %s", warning)

    if not result.success or result.normalized is None:
        error = ValidationError(result.violations)
        logger.warning("Invalid connector config: %s", error)
        raise error

    config = Config(**result.normalized)
    logger.debug("Parsed connector config for table '%s'", config.table)
    return config


def load_from_env(env: Optional[Mapping[str, str]] = None, prefix: str = ENV_PREFIX) -> Config:
    """Parse the connector config from ``<prefix>URL``, ``<prefix>TABLE`` and ``<prefix>KEY``."""

    source = os.environ if env is None else env
    raw = {}
    for name in (CONFIG_KEY_URL, CONFIG_KEY_TABLE, CONFIG_KEY_KEY):
        value = source.get(f"{prefix}{name.upper()}")
        if value is not None:
            raw[name] = value
    return parse(raw)
