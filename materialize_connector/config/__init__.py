"""Connector configuration parsing."""

from .config import (
    CONFIG_KEY_KEY,
    CONFIG_KEY_TABLE,
    CONFIG_KEY_URL,
    ENV_PREFIX,
    MAX_IDENTIFIER_LENGTH,
    Config,
    load_from_env,
    parse,
)

__all__ = [
    "CONFIG_KEY_KEY",
    "CONFIG_KEY_TABLE",
    "CONFIG_KEY_URL",
    "ENV_PREFIX",
    "MAX_IDENTIFIER_LENGTH",
    "Config",
    "load_from_env",
    "parse",
]
