"""Connector exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from .validators.rules import Violation


class ConnectorError(Exception):
    """Base connector error."""
    pass


class ConfigurationError(ConnectorError):
    """Configuration-related error."""
    pass


class ValidationError(ConfigurationError):
    """Aggregate of every rule violated by one validation pass.

    The string form joins the individual messages with ``"; "`` in field
    declaration order, so it can be surfaced to an operator as is.
    """

    def __init__(self, violations: Sequence["Violation"]) -> None:
        self.violations: List["Violation"] = list(violations)
        super().__init__("; ".join(self.messages))

    @property
    def messages(self) -> List[str]:
        return [violation.message for violation in self.violations]
