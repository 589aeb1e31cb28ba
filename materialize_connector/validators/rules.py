from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Mapping, NamedTuple, Tuple
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

FIELD_URL = "url"
FIELD_TABLE = "table"
FIELD_KEY = "key"
FIELDS: Tuple[str, ...] = (FIELD_URL, FIELD_TABLE, FIELD_KEY)

# PostgreSQL identifier limit:
# https://www.postgresql.org/docs/current/sql-syntax-lexical.html#SQL-SYNTAX-IDENTIFIERS
MAX_IDENTIFIER_LENGTH = 63

# Host characters accepted by Go's net/url besides ASCII letters and digits.
# Non-ASCII characters are accepted as is.
_HOST_PUNCTUATION = frozenset("-._~!$&'()*+,;=:[]<>\"%")


class ViolationKind(str, Enum):
    """Kinds of configuration rule violations."""
    REQUIRED = "required"
    INVALID_URL = "url"
    TOO_LONG = "max"
    INVALID_TYPE = "type"
    SCHEMA = "schema"


REASONS: Dict[ViolationKind, str] = {
    ViolationKind.REQUIRED: "must be set",
    ViolationKind.INVALID_URL: "must be a valid url",
    ViolationKind.TOO_LONG: "is too long",
    ViolationKind.INVALID_TYPE: "must be a string",
}


@dataclass(frozen=True)
class Violation:
    field: str
    kind: ViolationKind
    message: str

    @classmethod
    def for_field(cls, field: str, kind: ViolationKind) -> "Violation":
        return cls(field, kind, f"{field.lower()} config value {REASONS[kind]}")

    def __str__(self) -> str:
        return self.message


def is_set(value: str) -> bool:
    return value != ""


def is_url(value: str) -> bool:
    """Return True when ``value`` is a syntactically valid URL.

    A URL needs a scheme plus a host, a fragment or an opaque part
    (``mailto:ops@example.com``). ``file://`` URLs are always accepted.
    """

    s = value.lower()
    if not s:
        return False
    # urlsplit would silently strip or drop these.
    if any(c.isspace() or ord(c) < 0x20 or ord(c) == 0x7f for c in s):
        return False
    if s.startswith("file://"):
        return True
    try:
        parts = urlsplit(s)
        parts.port  # ValueError on a non-numeric or out-of-range port
    except ValueError:
        return False
    if not parts.scheme:
        return False
    host = parts.netloc.rpartition("@")[2]
    if any(not c.isalnum() and c.isascii() and c not in _HOST_PUNCTUATION for c in host):
        return False
    opaque = parts.path if not parts.netloc and not parts.path.startswith("/") else ""
    return bool(parts.netloc or parts.fragment or opaque)


def max_length(limit: int) -> Callable[[str], bool]:
    def _check(value: str) -> bool:
        return len(value) <= limit

    return _check


class Rule(NamedTuple):
    field: str
    check: Callable[[str], bool]
    kind: ViolationKind


# Order matters: violations are reported in this order and the first failing
# rule of a field hides the ones after it.
RULES: Tuple[Rule, ...] = (
    Rule(FIELD_URL, is_set, ViolationKind.REQUIRED),
    Rule(FIELD_URL, is_url, ViolationKind.INVALID_URL),
    Rule(FIELD_TABLE, max_length(MAX_IDENTIFIER_LENGTH), ViolationKind.TOO_LONG),
    Rule(FIELD_KEY, max_length(MAX_IDENTIFIER_LENGTH), ViolationKind.TOO_LONG),
)


def evaluate(values: Mapping[str, str], rules: Tuple[Rule, ...] = RULES) -> List[Violation]:
    """Run ``rules`` over ``values`` and collect every violation.

    Fields missing from ``values`` are skipped; callers project absent
    config keys to ``""`` before evaluating. A non-string value is reported
    as ``INVALID_TYPE`` and its rules are not run.
    """

    violations: List[Violation] = []
    failed: set = set()
    for rule in rules:
        if rule.field in failed or rule.field not in values:
            continue
        value = values[rule.field]
        if not isinstance(value, str):
            failed.add(rule.field)
            violations.append(Violation.for_field(rule.field, ViolationKind.INVALID_TYPE))
            continue
        if not rule.check(value):
            failed.add(rule.field)
            violations.append(Violation.for_field(rule.field, rule.kind))
    if violations:
        logger.debug("Config rules failed: %s", [v.message for v in violations])
    return violations
