from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from typing import Any, Dict, List, Mapping, Optional

from .base import ValidationResult, Validator
from .rules import FIELDS, Violation, ViolationKind, evaluate
from .utils import run_jsonschema_validation

logger = logging.getLogger(__name__)

CONFIG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Materialize destination connector config",
    "type": "object",
    "properties": {field: {"type": "string"} for field in FIELDS},
    "additionalProperties": True,
}


def _structural_checks(raw: Mapping[str, Any], schema: Dict[str, Any]) -> List[Violation]:
    violations: List[Violation] = []
    for path, keyword, message in run_jsonschema_validation(raw, schema):
        field = path.split(".", 1)[0] or "config"
        if keyword == "type" and field in FIELDS:
            violation = Violation.for_field(field, ViolationKind.INVALID_TYPE)
        else:
            violation = Violation(field, ViolationKind.SCHEMA, f"{field}: {message}")
        if violation not in violations:
            violations.append(violation)
    return violations


def _field_order(violation: Violation) -> int:
    return FIELDS.index(violation.field) if violation.field in FIELDS else len(FIELDS)


def _project(raw: Mapping[str, Any], skip: set) -> Dict[str, str]:
    # Absent keys read as empty strings.
    return {field: raw.get(field, "") for field in FIELDS if field not in skip}


class ConfigValidator(Validator):
    """Validate a raw connector config mapping without raising."""

    def __init__(self, schema: Optional[Dict[str, Any]] = None) -> None:
        self._schema = schema

    def validate(self, config: Mapping[str, Any]) -> ValidationResult:
        if config is None:
            config = {}
        if not isinstance(config, MappingABC):
            violation = Violation("config", ViolationKind.INVALID_TYPE, "config must be a mapping")
            return ValidationResult(False, [violation.message], [], None, [violation])

        warnings = [
            f"{key}: unrecognized config key, ignored"
            for key in config
            if key not in FIELDS
        ]

        structural = _structural_checks(config, self._schema or CONFIG_SCHEMA)
        mistyped = {v.field for v in structural if v.kind is ViolationKind.INVALID_TYPE}

        values = _project(config, mistyped)
        violations = structural + evaluate(values)
        violations.sort(key=_field_order)

        if violations:
            return ValidationResult(False, [v.message for v in violations], warnings, None, violations)
        return ValidationResult(True, [], warnings, values, [])


def validate_connector_config(config: Mapping[str, Any], schema: Optional[Dict[str, Any]] = None) -> ValidationResult:
    return ConfigValidator(schema).validate(config)
