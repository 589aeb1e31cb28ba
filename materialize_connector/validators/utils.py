from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Tuple

from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)


def run_jsonschema_validation(config: Mapping[str, Any], schema: Dict[str, Any]) -> List[Tuple[str, str, str]]:
    """
    Validate ``config`` against a JSON Schema.
    Returns ``(path, keyword, message)`` triples where ``keyword`` is the
    failing schema keyword (``type``, ``pattern``, ...); an empty list means
    no structural errors. The root object is reported with an empty path.
    """
    validator = Draft202012Validator(schema)
    results: List[Tuple[str, str, str]] = []
    for error in validator.iter_errors(dict(config)):
        path = ".".join(str(p) for p in error.absolute_path)
        logger.debug("Schema violation at '%s' (%s): %s", path, error.validator, error.message)
        results.append((path, str(error.validator), error.message))
    return results
