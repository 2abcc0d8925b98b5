"""Payload validation against a document kind's schema descriptor."""

import copy
from datetime import datetime
from typing import Any, Dict, Mapping

from ....config.constants import DocumentState
from ....core.exceptions import SchemaValidationError
from ...permissions.entities import DocumentConfig

# Stripped from payloads; the store and slug generator own them
SERVER_MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at", "slug"})


def _is_datetime(value: Any) -> bool:
    if isinstance(value, datetime):
        return True
    if isinstance(value, str):
        try:
            datetime.fromisoformat(value)
            return True
        except ValueError:
            return False
    return False


TYPE_CHECKS = {
    "string": lambda v: isinstance(v, str),
    "integer": lambda v: isinstance(v, int) and not isinstance(v, bool),
    "number": lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
    "boolean": lambda v: isinstance(v, bool),
    "list": lambda v: isinstance(v, (list, tuple)),
    "dict": lambda v: isinstance(v, dict),
    "datetime": _is_datetime,
    "any": lambda v: True,
}


def validate_payload(payload: Any, config: DocumentConfig, partial: bool = False) -> Dict[str, Any]:
    """Validate a create (full) or edit (partial) payload.

    Returns a cleaned copy with server-managed fields removed and, for full
    payloads, declared defaults applied.

    Raises:
        SchemaValidationError: naming the first offending field
    """
    if not isinstance(payload, Mapping):
        raise SchemaValidationError("payload must be an object", field="payload")

    data = {
        key: copy.deepcopy(value)
        for key, value in payload.items()
        if key not in SERVER_MANAGED_FIELDS
    }

    allowed = set(config.fields) | config.system_fields
    for key in data:
        if key not in allowed:
            raise SchemaValidationError(f"unknown field '{key}'", field=key)

    for name, spec in config.fields.items():
        if name in data:
            value = data[name]
            if value is None:
                if spec.required:
                    raise SchemaValidationError(f"'{name}' is required", field=name)
                continue
            if not TYPE_CHECKS[spec.type](value):
                raise SchemaValidationError(f"'{name}' must be of type {spec.type}", field=name)
        elif not partial:
            if spec.default is not None:
                data[name] = copy.deepcopy(spec.default)
            elif spec.required:
                raise SchemaValidationError(f"'{name}' is required", field=name)

    if "state" in data:
        try:
            data["state"] = DocumentState(data["state"]).value
        except ValueError:
            raise SchemaValidationError(
                f"state must be one of {[s.value for s in DocumentState]}", field="state"
            )

    if "categories" in data:
        categories = data["categories"]
        if not isinstance(categories, (list, tuple)) or not all(isinstance(c, str) for c in categories):
            raise SchemaValidationError("categories must be a list of identities", field="categories")
        data["categories"] = list(categories)

    return data
