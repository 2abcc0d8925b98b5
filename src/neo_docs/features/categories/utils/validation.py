"""Category payload validation."""

from typing import Any, Dict, Mapping

from ....core.exceptions import SchemaValidationError

CATEGORY_FIELDS = frozenset({"name", "description", "parent"})

CATEGORY_SORT_FIELDS = ("name", "created_at", "updated_at")


def validate_category(payload: Any, partial: bool = False) -> Dict[str, Any]:
    """Validate a category payload.

    ``name`` is required on create, ``description`` and ``parent`` are
    optional. A ``parent`` of None clears the parent on edit.
    """
    if not isinstance(payload, Mapping):
        raise SchemaValidationError("payload must be an object", field="payload")

    for key in payload:
        if key not in CATEGORY_FIELDS:
            raise SchemaValidationError(f"unknown field '{key}'", field=key)

    data: Dict[str, Any] = {}
    if "name" in payload:
        name = payload["name"]
        if not isinstance(name, str) or not name.strip():
            raise SchemaValidationError("'name' must be a non-empty string", field="name")
        data["name"] = name.strip()
    elif not partial:
        raise SchemaValidationError("'name' is required", field="name")

    if "description" in payload:
        description = payload["description"]
        if description is not None and not isinstance(description, str):
            raise SchemaValidationError("'description' must be a string", field="description")
        data["description"] = description
    elif not partial:
        data["description"] = None

    if "parent" in payload:
        parent = payload["parent"]
        if parent is not None and not isinstance(parent, str):
            raise SchemaValidationError("'parent' must be a category identity", field="parent")
        data["parent"] = parent or None
    elif not partial:
        data["parent"] = None

    return data
