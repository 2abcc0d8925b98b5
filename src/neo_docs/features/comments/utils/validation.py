"""Comment payload and filter validation."""

from typing import Any, Dict, Mapping, Optional

from ....config.constants import CommentState
from ....core.exceptions import SchemaValidationError

# Fields a caller may filter listings on
COMMENT_FILTER_FIELDS = frozenset({"document", "user", "parent", "state"})

COMMENT_SORT_FIELDS = ("created_at", "updated_at", "title", "state")

# States a caller may request; PARENT_DELETED is only set by the delete cascade
REQUESTABLE_STATES = frozenset({CommentState.ACCEPTED, CommentState.REJECTED, CommentState.WAITING})


def validate_content(payload: Any, partial: bool = False) -> Dict[str, Any]:
    """Validate title and body. Other keys are ignored."""
    if not isinstance(payload, Mapping):
        raise SchemaValidationError("payload must be an object", field="payload")

    content = {}
    for field in ("title", "body"):
        if field not in payload:
            if not partial:
                raise SchemaValidationError(f"'{field}' is required", field=field)
            continue
        value = payload[field]
        if not isinstance(value, str) or not value.strip():
            raise SchemaValidationError(f"'{field}' must be a non-empty string", field=field)
        content[field] = value
    return content


def validate_state(value: Any) -> str:
    try:
        state = CommentState(value)
    except ValueError:
        state = None
    if state not in REQUESTABLE_STATES:
        raise SchemaValidationError(
            f"state must be one of {sorted(s.value for s in REQUESTABLE_STATES)}", field="state"
        )
    return state.value


def clean_filter(filter: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Restrict a caller-supplied listing filter to comment fields."""
    cleaned = {}
    for field, value in (filter or {}).items():
        if field not in COMMENT_FILTER_FIELDS:
            raise SchemaValidationError(f"can not filter comments on '{field}'", field=field)
        if field == "state":
            try:
                value = CommentState(value).value
            except ValueError:
                raise SchemaValidationError(f"unknown comment state '{value}'", field="state")
        cleaned[field] = value
    return cleaned
