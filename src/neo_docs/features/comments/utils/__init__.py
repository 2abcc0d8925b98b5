from .validation import (
    COMMENT_FILTER_FIELDS,
    COMMENT_SORT_FIELDS,
    clean_filter,
    validate_content,
    validate_state,
)

__all__ = [
    "COMMENT_FILTER_FIELDS",
    "COMMENT_SORT_FIELDS",
    "clean_filter",
    "validate_content",
    "validate_state",
]
