from .validation import CATEGORY_FIELDS, CATEGORY_SORT_FIELDS, validate_category

__all__ = ["CATEGORY_FIELDS", "CATEGORY_SORT_FIELDS", "validate_category"]
