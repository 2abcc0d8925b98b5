from .schema_validation import SERVER_MANAGED_FIELDS, TYPE_CHECKS, validate_payload

__all__ = ["SERVER_MANAGED_FIELDS", "TYPE_CHECKS", "validate_payload"]
