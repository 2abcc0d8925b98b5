from .sorting import parse_sort, restrict_sort
from .error_handling import handle_storage_errors

__all__ = ["parse_sort", "restrict_sort", "handle_storage_errors"]
