"""Generic helpers for neo-docs."""

from .uuid import generate_uuid_v7, is_valid_uuid
from .numbers import to_natural_number

__all__ = [
    "generate_uuid_v7",
    "is_valid_uuid",
    "to_natural_number",
]
