"""Categories feature: one-level category trees tagging documents."""

from .services import CategoryService
from .utils import validate_category

__all__ = ["CategoryService", "validate_category"]
