"""Comments feature: threaded comments attached to documents."""

from .services import CommentService
from .utils import clean_filter, validate_content, validate_state

__all__ = ["CommentService", "clean_filter", "validate_content", "validate_state"]
