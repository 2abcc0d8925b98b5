"""Documents feature: permission-gated CRUD over one document kind."""

from .services import DocumentService
from .utils import validate_payload

__all__ = ["DocumentService", "validate_payload"]
