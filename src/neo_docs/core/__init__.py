"""Core building blocks: exceptions and the operation result type."""

from .exceptions import *  # noqa: F401,F403
from .exceptions import __all__ as _exception_names
from .results import OperationResult

__all__ = list(_exception_names) + ["OperationResult"]
