"""Pagination feature: page/limit coercion, skip offsets and page metadata."""

from .entities import PageData
from .services import Pagination, paginate, resolve_limit

__all__ = ["PageData", "Pagination", "paginate", "resolve_limit"]
