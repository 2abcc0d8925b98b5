from .paginator import Pagination, paginate, resolve_limit

__all__ = ["Pagination", "paginate", "resolve_limit"]
