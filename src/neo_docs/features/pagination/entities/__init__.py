from .page_data import PageData

__all__ = ["PageData"]
