from .protocols import Filter, Record, RecordStore

__all__ = ["Filter", "Record", "RecordStore"]
