"""Storage feature: the record store protocol, its implementations and identity lookup."""

from .entities import Filter, Record, RecordStore
from .repositories import AsyncPGRecordStore, MemoryRecordStore
from .services import IdentityResolver
from .utils import parse_sort, restrict_sort

__all__ = [
    "Filter",
    "Record",
    "RecordStore",
    "AsyncPGRecordStore",
    "MemoryRecordStore",
    "IdentityResolver",
    "parse_sort",
    "restrict_sort",
]
