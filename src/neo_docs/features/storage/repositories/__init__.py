from .memory_store import MemoryRecordStore
from .asyncpg_store import AsyncPGRecordStore

__all__ = ["MemoryRecordStore", "AsyncPGRecordStore"]
