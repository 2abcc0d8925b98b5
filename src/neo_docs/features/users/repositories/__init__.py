from .memory_directory import MemoryUserDirectory
from .user_repository import AsyncPGUserDirectory
from .user_cache import CachedUserDirectory, create_cached_directory

__all__ = [
    "MemoryUserDirectory",
    "AsyncPGUserDirectory",
    "CachedUserDirectory",
    "create_cached_directory",
]
