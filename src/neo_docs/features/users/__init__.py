"""Users feature: the user directory protocol and its implementations."""

from .entities import User, UserDirectory
from .repositories import (
    AsyncPGUserDirectory,
    CachedUserDirectory,
    MemoryUserDirectory,
    create_cached_directory,
)

__all__ = [
    "User",
    "UserDirectory",
    "AsyncPGUserDirectory",
    "CachedUserDirectory",
    "MemoryUserDirectory",
    "create_cached_directory",
]
