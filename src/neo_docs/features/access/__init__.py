"""Access feature: the authorization base shared by every entity service."""

from .services import EntityAccessController

__all__ = ["EntityAccessController"]
