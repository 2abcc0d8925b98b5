from .access_controller import EntityAccessController

__all__ = ["EntityAccessController"]
