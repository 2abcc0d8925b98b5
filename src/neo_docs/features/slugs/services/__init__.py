from .slug_generator import UniqueSlugGenerator

__all__ = ["UniqueSlugGenerator"]
