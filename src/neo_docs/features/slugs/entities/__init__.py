from .protocols import SlugGenerator

__all__ = ["SlugGenerator"]
