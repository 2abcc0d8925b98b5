from .validation import SlugRules

__all__ = ["SlugRules"]
