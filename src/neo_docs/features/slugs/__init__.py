"""Slugs feature: human-readable unique identities for records."""

from .entities import SlugGenerator
from .services import UniqueSlugGenerator
from .utils import SlugRules

__all__ = ["SlugGenerator", "UniqueSlugGenerator", "SlugRules"]
