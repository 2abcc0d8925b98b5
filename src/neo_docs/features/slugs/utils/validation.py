"""Slug formatting rules."""

import re
import unicodedata


class SlugRules:
    """Centralized rules for generated slugs."""

    SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    SLUG_MAX_LENGTH = 80
    FALLBACK_SLUG = "item"

    @staticmethod
    def slugify(source: str) -> str:
        """Lowercase, strip accents and collapse everything else to single hyphens."""
        text = unicodedata.normalize("NFKD", str(source)).encode("ascii", "ignore").decode("ascii")
        slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
        slug = slug[:SlugRules.SLUG_MAX_LENGTH].rstrip("-")
        return slug or SlugRules.FALLBACK_SLUG

    @staticmethod
    def is_valid(slug: str) -> bool:
        return bool(slug) and len(slug) <= SlugRules.SLUG_MAX_LENGTH and bool(SlugRules.SLUG_PATTERN.match(slug))
