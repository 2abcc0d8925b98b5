"""Tests for slug rules and unique slug generation."""

import pytest

from neo_docs.features.slugs import SlugRules, UniqueSlugGenerator


class TestSlugRules:
    """Test slug formatting."""

    @pytest.mark.parametrize("source,expected", [
        ("Hello World", "hello-world"),
        ("  Crème brûlée!  ", "creme-brulee"),
        ("C++ & Rust", "c-rust"),
        ("---", "item"),
        ("", "item"),
        (42, "42"),
    ])
    def test_slugify(self, source, expected):
        assert SlugRules.slugify(source) == expected

    def test_max_length(self):
        slug = SlugRules.slugify("word " * 40)

        assert len(slug) <= SlugRules.SLUG_MAX_LENGTH
        assert not slug.endswith("-")

    def test_is_valid(self):
        assert SlugRules.is_valid("hello-world")
        assert not SlugRules.is_valid("Hello World")
        assert not SlugRules.is_valid("")


class TestUniqueSlugGenerator:
    """Test collision suffixes."""

    @pytest.mark.asyncio
    async def test_free_slug(self, memory_store):
        assert await UniqueSlugGenerator().generate("Hello World", memory_store) == "hello-world"

    @pytest.mark.asyncio
    async def test_collisions_get_suffixes(self, memory_store):
        generator = UniqueSlugGenerator()
        await memory_store.insert({"slug": "hello"})
        await memory_store.insert({"slug": "hello-2"})

        assert await generator.generate("Hello", memory_store) == "hello-3"

    @pytest.mark.asyncio
    async def test_own_record_is_not_a_collision(self, memory_store):
        record = await memory_store.insert({"slug": "hello"})

        slug = await UniqueSlugGenerator().generate("Hello", memory_store, exclude_id=record["id"])

        assert slug == "hello"

    @pytest.mark.asyncio
    async def test_id_shaped_slug_gets_a_suffix(self, memory_store):
        slug = await UniqueSlugGenerator().generate("0190f5b6-1c2d-7a8b-9c0d-1e2f3a4b5c6d", memory_store)

        assert slug == "0190f5b6-1c2d-7a8b-9c0d-1e2f3a4b5c6d-2"
        assert not memory_store.is_identifier(slug)
