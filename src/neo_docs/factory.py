"""Assembly of a document kind from one declaration.

A document kind bundles the normalized configuration with its three
services. Stores default to in-memory collections; use
``create_postgres_document_kind`` to back them with PostgreSQL tables.
"""

import logging
from typing import Optional

from .config.settings import DocumentSettings, get_settings
from .database.connection import DatabaseManager
from .features.categories import CategoryService
from .features.comments import CommentService
from .features.documents import DocumentService
from .features.permissions import DocumentConfig, normalize
from .features.permissions.services.permission_resolver import RawConfig
from .features.slugs import SlugGenerator, UniqueSlugGenerator
from .features.storage import AsyncPGRecordStore, MemoryRecordStore, RecordStore
from .features.users import UserDirectory

logger = logging.getLogger(__name__)


class DocumentKind:
    """Normalized configuration plus the document, comment and category services."""

    def __init__(
        self,
        options: RawConfig,
        *,
        users: UserDirectory,
        store: Optional[RecordStore] = None,
        comment_store: Optional[RecordStore] = None,
        category_store: Optional[RecordStore] = None,
        slug_generator: Optional[SlugGenerator] = None,
        settings: Optional[DocumentSettings] = None,
    ):
        self.config: DocumentConfig = normalize(options)
        settings = settings or get_settings()
        slug_generator = slug_generator or UniqueSlugGenerator()
        name = self.config.name

        self.store = store or MemoryRecordStore(name, unique_fields=self.config.unique_fields)
        self.comment_store = comment_store or MemoryRecordStore(f"{name}_comments")
        self.category_store = category_store or MemoryRecordStore(
            f"{name}_categories", unique_fields=("slug",)
        )

        self.documents = DocumentService(
            self.config,
            self.store,
            users,
            slug_generator=slug_generator,
            category_store=self.category_store,
            settings=settings,
        )
        self.comments = CommentService(
            self.config,
            self.comment_store,
            self.store,
            users,
            settings=settings,
        )
        self.categories = CategoryService(
            self.config,
            self.category_store,
            self.store,
            users,
            slug_generator=slug_generator,
            settings=settings,
        )
        logger.debug(
            f"Assembled document kind '{name}' "
            f"(comments={self.config.comments.enabled}, categories={self.config.category.enabled})"
        )

    @property
    def name(self) -> str:
        return self.config.name


async def create_postgres_document_kind(
    options: RawConfig,
    database: DatabaseManager,
    users: UserDirectory,
    settings: Optional[DocumentSettings] = None,
    ensure_schema: bool = True,
) -> DocumentKind:
    """Build a document kind whose stores are tables in DOCUMENTS_SCHEMA.

    Tables are named ``{name}``, ``{name}_comments`` and ``{name}_categories``.
    """
    settings = settings or get_settings()
    config = normalize(options)
    schema = settings.documents_schema

    store = AsyncPGRecordStore(database, config.name, schema, unique_fields=config.unique_fields)
    comment_store = AsyncPGRecordStore(database, f"{config.name}_comments", schema)
    category_store = AsyncPGRecordStore(
        database, f"{config.name}_categories", schema, unique_fields=("slug",)
    )

    if ensure_schema:
        await store.ensure_schema(config.indexes)
        if config.comments.enabled:
            await comment_store.ensure_schema()
        if config.category.enabled:
            await category_store.ensure_schema()

    return DocumentKind(
        config,
        users=users,
        store=store,
        comment_store=comment_store,
        category_store=category_store,
        settings=settings,
    )
