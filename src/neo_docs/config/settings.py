"""Environment-driven settings for neo-docs."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentSettings(BaseSettings):
    """Settings shared by every configured document kind."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Database
    database_url: Optional[str] = Field(default=None, alias="DATABASE_URL")
    db_pool_min_size: int = Field(default=2, alias="DB_POOL_MIN_SIZE", ge=1)
    db_pool_max_size: int = Field(default=10, alias="DB_POOL_MAX_SIZE", ge=1)
    db_command_timeout: float = Field(default=60, alias="DB_COMMAND_TIMEOUT", gt=0)
    documents_schema: str = Field(default="public", alias="DOCUMENTS_SCHEMA")
    users_table: str = Field(default="users", alias="USERS_TABLE")

    # Cache
    redis_url: Optional[str] = Field(default=None, alias="REDIS_URL")
    user_cache_ttl: int = Field(default=300, alias="USER_CACHE_TTL", ge=1)
    user_cache_prefix: str = Field(default="neo_docs:user", alias="USER_CACHE_PREFIX")

    # Pagination
    default_page_size: int = Field(default=20, alias="DEFAULT_PAGE_SIZE", ge=1)
    max_page_size: int = Field(default=100, alias="MAX_PAGE_SIZE", ge=1)

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_verbosity: str = Field(default="NORMAL", alias="LOG_VERBOSITY")
    log_format: str = Field(default="simple", alias="LOG_FORMAT")

    @field_validator("database_url")
    @classmethod
    def strip_driver_suffix(cls, v: Optional[str]) -> Optional[str]:
        """asyncpg expects a plain postgresql:// DSN."""
        if v and "+asyncpg" in v:
            return v.replace("+asyncpg", "")
        return v

    @field_validator("documents_schema", "users_table")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        if not v.replace("_", "").isalnum():
            raise ValueError("must contain only alphanumeric characters and underscores")
        return v.lower()

    @property
    def effective_max_page_size(self) -> int:
        return max(self.max_page_size, self.default_page_size)


@lru_cache()
def get_settings() -> DocumentSettings:
    """Get cached settings instance."""
    return DocumentSettings()
