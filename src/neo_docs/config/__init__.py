"""Configuration for neo-docs: constants, messages, settings and logging."""

from .constants import (
    Role,
    ROLE_RANKS,
    DEFAULT_WRITE_ROLE,
    DEFAULT_READ_ROLE,
    DEFAULT_COMMENT_MANAGE_ROLE,
    DocumentState,
    CommentState,
    ResultType,
    StatusCode,
    ErrorCode,
)
from .messages import DocumentMessage, CommentMessage, CategoryMessage, GeneralMessage
from .settings import DocumentSettings, get_settings
from .logging_config import LoggingConfig, setup_logging

__all__ = [
    "Role",
    "ROLE_RANKS",
    "DEFAULT_WRITE_ROLE",
    "DEFAULT_READ_ROLE",
    "DEFAULT_COMMENT_MANAGE_ROLE",
    "DocumentState",
    "CommentState",
    "ResultType",
    "StatusCode",
    "ErrorCode",
    "DocumentMessage",
    "CommentMessage",
    "CategoryMessage",
    "GeneralMessage",
    "DocumentSettings",
    "get_settings",
    "LoggingConfig",
    "setup_logging",
]
