"""Translation of asyncpg failures into neo-docs storage exceptions."""

import functools
import logging
from typing import Callable

import asyncpg

from ....core.exceptions import DuplicateRecordError, NeoDocsError, StorageError

logger = logging.getLogger(__name__)


def handle_storage_errors(operation_name: str) -> Callable:
    """Decorator for record store methods.

    Unique violations become DuplicateRecordError; any other database or
    connection failure becomes StorageError.
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            try:
                return await func(self, *args, **kwargs)
            except NeoDocsError:
                raise
            except asyncpg.UniqueViolationError as e:
                field = _field_from_constraint(getattr(e, "constraint_name", None), self.table)
                raise DuplicateRecordError(field, None) from e
            except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
                logger.error(f"Failed to {operation_name} in '{self.table}': {e}")
                raise StorageError(
                    f"Failed to {operation_name}: {e}",
                    details={"table": self.table},
                ) from e
        return wrapper
    return decorator


def _field_from_constraint(constraint_name, table: str) -> str:
    # Unique indexes are named {table}_{field}_uniq
    if constraint_name and constraint_name.startswith(f"{table}_") and constraint_name.endswith("_uniq"):
        return constraint_name[len(table) + 1:-len("_uniq")]
    return constraint_name or "record"
