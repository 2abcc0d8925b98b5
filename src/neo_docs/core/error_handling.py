"""Error handling for public operations.

Every public service operation is wrapped with ``operation_result`` so
that expected failures and collaborator faults leave the service as an
OperationResult instead of an exception.
"""

import functools
import logging
from typing import Any, Callable

from ..config.messages import GeneralMessage
from .exceptions import (
    DuplicateRecordError,
    OperationError,
    get_error_code,
    get_http_status_code,
)
from .results import OperationResult

logger = logging.getLogger(__name__)


def operation_result(operation_name: str) -> Callable:
    """Decorator translating exceptions raised by an operation into results.

    Args:
        operation_name: Name of the operation for logging

    Usage:
        @operation_result("get one document")
        async def get_one(self, identity, user_id=None):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> OperationResult[Any]:
            try:
                return await func(*args, **kwargs)

            except OperationError as e:
                logger.info(f"{operation_name} rejected: field={e.field} message={e.message}")
                return OperationResult.error(
                    field=e.field,
                    message=e.message,
                    status=get_http_status_code(e),
                    code=get_error_code(e),
                )

            except DuplicateRecordError as e:
                logger.info(f"{operation_name} rejected: duplicate {e.field}")
                return OperationResult.error(
                    field=e.field,
                    message=GeneralMessage.DUPLICATE_VALUE,
                    status=get_http_status_code(e),
                    code=get_error_code(e),
                )

            except Exception as e:
                logger.error(f"Failed to {operation_name}: {e}", exc_info=True)
                return OperationResult.error(
                    field="server",
                    message=GeneralMessage.INTERNAL_ERROR,
                    status=get_http_status_code(e),
                    code=get_error_code(e),
                )

        return wrapper
    return decorator
