"""Tagged result returned by every public operation."""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

from ..config.constants import ErrorCode, ResultType, StatusCode
from ..features.pagination.entities.page_data import PageData

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Success or field-qualified error, never both.

    Success results carry ``data``, ``message`` and, for listings,
    ``page_data``. Error results carry ``field``, ``message`` and ``code``.
    """

    type: ResultType
    status: int
    data: Optional[T] = None
    message: Optional[str] = None
    page_data: Optional[PageData] = None
    field: Optional[str] = None
    code: Optional[ErrorCode] = None

    @classmethod
    def success(
        cls,
        data: Optional[T] = None,
        message: Optional[str] = None,
        status: int = StatusCode.SUCCESS,
        page_data: Optional[PageData] = None,
    ) -> "OperationResult[T]":
        return cls(
            type=ResultType.SUCCESS,
            status=int(status),
            data=data,
            message=_text(message),
            page_data=page_data,
        )

    @classmethod
    def error(
        cls,
        field: str,
        message: str,
        status: int,
        code: ErrorCode,
    ) -> "OperationResult[T]":
        return cls(
            type=ResultType.ERROR,
            status=int(status),
            message=_text(message),
            field=field,
            code=code,
        )

    @property
    def ok(self) -> bool:
        return self.type == ResultType.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape of the result."""
        if not self.ok:
            return {
                "type": self.type.value,
                "status": self.status,
                "field": self.field,
                "message": self.message,
                "code": self.code.value if self.code else None,
            }

        payload: Dict[str, Any] = {"type": self.type.value, "status": self.status}
        if self.data is not None:
            payload["data"] = self.data
        if self.message is not None:
            payload["message"] = self.message
        if self.page_data is not None:
            payload["page_data"] = self.page_data.to_dict()
        return payload


def _text(message: Any) -> Optional[str]:
    if message is None:
        return None
    # str Enum members render as their value
    return getattr(message, "value", message)
