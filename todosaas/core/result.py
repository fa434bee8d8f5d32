"""业务结果类型

服务层不通过异常表达普通的业务失败，而是返回 Result，
由路由层按 ERROR_STATUS 映射为 HTTP 状态码。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")

TEXT_REQUIRED_MESSAGE = "Text is required and must be a non-empty string"
INVALID_ID_MESSAGE = "Invalid todo ID"
NOT_FOUND_MESSAGE = "Todo not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorKind(str, Enum):
    """错误类别"""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"


ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
}


@dataclass(frozen=True)
class TodoError:
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return ERROR_STATUS[self.kind]

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message}


@dataclass(frozen=True)
class Result(Generic[T]):
    """成功值或带类别的错误，二者必居其一"""

    value: T | None = None
    error: TodoError | None = None

    @classmethod
    def ok(cls, value: T = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=TodoError(kind=kind, message=message))

    @property
    def is_ok(self) -> bool:
        return self.error is None
