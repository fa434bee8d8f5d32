"""Todo 业务逻辑层

负责输入校验，并将仓库操作的结果包装为 Result。
"""

import re
from typing import Any

from todosaas.core.result import (
    INVALID_ID_MESSAGE,
    NOT_FOUND_MESSAGE,
    TEXT_REQUIRED_MESSAGE,
    ErrorKind,
    Result,
)
from todosaas.repositories.interfaces import ITodoRepository
from todosaas.schemas.todo import Todo
from todosaas.util.logging_config import get_logger

logger = get_logger(__name__)

# 首尾裁剪：Unicode 空白以及 BOM（U+FEFF）
_TRIM_PATTERN = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")
_LEADING_INTEGER_PATTERN = re.compile(r"([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def trim_text(value: str) -> str:
    return _TRIM_PATTERN.sub("", value)


def parse_todo_id(raw: Any) -> int | None:
    """将路径中的ID解析为整数，无法解析时返回 None

    按前导整数解析：跳过开头空白，读取可选符号和紧随其后的数字，忽略之后的内容，
    例如 "12abc" -> 12、"1.5" -> 1、"0x10" -> 16；没有任何数字时视为非法。
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        return None
    match = _LEADING_INTEGER_PATTERN.match(_TRIM_PATTERN.sub("", raw))
    if not match:
        return None
    sign, hex_digits, decimal_digits = match.groups()
    if decimal_digits is not None:
        value = int(decimal_digits)
    elif hex_digits:
        value = int(hex_digits, 16)
    else:
        return None
    return -value if sign == "-" else value


def normalize_text(raw: Any) -> str | None:
    """校验并去除首尾空白，非字符串或空白字符串返回 None"""
    if not isinstance(raw, str):
        return None
    text = trim_text(raw)
    return text or None


class TodoService:
    """Todo 业务逻辑层"""

    def __init__(self, repository: ITodoRepository):
        self.repository = repository

    def list_todos(self) -> Result[list[Todo]]:
        """获取 Todo 列表（按创建顺序）"""
        return Result.ok(self.repository.list_todos())

    def create_todo(self, raw_text: Any) -> Result[Todo]:
        """创建 Todo"""
        text = normalize_text(raw_text)
        if text is None:
            logger.debug(f"拒绝创建 todo，text 非法: {raw_text!r}")
            return Result.fail(ErrorKind.VALIDATION, TEXT_REQUIRED_MESSAGE)

        todo = self.repository.insert(text)
        logger.info(f"创建 todo: id={todo.id}")
        return Result.ok(todo)

    def delete_todo(self, raw_id: Any) -> Result[None]:
        """删除 Todo"""
        todo_id = parse_todo_id(raw_id)
        if todo_id is None:
            logger.debug(f"拒绝删除 todo，ID 非法: {raw_id!r}")
            return Result.fail(ErrorKind.VALIDATION, INVALID_ID_MESSAGE)

        if not self.repository.delete(todo_id):
            logger.debug(f"删除 todo 失败，不存在: id={todo_id}")
            return Result.fail(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

        logger.info(f"删除 todo: id={todo_id}")
        return Result.ok()
