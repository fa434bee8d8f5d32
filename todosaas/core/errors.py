"""统一错误响应

所有错误响应都是 {"error": "<信息>"} 格式，不使用 FastAPI 默认的 detail 字段。
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todosaas.core.result import (
    INTERNAL_ERROR_MESSAGE,
    TEXT_REQUIRED_MESSAGE,
    ErrorKind,
    TodoError,
)
from todosaas.util.logging_config import get_logger

logger = get_logger(__name__)

TODOS_PATH = "/api/todos"


def error_response(error: TodoError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # 创建接口的请求体缺失或不是合法 JSON 对象，与 text 非法同等处理
    if request.method == "POST" and request.url.path.rstrip("/") == TODOS_PATH:
        logger.debug(f"创建 todo 请求体非法: {exc.errors()}")
        return error_response(TodoError(ErrorKind.VALIDATION, TEXT_REQUIRED_MESSAGE))

    logger.debug(f"请求参数校验失败: {request.method} {request.url.path}")
    return JSONResponse(status_code=400, content={"error": _validation_message(exc)})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"处理请求失败: {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
