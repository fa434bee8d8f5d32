"""Todo 相关路由"""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from todosaas.core.dependencies import get_todo_service
from todosaas.core.errors import error_response
from todosaas.schemas.todo import ErrorResponse, Todo, TodoCreate
from todosaas.services.todo_service import TodoService

router = APIRouter(prefix="/api/todos", tags=["todos"])


@router.get("", response_model=list[Todo])
def list_todos(service: TodoService = Depends(get_todo_service)):
    """获取全部 todo（按创建顺序）"""
    result = service.list_todos()
    return result.value


@router.post(
    "",
    status_code=201,
    response_model=Todo,
    responses={400: {"model": ErrorResponse}},
)
def create_todo(data: TodoCreate, service: TodoService = Depends(get_todo_service)):
    """创建 todo

    text 会去除首尾空白，空白或非字符串返回 400。
    """
    result = service.create_todo(data.text)
    if not result.is_ok:
        return error_response(result.error)
    return JSONResponse(status_code=201, content=result.value.to_payload())


@router.delete(
    "/{todo_id}",
    status_code=204,
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def delete_todo(todo_id: str, service: TodoService = Depends(get_todo_service)):
    """删除 todo，ID 必须是整数"""
    result = service.delete_todo(todo_id)
    if not result.is_ok:
        return error_response(result.error)
    return Response(status_code=204)
