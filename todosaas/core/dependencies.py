"""FastAPI 依赖注入模块

Todo 仓库由 create_app() 创建并挂在 app.state 上，生命周期与应用实例一致；
每个测试构建新的应用即可获得独立的数据。
"""

from dynaconf import Dynaconf
from fastapi import Depends, Request

from todosaas.repositories.interfaces import ITodoRepository
from todosaas.services.todo_service import TodoService


def get_settings(request: Request) -> Dynaconf:
    """获取当前应用使用的配置"""
    return request.app.state.settings


# ========== Todo 模块依赖注入 ==========


def get_todo_repository(request: Request) -> ITodoRepository:
    """获取 Todo 仓库实例"""
    return request.app.state.todo_repository


def get_todo_service(
    repo: ITodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """获取 Todo 服务实例"""
    return TodoService(repo)
