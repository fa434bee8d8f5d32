from contextlib import asynccontextmanager

import uvicorn
from dynaconf import Dynaconf
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todosaas.core.errors import register_error_handlers
from todosaas.repositories.interfaces import ITodoRepository
from todosaas.repositories.memory_todo_repository import InMemoryTodoRepository
from todosaas.routers import health, todo
from todosaas.util.logging_config import get_logger, setup_logging
from todosaas.util.port_utils import resolve_server_port
from todosaas.util.settings import get_app_info
from todosaas.util.settings import settings as default_settings

logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    port = app.state.settings.get("server.port")
    logger.info(f"Server is running on port {port}")

    yield

    # 内存数据随进程结束丢弃
    logger.info(f"服务关闭，丢弃 {app.state.todo_repository.count()} 条内存 todo")


def create_app(
    settings: Dynaconf | None = None,
    repository: ITodoRepository | None = None,
) -> FastAPI:
    """构建应用实例

    Args:
        settings: 配置对象，默认使用全局配置
        repository: Todo 仓库，默认新建一个空的内存仓库
    """
    settings = default_settings if settings is None else settings
    setup_logging(settings.get("logging", {}))

    app_name, app_description = get_app_info(settings)
    app = FastAPI(
        title=f"{app_name} API",
        description=app_description,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.todo_repository = InMemoryTodoRepository() if repository is None else repository

    # 允许任意来源跨域访问
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(todo.router)
    return app



if __name__ == "__main__":
    server_host = default_settings.get("server.host", "0.0.0.0")
    server_debug = bool(default_settings.get("server.debug", False))

    try:
        actual_port = resolve_server_port(default_settings)
    except RuntimeError as e:
        logger.error(f"端口分配失败: {e}")
        raise
    app.state.settings.set("server.port", actual_port)

    logger.info(f"启动服务器: http://{server_host}:{actual_port}")
    logger.info(f"调试模式: {'开启' if server_debug else '关闭'}")

    uvicorn.run(
        app,
        host=server_host,
        port=actual_port,
        access_log=server_debug,
        log_level="debug" if server_debug else "info",
    )
