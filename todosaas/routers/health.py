"""健康检查路由"""

from dynaconf import Dynaconf
from fastapi import APIRouter, Depends

from todosaas.core.dependencies import get_settings
from todosaas.schemas.todo import HealthResponse
from todosaas.util.settings import get_app_info
from todosaas.util.time_utils import utc_now_iso

router = APIRouter(tags=["health"])


@router.get("/api/health", response_model=HealthResponse)
async def health_check(settings: Dynaconf = Depends(get_settings)):
    """健康检查，负载均衡器的探活路径"""
    app_name, app_description = get_app_info(settings)
    return HealthResponse(
        status="OK",
        timestamp=utc_now_iso(),
        app=app_name,
        description=app_description,
    )
