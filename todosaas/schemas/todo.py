"""Todo 相关的 Pydantic 模型"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from todosaas.util.time_utils import to_iso_z


class TodoCreate(BaseModel):
    """创建 Todo 请求模型

    text 的类型与非空校验交给服务层处理，这里只负责接收原始值。
    """

    text: Any = Field(None, description="待办内容")


class Todo(BaseModel):
    """Todo 记录，创建后不可修改"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., description="待办ID，进程内单调递增且不复用")
    text: str = Field(..., min_length=1, description="去除首尾空白后的待办内容")
    created_at: datetime = Field(..., alias="createdAt", description="创建时间")

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        return to_iso_z(value)

    def to_payload(self) -> dict[str, Any]:
        """转换为接口返回格式 {id, text, createdAt}"""
        return self.model_dump(by_alias=True)


class ErrorResponse(BaseModel):
    """错误响应模型"""

    error: str = Field(..., description="可读的错误信息")


class HealthResponse(BaseModel):
    """健康检查响应模型"""

    status: str = Field("OK", description="服务状态")
    timestamp: str = Field(..., description="ISO-8601 时间戳")
    app: str = Field(..., description="应用名称")
    description: str = Field(..., description="应用描述")
