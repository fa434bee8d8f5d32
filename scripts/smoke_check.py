#!/usr/bin/env python3
"""部署后冒烟检查

依次调用健康检查、创建、列表、删除接口，任一步失败即以非零状态退出。

用法:
    python scripts/smoke_check.py                      # http://localhost:<server.port>
    python scripts/smoke_check.py http://my-alb.example.com
"""

import sys
from pathlib import Path

import httpx

# 添加项目根目录到路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from todosaas.util.logging_config import get_logger, setup_logging
from todosaas.util.settings import settings

setup_logging(settings.get("logging", {}))
logger = get_logger("smoke_check")


class SmokeCheckError(RuntimeError):
    """冒烟检查失败"""


def _expect(response: httpx.Response, status_code: int, step: str) -> None:
    if response.status_code != status_code:
        raise SmokeCheckError(
            f"{step}: 期望状态码 {status_code}，实际 {response.status_code}，响应: {response.text}"
        )


def run_smoke_check(client: httpx.Client) -> None:
    """对一个运行中的服务执行完整的增删查流程"""
    response = client.get("/api/health")
    _expect(response, 200, "健康检查")
    health = response.json()
    if health.get("status") != "OK":
        raise SmokeCheckError(f"健康检查状态异常: {health}")
    logger.info(f"健康检查通过: {health.get('app')} @ {health.get('timestamp')}")

    response = client.post("/api/todos", json={"text": "  smoke check  "})
    _expect(response, 201, "创建 todo")
    created = response.json()
    if created.get("text") != "smoke check":
        raise SmokeCheckError(f"创建的 todo 内容未去除空白: {created}")
    logger.info(f"创建 todo 成功: id={created['id']}")

    response = client.get("/api/todos")
    _expect(response, 200, "获取 todo 列表")
    if created["id"] not in [item["id"] for item in response.json()]:
        raise SmokeCheckError(f"列表中未找到新建的 todo: id={created['id']}")

    response = client.delete(f"/api/todos/{created['id']}")
    _expect(response, 204, "删除 todo")

    response = client.delete(f"/api/todos/{created['id']}")
    _expect(response, 404, "重复删除 todo")

    response = client.post("/api/todos", json={"text": "   "})
    _expect(response, 400, "空白内容校验")

    logger.info("冒烟检查全部通过")


def main(argv: list[str]) -> int:
    if len(argv) > 1:
        base_url = argv[1].rstrip("/")
    else:
        base_url = f"http://localhost:{settings.get('server.port', 4000)}"

    logger.info(f"开始冒烟检查: {base_url}")
    try:
        with httpx.Client(base_url=base_url, timeout=10.0) as client:
            run_smoke_check(client)
    except (SmokeCheckError, httpx.HTTPError) as e:
        logger.error(f"冒烟检查失败: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
