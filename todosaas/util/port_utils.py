"""端口工具

容器平台按固定端口转发流量，默认直接使用配置端口；
本地同时运行多个实例时可打开 server.auto_port，从配置端口开始向后寻找空闲端口。
"""

import socket

from dynaconf import Dynaconf

from todosaas.util.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SCAN_ATTEMPTS = 20


def is_port_free(host: str, port: int) -> bool:
    """尝试绑定 (host, port)，能绑定即视为空闲"""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as candidate_socket:
            candidate_socket.bind((host, port))
    except OSError:
        return False
    return True


def find_available_port(
    host: str, start_port: int, max_attempts: int = DEFAULT_SCAN_ATTEMPTS
) -> int:
    """从 start_port 开始依次检查 max_attempts 个端口，返回第一个空闲端口

    Raises:
        RuntimeError: 检查范围内没有空闲端口
    """
    last_port = min(start_port + max_attempts, 65536)
    for port in range(start_port, last_port):
        if is_port_free(host, port):
            if port != start_port:
                logger.info(f"端口 {start_port} 已被占用，改用端口 {port}")
            return port

    raise RuntimeError(f"端口 {start_port}-{last_port - 1} 均已被占用")


def resolve_server_port(source: Dynaconf) -> int:
    """根据配置确定监听端口

    server.auto_port 关闭时原样返回 server.port，不做占用检查。
    """
    port = int(source.get("server.port", 4000))
    if not source.get("server.auto_port", False):
        return port

    host = source.get("server.host", "0.0.0.0")
    attempts = int(source.get("server.port_scan_attempts", DEFAULT_SCAN_ATTEMPTS))
    return find_available_port(host, port, max_attempts=attempts)
