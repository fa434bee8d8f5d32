"""日志配置模块

所有模块统一通过 get_logger() 获取 logger，入口处调用一次 setup_logging()。
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

ROOT_LOGGER_NAME = "todosaas"
LOG_FILE_NAME = "todosaas.log"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"

_configured = False


def setup_logging(config: dict[str, Any] | None = None) -> logging.Logger:
    """根据配置初始化日志

    Args:
        config: logging 配置段，支持 level / log_path / format

    Returns:
        项目根 logger
    """
    global _configured

    config = dict(config or {})
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = str(config.get("level") or "INFO").upper()
    root.setLevel(level)

    if _configured:
        return root

    formatter = logging.Formatter(config.get("format") or DEFAULT_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    log_path = config.get("log_path")
    if log_path:
        log_dir = Path(log_path)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    root.propagate = False
    _configured = True
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """获取项目 logger，未指定名称时返回根 logger"""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
