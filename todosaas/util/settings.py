"""配置加载模块

使用 dynaconf 读取 config/default_config.yaml，并叠加环境变量：
- TODOSAAS_ 前缀的变量（嵌套用双下划线，如 TODOSAAS_SERVER__PORT）
- 部署环境注入的 PORT / APP_NAME / APP_DESCRIPTION
"""

import os
from pathlib import Path

from dynaconf import Dynaconf

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
DEFAULT_CONFIG_FILE = CONFIG_DIR / "default_config.yaml"

DEFAULT_APP_NAME = "Todo SaaS"
DEFAULT_APP_DESCRIPTION = "Simple, clean, and efficient task management"

# 容器平台直接注入的无前缀变量 -> 配置路径
DEPLOYMENT_ENV_KEYS = {
    "PORT": "server.port",
    "APP_NAME": "app.name",
    "APP_DESCRIPTION": "app.description",
}


def _apply_deployment_env(target: Dynaconf, environ: dict[str, str]) -> None:
    for env_key, dotted_key in DEPLOYMENT_ENV_KEYS.items():
        value = environ.get(env_key)
        if value is None or value.strip() == "":
            continue
        if dotted_key == "server.port":
            target.set(dotted_key, int(value))
        else:
            target.set(dotted_key, value)


def load_settings(environ: dict[str, str] | None = None, **overrides) -> Dynaconf:
    """构建一份独立的配置对象

    Args:
        environ: 用于读取部署变量的环境字典，默认 os.environ
        **overrides: 直接覆盖的配置项（测试时使用）
    """
    loaded = Dynaconf(
        envvar_prefix="TODOSAAS",
        settings_files=[str(DEFAULT_CONFIG_FILE)],
        merge_enabled=True,
    )
    _apply_deployment_env(loaded, os.environ if environ is None else environ)
    for key, value in overrides.items():
        loaded.set(key, value)
    return loaded


def get_app_info(source: Dynaconf | None = None) -> tuple[str, str]:
    """返回 (应用名称, 应用描述)，缺失或空白时回退到默认值"""
    if source is None:
        source = settings
    name = str(source.get("app.name", "") or "").strip() or DEFAULT_APP_NAME
    description = (
        str(source.get("app.description", "") or "").strip() or DEFAULT_APP_DESCRIPTION
    )
    return name, description


settings = load_settings()
