"""时间工具"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso_z(value: datetime) -> str:
    """格式化为毫秒精度、以 Z 结尾的 ISO-8601 字符串（如 2024-05-01T08:30:00.123Z）"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def utc_now_iso() -> str:
    return to_iso_z(utc_now())
