"""tasklog Core Store -- JSONL 事件日志持久化

提供工厂函数按配置创建事件日志句柄。
"""

from pathlib import Path

from ..config import get_log_path
from .codec import Decoded, DecodeResult, Skipped, decode_line, encode_event
from .event_log import JsonlEventLog
from .protocols import EventLog


def create_event_log(path: str | Path | None = None) -> JsonlEventLog:
    """创建事件日志句柄

    Args:
        path: 日志文件路径；为 None 时读取配置（TASK_LOG_PATH 或默认路径）

    Returns:
        JsonlEventLog 实例（不会立即创建文件）
    """
    return JsonlEventLog(path if path is not None else get_log_path())


__all__ = [
    "EventLog",
    "JsonlEventLog",
    "create_event_log",
    "Decoded",
    "Skipped",
    "DecodeResult",
    "decode_line",
    "encode_event",
]
