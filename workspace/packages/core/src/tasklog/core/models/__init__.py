"""tasklog Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import DEFAULT_STATUS, TaskStatus, is_valid_status
from .event import TaskEvent, now_ts
from .task import Task

__all__ = [
    # 枚举
    "TaskStatus",
    "DEFAULT_STATUS",
    "is_valid_status",
    # Event
    "TaskEvent",
    "now_ts",
    # Task
    "Task",
]
