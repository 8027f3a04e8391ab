"""Core 异常体系

只覆盖 I/O 失败与写入前的编码失败；任务不存在通过返回 None / 空列表表达，
损坏的日志行在读取边界被跳过，不会抛出。
"""

from pathlib import Path


class TaskLogError(Exception):
    """tasklog 基础异常"""


class EventLogWriteError(TaskLogError):
    """事件日志无法创建、打开或写入

    当次调用视为失败，不重试也不缓存待写事件。
    """

    def __init__(self, path: Path, original_error: Exception) -> None:
        """
        Args:
            path: 事件日志路径
            original_error: 原始异常
        """
        super().__init__(f"failed to write task log {path}: {original_error}")
        self.path = path
        self.original_error = original_error


class EventLogReadError(TaskLogError):
    """事件日志存在但无法读取"""

    def __init__(self, path: Path, original_error: Exception) -> None:
        super().__init__(f"failed to read task log {path}: {original_error}")
        self.path = path
        self.original_error = original_error


class EventEncodeError(TaskLogError):
    """事件无法编码为 UTF-8 JSON 行（如参数中的非 UTF-8 字节以代理字符传入）

    编码在写入前完成，失败时日志文件不会被修改。
    """

    def __init__(self, task_id: str, original_error: Exception) -> None:
        super().__init__(f"cannot encode event for task '{task_id}': {original_error}")
        self.task_id = task_id
        self.original_error = original_error
