"""枚举定义 -- 任务生命周期状态

事件日志本身接受任意状态字符串；CLI 写入路径只允许 TaskStatus 中的取值。
"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """任务生命周期状态"""

    INBOX = "inbox"
    TODO = "todo"
    DOING = "doing"
    BLOCKED = "blocked"
    INREVIEW = "inreview"
    DONE = "done"


# 新建任务的默认状态
DEFAULT_STATUS: TaskStatus = TaskStatus.TODO


def is_valid_status(value: str) -> bool:
    """判断状态字符串是否属于 TaskStatus（大小写敏感）"""
    return value in {status.value for status in TaskStatus}
