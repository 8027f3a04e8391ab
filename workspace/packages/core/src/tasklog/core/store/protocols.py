"""Store Protocol 接口定义

使用 Python Protocol 实现结构化子类型（duck typing），
Projector 只依赖此接口，不依赖具体文件实现。
"""

from collections.abc import Iterator
from typing import Protocol

from ..models.event import TaskEvent
from .codec import DecodeResult


class EventLog(Protocol):
    """Event 日志接口

    append-only：只允许追加，不允许更新或删除。
    """

    def append(self, event: TaskEvent) -> None:
        """追加事件（append-only）"""
        ...

    def read_all(self) -> list[TaskEvent]:
        """按追加顺序读取全部可解析事件"""
        ...

    def iter_records(self) -> Iterator[DecodeResult]:
        """逐行返回解码结果（含被跳过的行）"""
        ...
