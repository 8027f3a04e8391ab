"""packages/core 测试配置 -- 核心层 fixture"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from tasklog.core.models import TaskEvent
from tasklog.core.store import JsonlEventLog

_BASE_TS = datetime(2026, 2, 22, 14, 30, tzinfo=timezone(timedelta(hours=9)))


@pytest.fixture
def event_log(tmp_log_path: Path) -> JsonlEventLog:
    """核心层临时事件日志"""
    return JsonlEventLog(tmp_log_path)


@pytest.fixture
def make_event() -> Callable[..., TaskEvent]:
    """构造测试事件，时间戳按调用次数递增"""
    counter = {"n": 0}

    def _make(
        task_id: str,
        status: str = "todo",
        title: str = "Task",
        project: str = "test/proj",
        description: str = "",
        note: str = "",
    ) -> TaskEvent:
        ts = _BASE_TS + timedelta(seconds=counter["n"])
        counter["n"] += 1
        return TaskEvent(
            ts=ts,
            task_id=task_id,
            project=project,
            status=status,
            title=title,
            description=description,
            note=note,
        )

    return _make
