"""Domain Model 单元测试

测试内容：
1. TaskEvent 字段默认值、别名与不可变性
2. TaskStatus 取值
3. Task 字段约束
"""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError
from tasklog.core.models import (
    DEFAULT_STATUS,
    Task,
    TaskEvent,
    TaskStatus,
    is_valid_status,
    now_ts,
)


class TestTaskStatus:
    """TaskStatus 枚举测试"""

    def test_values(self):
        assert [s.value for s in TaskStatus] == [
            "inbox",
            "todo",
            "doing",
            "blocked",
            "inreview",
            "done",
        ]

    def test_default_is_todo(self):
        assert DEFAULT_STATUS == "todo"

    def test_is_valid_status_case_sensitive(self):
        """状态校验大小写敏感"""
        assert is_valid_status("doing")
        assert not is_valid_status("DOING")
        assert not is_valid_status("invalid")


class TestTaskEvent:
    """TaskEvent 模型测试"""

    def test_defaults(self):
        """description 和 note 默认为空"""
        event = TaskEvent(
            ts=datetime(2026, 1, 1, tzinfo=UTC),
            task_id="aabbccdd",
            project="owner/repo",
            status="todo",
            title="T",
        )
        assert event.description == ""
        assert event.note == ""

    def test_accepts_on_disk_key(self):
        """磁盘键名 id 映射到 task_id"""
        event = TaskEvent.model_validate(
            {
                "ts": "2026-02-22T14:30:00+09:00",
                "id": "deadbeef",
                "project": "owner/repo",
                "status": "blocked",
                "title": "Something broke",
            }
        )
        assert event.task_id == "deadbeef"

    def test_dump_uses_on_disk_key(self):
        event = TaskEvent(
            ts=datetime(2026, 1, 1, tzinfo=UTC),
            task_id="aabbccdd",
            project="p",
            status="todo",
            title="T",
        )
        data = event.model_dump(by_alias=True)
        assert data["id"] == "aabbccdd"
        assert "task_id" not in data

    def test_frozen(self):
        """事件写入后不可修改"""
        event = TaskEvent(
            ts=datetime(2026, 1, 1, tzinfo=UTC),
            task_id="aabbccdd",
            project="p",
            status="todo",
            title="T",
        )
        with pytest.raises(ValidationError):
            event.status = "done"

    def test_empty_task_id_rejected(self):
        with pytest.raises(ValidationError):
            TaskEvent(
                ts=datetime(2026, 1, 1, tzinfo=UTC),
                task_id="",
                project="p",
                status="todo",
                title="T",
            )

    def test_missing_required_fields_rejected(self):
        with pytest.raises(ValidationError):
            TaskEvent.model_validate({})

    def test_unknown_fields_ignored(self):
        """未知字段被忽略（向前兼容）"""
        event = TaskEvent.model_validate(
            {
                "ts": "2026-02-22T14:30:00+09:00",
                "id": "a1",
                "project": "p",
                "status": "todo",
                "title": "T",
                "priority": "high",
            }
        )
        assert not hasattr(event, "priority")


class TestNowTs:
    def test_has_timezone_and_no_microseconds(self):
        ts = now_ts()
        assert ts.tzinfo is not None
        assert ts.microsecond == 0
        assert "T" in ts.isoformat()


class TestTask:
    """Task projection 模型测试"""

    def test_first_seen_non_negative(self):
        now = datetime.now(UTC)
        with pytest.raises(ValidationError):
            Task(
                task_id="a",
                project="p",
                status="todo",
                title="T",
                created_at=now,
                updated_at=now,
                first_seen=-1,
            )

    def test_event_count_defaults_to_one(self):
        now = datetime.now(UTC)
        task = Task(
            task_id="a",
            project="p",
            status="todo",
            title="T",
            created_at=now,
            updated_at=now,
            first_seen=0,
        )
        assert task.event_count == 1
        assert task.description == ""
