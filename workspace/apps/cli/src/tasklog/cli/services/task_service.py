"""TaskService -- 任务创建/更新/查询业务逻辑

写入路径：
1. 校验字段长度与状态
2. 创建时执行语言校验（被拒绝的请求不会写入日志）
3. 更新前通过 exists/latest 校验任务并继承未指定字段
4. 追加一条事件
"""

from dataclasses import dataclass

import structlog
from tasklog.core.config import CliSettings
from tasklog.core.identity import new_task_id
from tasklog.core.models import Task, TaskEvent, TaskStatus, is_valid_status, now_ts
from tasklog.core.projection import TaskProjector
from tasklog.core.store import EventLog

from ..exceptions import FieldTooLongError, InvalidStatusError, TaskNotFoundError
from ..lang import LangConfig, validate_language

log = structlog.get_logger()


@dataclass(frozen=True)
class TaskDetail:
    """任务详情：最新事件 + 完整流转历史"""

    latest: TaskEvent
    history: list[TaskEvent]


def validate_length(value: str, field: str, limit: int) -> None:
    """按字符数（非字节数）校验长度"""
    actual = len(value)
    if actual > limit:
        raise FieldTooLongError(field, limit, actual)


def validate_status(status: str) -> None:
    if not is_valid_status(status):
        raise InvalidStatusError(status, [s.value for s in TaskStatus])


class TaskService:
    """任务业务服务"""

    def __init__(
        self,
        event_log: EventLog,
        settings: CliSettings,
        lang_config: LangConfig | None = None,
    ) -> None:
        self._event_log = event_log
        self._projector = TaskProjector(event_log)
        self._settings = settings
        self._lang_config = lang_config

    def create_task(
        self,
        project: str,
        title: str,
        description: str | None = None,
        status: str = TaskStatus.TODO,
    ) -> TaskEvent:
        """创建任务

        Returns:
            写入的首条事件（含新生成的 task_id）
        """
        validate_length(title, "title", self._settings.max_title_chars)
        if description is not None:
            validate_length(
                description, "description", self._settings.max_description_chars
            )
        validate_status(status)

        if self._lang_config is not None:
            expected = self._lang_config.get(project)
            if expected:
                validate_language(title, expected, field="title")
                if description is not None:
                    validate_language(description, expected, field="description")

        event = TaskEvent(
            ts=now_ts(),
            task_id=new_task_id(),
            project=project,
            status=str(status),
            title=title,
            description=description or "",
        )
        self._event_log.append(event)

        log.info(
            "task_created",
            task_id=event.task_id,
            project=project,
            status=event.status,
        )
        return event

    def update_task(
        self,
        task_id: str,
        project: str,
        status: str,
        note: str | None = None,
        description: str | None = None,
    ) -> TaskEvent:
        """追加一次状态流转

        标题与描述从最新事件继承（描述可被显式覆盖），note 不继承。

        Raises:
            TaskNotFoundError: task_id 没有任何事件
        """
        prev = self._projector.latest(task_id)
        if prev is None:
            raise TaskNotFoundError(task_id)

        if note is not None:
            validate_length(note, "note", self._settings.max_note_chars)
        if description is not None:
            validate_length(
                description, "description", self._settings.max_description_chars
            )
        validate_status(status)

        event = TaskEvent(
            ts=now_ts(),
            task_id=task_id,
            project=project,
            status=status,
            title=prev.title,
            description=description if description is not None else prev.description,
            note=note or "",
        )
        self._event_log.append(event)

        log.info(
            "task_updated",
            task_id=task_id,
            from_status=prev.status,
            to_status=status,
        )
        return event

    def list_tasks(
        self,
        project: str | None = None,
        status: str | None = None,
    ) -> list[Task]:
        return self._projector.current_tasks(project=project, status=status)

    def get_task(self, task_id: str) -> TaskDetail:
        """查询任务详情

        Raises:
            TaskNotFoundError: task_id 没有任何事件
        """
        history = self._projector.history(task_id)
        if not history:
            raise TaskNotFoundError(task_id)
        return TaskDetail(latest=history[-1], history=history)
