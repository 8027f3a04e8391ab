"""Projection 模块 -- 从事件日志计算任务当前状态

每次查询都完整读取日志并在内存中折叠：
- 同一 task_id 取最后追加的事件（last-writer-wins）
- 列表顺序按每个任务首条事件的位置，而非最新事件
- note 是单条事件的备注，不进入 Task
"""

import time

import structlog

from .models.event import TaskEvent
from .models.task import Task
from .store.protocols import EventLog

log = structlog.get_logger()


def apply_event(tasks: dict[str, Task], index: int, event: TaskEvent) -> None:
    """将单个事件应用到 Task 状态（内存中操作）

    Args:
        tasks: task_id -> Task 的映射表（会被就地修改）
        index: 事件在日志中的追加序号
        event: 要应用的事件
    """
    current = tasks.get(event.task_id)
    if current is None:
        tasks[event.task_id] = Task(
            task_id=event.task_id,
            project=event.project,
            status=event.status,
            title=event.title,
            description=event.description,
            created_at=event.ts,
            updated_at=event.ts,
            first_seen=index,
        )
        return

    # 后写入者覆盖；首次出现位置与创建时间保持不变
    tasks[event.task_id] = current.model_copy(
        update={
            "project": event.project,
            "status": event.status,
            "title": event.title,
            "description": event.description,
            "updated_at": event.ts,
            "event_count": current.event_count + 1,
        }
    )


def project_tasks(
    events: list[TaskEvent],
    project: str | None = None,
    status: str | None = None,
) -> list[Task]:
    """把事件序列折叠为当前任务列表

    Args:
        events: 按追加顺序排列的事件
        project: 项目过滤（精确匹配，None 表示不过滤）
        status: 状态过滤（精确匹配，None 表示不过滤）

    Returns:
        按首次出现顺序排列的 Task 列表
    """
    tasks: dict[str, Task] = {}
    for index, event in enumerate(events):
        apply_event(tasks, index, event)

    ordered = sorted(tasks.values(), key=lambda task: task.first_seen)
    return [
        task
        for task in ordered
        if (project is None or task.project == project)
        and (status is None or task.status == status)
    ]


class TaskProjector:
    """基于事件日志的只读查询"""

    def __init__(self, event_log: EventLog) -> None:
        self._event_log = event_log

    def current_tasks(
        self,
        project: str | None = None,
        status: str | None = None,
    ) -> list[Task]:
        """读取全部事件并计算当前任务列表"""
        start_time = time.monotonic()
        events = self._event_log.read_all()
        tasks = project_tasks(events, project=project, status=status)

        log.debug(
            "projection_built",
            event_count=len(events),
            task_count=len(tasks),
            project=project,
            status=status,
            elapsed_ms=int((time.monotonic() - start_time) * 1000),
        )
        return tasks

    def latest(self, task_id: str) -> TaskEvent | None:
        """返回指定任务最新一条事件，不存在时返回 None"""
        found: TaskEvent | None = None
        for event in self._event_log.read_all():
            if event.task_id == task_id:
                found = event
        return found

    def history(self, task_id: str) -> list[TaskEvent]:
        """返回指定任务的全部事件（追加顺序），不存在时为空列表"""
        return [
            event for event in self._event_log.read_all() if event.task_id == task_id
        ]

    def exists(self, task_id: str) -> bool:
        """任务是否至少有一条事件"""
        return any(event.task_id == task_id for event in self._event_log.read_all())
