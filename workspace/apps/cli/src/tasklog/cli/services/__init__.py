"""CLI 业务服务"""

from .task_service import TaskDetail, TaskService

__all__ = ["TaskService", "TaskDetail"]
