"""Task Domain Model

Task 是事件日志的 projection（读时计算），不单独持久化。
除 first_seen/created_at 外，所有字段取自该任务最新一条事件。
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """Task 当前状态视图"""

    model_config = ConfigDict(frozen=True)

    task_id: str = Field(description="任务标识")
    project: str = Field(description="所属项目（取最新事件）")
    status: str = Field(description="当前状态")
    title: str = Field(description="任务标题")
    description: str = Field(default="", description="任务描述")
    created_at: datetime = Field(description="首条事件时间")
    updated_at: datetime = Field(description="最新事件时间")
    first_seen: int = Field(ge=0, description="首条事件在日志中的序号，用于列表排序")
    event_count: int = Field(default=1, ge=1, description="该任务的事件总数")
