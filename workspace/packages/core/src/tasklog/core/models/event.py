"""TaskEvent Domain Model

事件日志 append-only，每行一条记录，写入后不再修改或删除。
磁盘上的键名为 ts/id/project/status/title/description/note。
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


def now_ts() -> datetime:
    """当前本地时间（带时区偏移，精确到秒）"""
    return datetime.now().astimezone().replace(microsecond=0)


class TaskEvent(BaseModel):
    """TaskEvent 数据模型

    一条事件描述一次任务创建或状态流转。
    note 仅属于本事件，不会被后续事件继承，也不进入 projection。
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    ts: datetime = Field(description="事件时间戳（ISO 8601 / RFC 3339，带时区偏移）")
    task_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices("id", "task_id"),
        serialization_alias="id",
        description="任务标识，创建时生成，后续事件复用",
    )
    project: str = Field(description="所属项目（scope）")
    status: str = Field(description="生命周期状态")
    title: str = Field(description="任务标题")
    description: str = Field(default="", description="任务描述")
    note: str = Field(default="", description="流转备注（阻塞原因、PR 链接等）")
