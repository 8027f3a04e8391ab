"""EventLog JSONL 实现

事件日志 append-only：只追加，不修改、不删除、不压缩。
每次读取都从头完整扫描文件，不做跨调用缓存。
"""

import os
from collections.abc import Iterator
from pathlib import Path

import structlog
from pydantic_core import PydanticSerializationError

from ..exceptions import EventEncodeError, EventLogReadError, EventLogWriteError
from ..models.event import TaskEvent
from .codec import DecodeResult, Skipped, decode_line, encode_event

log = structlog.get_logger()


class JsonlEventLog:
    """EventLog 的 JSONL 文件实现"""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, event: TaskEvent) -> None:
        """追加一条事件（append-only）

        整行一次写入。若文件末尾不是换行（上次写入中断或另一进程写到一半），
        先补一个换行，保证新记录独占一行。

        Raises:
            EventEncodeError: 事件文本无法编码为 UTF-8（此时不写入任何内容）
            EventLogWriteError: 目录或文件无法创建、打开或写入
        """
        try:
            record = (encode_event(event) + "\n").encode("utf-8")
        except (PydanticSerializationError, UnicodeEncodeError) as e:
            raise EventEncodeError(event.task_id, e) from e

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a+b") as fh:
                if fh.seek(0, os.SEEK_END) > 0:
                    fh.seek(-1, os.SEEK_END)
                    if fh.read(1) != b"\n":
                        record = b"\n" + record
                fh.write(record)
        except OSError as e:
            raise EventLogWriteError(self._path, e) from e

        log.debug(
            "event_appended",
            task_id=event.task_id,
            status=event.status,
            path=str(self._path),
        )

    def iter_records(self) -> Iterator[DecodeResult]:
        """逐行解码，返回 Decoded | Skipped（空行不产出结果）

        Raises:
            EventLogReadError: 文件存在但无法读取
        """
        if not self._path.exists():
            return
        try:
            with self._path.open("rb") as fh:
                for line_no, raw in enumerate(fh, start=1):
                    if not raw.strip():
                        continue
                    yield decode_line(raw, line_no)
        except OSError as e:
            raise EventLogReadError(self._path, e) from e

    def read_all(self) -> list[TaskEvent]:
        """按追加顺序返回所有可解析的事件，损坏行直接跳过"""
        events: list[TaskEvent] = []
        for result in self.iter_records():
            if isinstance(result, Skipped):
                log.debug(
                    "event_log_line_skipped",
                    line_no=result.line_no,
                    reason=result.reason,
                    path=str(self._path),
                )
                continue
            events.append(result.event)
        return events
