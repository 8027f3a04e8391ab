"""事件记录编解码

编码：一条事件 -> 一行紧凑 JSON（文本中的换行被转义，记录本身不含原始换行）。
解码：返回 Decoded | Skipped 标记结果，由读取边界决定跳过策略，不抛异常。
"""

from dataclasses import dataclass

from pydantic import ValidationError

from ..models.event import TaskEvent


@dataclass(frozen=True)
class Decoded:
    """解析成功的记录"""

    line_no: int
    event: TaskEvent


@dataclass(frozen=True)
class Skipped:
    """无法解析的记录（损坏、截断或非 UTF-8）"""

    line_no: int
    reason: str


DecodeResult = Decoded | Skipped


def encode_event(event: TaskEvent) -> str:
    """将事件编码为单行 JSON（不含结尾换行）"""
    return event.model_dump_json(by_alias=True)


def decode_line(line: str | bytes, line_no: int = 0) -> DecodeResult:
    """解码一行记录

    ts 必须是 ISO 8601 时间（历史日志均为 RFC 3339）；
    无法解析为时间的 ts 与其他字段错误一样按损坏行跳过，原因以 "ts:" 开头。

    Args:
        line: 原始行内容（允许带结尾换行）
        line_no: 行号（1 起），仅用于诊断

    Returns:
        Decoded 或 Skipped
    """
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as e:
            return Skipped(line_no=line_no, reason=f"invalid utf-8: {e.reason}")

    text = line.strip()
    if not text:
        return Skipped(line_no=line_no, reason="blank line")

    try:
        event = TaskEvent.model_validate_json(text)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(part) for part in first.get("loc", ())) or "record"
        return Skipped(line_no=line_no, reason=f"{loc}: {first.get('msg', 'invalid')}")

    return Decoded(line_no=line_no, event=event)
