"""CLI 日志配置

stdout 只承载命令结果（TASK_ADD_<id> 等，供 agent 解析），
所有 structlog 输出都经标准库 logging 写到 stderr。
默认级别 WARNING：正常命令不产生日志。
"""

import logging
import os
import sys
from typing import TextIO

import structlog

LOG_FORMAT_ENV = "TASKLOG_LOG_FORMAT"
LOG_LEVEL_ENV = "TASKLOG_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def resolve_log_level(name: str | None) -> int:
    """日志级别名 -> logging 常量，未知名称回退到 WARNING"""
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def _build_renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    # 终端和管道都可能读 stderr，不输出颜色控制符
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(stream: TextIO | None = None) -> None:
    """初始化 structlog -> logging 管道

    Args:
        stream: 日志输出流，默认为调用时的 sys.stderr

    环境变量：
    - TASKLOG_LOG_FORMAT: "dev"（默认）或 "json"
    - TASKLOG_LOG_LEVEL: DEBUG / INFO / WARNING（默认）/ ERROR
    """
    log_format = os.environ.get(LOG_FORMAT_ENV, "dev").strip().lower()
    log_level = resolve_log_level(os.environ.get(LOG_LEVEL_ENV))

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # 每次调用 main 都会重新配置（测试中多次调用），不缓存 logger
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_build_renderer(log_format),
            foreign_pre_chain=pre_chain,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)
