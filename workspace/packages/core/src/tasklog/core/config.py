"""配置模块 -- 可通过环境变量覆盖

包含事件日志路径、语言配置路径，以及 CLI 字段长度限制等可配置项。
"""

import os
from pathlib import Path

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

# 默认事件日志位置（相对 HOME）
DEFAULT_LOG_RELPATH = Path(".local") / "share" / "tasks" / "tasks.log"

# 语言配置文件名（与事件日志同目录）
LANG_CONFIG_FILENAME = "lang.json"


def _get_home_dir() -> Path:
    """获取用户 HOME 目录"""
    home = os.environ.get("HOME")
    if home:
        return Path(home)
    return Path.home()


def get_log_path() -> Path:
    """获取事件日志文件路径

    TASK_LOG_PATH 优先，否则使用 ~/.local/share/tasks/tasks.log
    """
    custom = os.environ.get("TASK_LOG_PATH")
    if custom:
        return Path(custom)
    return _get_home_dir() / DEFAULT_LOG_RELPATH


def get_lang_config_path(log_path: Path | None = None) -> Path:
    """获取语言配置文件路径（位于事件日志同目录）"""
    base = log_path if log_path is not None else get_log_path()
    return base.parent / LANG_CONFIG_FILENAME


class CliSettings(BaseModel):
    """CLI 输入限制 -- 从环境变量加载

    环境变量:
        TASKLOG_MAX_TITLE_CHARS: 标题最大字符数（默认 80）
        TASKLOG_MAX_DESCRIPTION_CHARS: 描述最大字符数（默认 500）
        TASKLOG_MAX_NOTE_CHARS: 备注最大字符数（默认 200）
    """

    max_title_chars: int = Field(default=80, ge=1, description="标题最大字符数")
    max_description_chars: int = Field(
        default=500,
        ge=1,
        description="描述最大字符数",
    )
    max_note_chars: int = Field(default=200, ge=1, description="备注最大字符数")


_SETTINGS_ENV: dict[str, str] = {
    "max_title_chars": "TASKLOG_MAX_TITLE_CHARS",
    "max_description_chars": "TASKLOG_MAX_DESCRIPTION_CHARS",
    "max_note_chars": "TASKLOG_MAX_NOTE_CHARS",
}


def load_cli_settings() -> CliSettings:
    """从环境变量加载 CLI 限制

    非法整数值记录警告并回退到默认值，不阻塞命令执行。
    """
    kwargs: dict = {}
    defaults = CliSettings()

    for field_name, env_var in _SETTINGS_ENV.items():
        val = os.environ.get(env_var)
        if not val:
            continue
        try:
            parsed = int(val)
        except ValueError:
            parsed = 0
        if parsed < 1:
            log.warning(
                "invalid_limit_config",
                env_var=env_var,
                value=val,
                fallback=getattr(defaults, field_name),
            )
            continue
        kwargs[field_name] = parsed

    return CliSettings(**kwargs)
