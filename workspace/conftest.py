"""全局 pytest 配置 -- 环境隔离 + 临时事件日志路径 fixture"""

from pathlib import Path

import pytest

_ISOLATED_ENV = [
    "TASK_LOG_PATH",
    "TASKLOG_MAX_TITLE_CHARS",
    "TASKLOG_MAX_DESCRIPTION_CHARS",
    "TASKLOG_MAX_NOTE_CHARS",
    "TASKLOG_LOG_FORMAT",
    "TASKLOG_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """清除相关环境变量，HOME 指向临时目录，避免读写真实日志"""
    for key in _ISOLATED_ENV:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def tmp_log_path(tmp_path: Path) -> Path:
    """提供临时事件日志路径（文件尚未创建）"""
    return tmp_path / "data" / "tasks.log"
