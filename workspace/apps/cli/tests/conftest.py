"""apps/cli 测试配置 -- 临时日志 + 固定项目名"""

from pathlib import Path

import pytest
from tasklog.core.config import CliSettings
from tasklog.core.store import JsonlEventLog
from tasklog.cli.lang import LangConfig
from tasklog.cli.services import TaskService

TEST_PROJECT = "test/proj"


@pytest.fixture
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_log_path: Path) -> Path:
    """CLI 使用临时日志，项目名固定为 test/proj"""
    monkeypatch.setenv("TASK_LOG_PATH", str(tmp_log_path))
    monkeypatch.setattr("tasklog.cli.main.get_project", lambda: TEST_PROJECT)
    return tmp_log_path


@pytest.fixture
def lang_config(tmp_path: Path) -> LangConfig:
    return LangConfig(tmp_path / "lang" / "lang.json")


@pytest.fixture
def service(tmp_log_path: Path, lang_config: LangConfig) -> TaskService:
    return TaskService(JsonlEventLog(tmp_log_path), CliSettings(), lang_config=lang_config)
