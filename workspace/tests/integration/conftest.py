"""集成测试共享 fixture"""

from pathlib import Path

import pytest

TEST_PROJECT = "owner/repo"


@pytest.fixture
def integration_env(monkeypatch: pytest.MonkeyPatch, tmp_log_path: Path) -> Path:
    """CLI 使用临时日志，项目名固定"""
    monkeypatch.setenv("TASK_LOG_PATH", str(tmp_log_path))
    monkeypatch.setattr("tasklog.cli.main.get_project", lambda: TEST_PROJECT)
    return tmp_log_path
