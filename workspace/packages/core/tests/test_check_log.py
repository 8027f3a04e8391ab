"""python -m tasklog.core check-log 测试"""

import sys

import pytest
from tasklog.core.__main__ import main
from tasklog.core.store import JsonlEventLog


@pytest.fixture
def configured_log(monkeypatch, tmp_log_path) -> JsonlEventLog:
    monkeypatch.setenv("TASK_LOG_PATH", str(tmp_log_path))
    return JsonlEventLog(tmp_log_path)


class TestCheckLog:
    def test_missing_file(self, monkeypatch, capsys, configured_log):
        monkeypatch.setattr(sys, "argv", ["tasklog.core", "check-log"])
        main()
        out = capsys.readouterr().out
        assert "does not exist" in out

    def test_reports_skipped_lines(self, monkeypatch, capsys, configured_log, make_event):
        configured_log.append(make_event("t1"))
        with configured_log.path.open("a", encoding="utf-8") as fh:
            fh.write("broken\n")
        configured_log.append(make_event("t2"))

        monkeypatch.setattr(sys, "argv", ["tasklog.core", "check-log"])
        main()
        out = capsys.readouterr().out
        assert "decoded: 2" in out
        assert "skipped: 1" in out
        assert "line 2:" in out

    def test_check_does_not_modify_log(self, monkeypatch, capsys, configured_log, make_event):
        configured_log.append(make_event("t1"))
        before = configured_log.path.read_bytes()
        monkeypatch.setattr(sys, "argv", ["tasklog.core", "check-log"])
        main()
        assert configured_log.path.read_bytes() == before

    def test_unknown_command_exits(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["tasklog.core", "rebuild"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_no_command_exits(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["tasklog.core"])
        with pytest.raises(SystemExit):
            main()
