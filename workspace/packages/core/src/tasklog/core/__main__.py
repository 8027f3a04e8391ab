"""CLI 入口模块 -- python -m tasklog.core <command>

支持的命令：
  check-log  扫描事件日志，报告可解析与被跳过的行
"""

import sys

from .config import get_log_path


def main() -> None:
    """CLI 主入口"""
    if len(sys.argv) < 2:
        print("usage: python -m tasklog.core <command>")
        print("commands:")
        print("  check-log  scan the task log and report skipped lines")
        sys.exit(1)

    command = sys.argv[1]

    if command == "check-log":
        check_log()
    else:
        print(f"unknown command: {command}")
        print("available commands: check-log")
        sys.exit(1)


def check_log() -> None:
    """执行日志检查（只读，不修改日志）"""
    from .store import Skipped, create_event_log

    log_path = get_log_path()
    event_log = create_event_log(log_path)

    print(f"log path: {log_path}")
    if not log_path.exists():
        print("log file does not exist yet")
        return

    decoded = 0
    skipped: list[Skipped] = []
    for result in event_log.iter_records():
        if isinstance(result, Skipped):
            skipped.append(result)
        else:
            decoded += 1

    print(f"decoded: {decoded}")
    print(f"skipped: {len(skipped)}")
    for item in skipped:
        print(f"  line {item.line_no}: {item.reason}")


if __name__ == "__main__":
    main()
