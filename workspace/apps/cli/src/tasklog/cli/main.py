"""task CLI 入口

每次调用：解析参数 -> 按配置构建事件日志句柄 -> 执行一次写入或查询 -> 退出。
stdout 输出供 agent 解析（TASK_ADD_<id> / TASK_<STATUS>_<id> 等），错误写 stderr。
"""

import argparse
import sys
from collections.abc import Sequence

import structlog
from tasklog.core.config import get_lang_config_path, get_log_path, load_cli_settings
from tasklog.core.exceptions import TaskLogError
from tasklog.core.models import DEFAULT_STATUS, Task, TaskEvent
from tasklog.core.store import create_event_log

from .exceptions import TaskCliError, UnsupportedLanguageError
from .init_snippet import run_init
from .lang import LangConfig, resolve_lang
from .logging_config import setup_logging
from .project import get_project
from .services import TaskDetail, TaskService

log = structlog.get_logger()

# get 输出中多行备注的续行缩进："  " + ts(28) + " " + status(10) + " "
_NOTE_INDENT = 42


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task",
        description="Lightweight task management for coding agents",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_create = sub.add_parser("create", help="Create a new task")
    p_create.add_argument("title", help="Task title")
    p_create.add_argument("description", nargs="?", help="Task description")
    p_create.add_argument(
        "--status",
        default=str(DEFAULT_STATUS),
        help="Initial status (default: todo)",
    )

    p_update = sub.add_parser("update", help="Update task status")
    p_update.add_argument("id", help="Task ID (8-char hex)")
    p_update.add_argument("status", help="New status")
    p_update.add_argument(
        "note",
        nargs="?",
        help="Transition note (block reason, PR URL, etc.)",
    )
    p_update.add_argument("--description", help="Update description")

    p_list = sub.add_parser("list", help="List tasks")
    p_list.add_argument("status", nargs="?", help="Filter by status")
    p_list.add_argument(
        "--all",
        action="store_true",
        help="Show all projects (default: current project only)",
    )

    p_get = sub.add_parser(
        "get",
        help="Show task detail and state transition history",
    )
    p_get.add_argument("id", help="Task ID (8-char hex)")

    p_lang = sub.add_parser(
        "lang",
        help="Set or show expected language for the current project",
    )
    p_lang.add_argument(
        "code",
        nargs="?",
        help="Language code (e.g., ja, en). Omit to show current setting.",
    )
    p_lang.add_argument("--unset", action="store_true", help="Remove language setting")

    p_init = sub.add_parser(
        "init",
        help="Inject instruction snippet into agent config files",
    )
    p_init.add_argument(
        "--global",
        dest="global_",
        action="store_true",
        help="Inject into global config files instead of project-local",
    )

    return parser


def format_task_row(task: Task) -> str:
    return f"{task.task_id:<10} {task.status:<8} {task.project:<24} {task.title}"


def format_history_entry(event: TaskEvent) -> str:
    ts = event.ts.isoformat()
    if not event.note:
        return f"  {ts:<28} {event.status}"
    continuation = "\n" + " " * _NOTE_INDENT
    note_display = continuation.join(event.note.splitlines())
    return f"  {ts:<28} {event.status:<10} {note_display}"


def format_detail(detail: TaskDetail) -> list[str]:
    latest = detail.latest
    lines = [f"{latest.task_id} | {latest.project} | {latest.title}"]
    if latest.description:
        lines.extend(f"  {line}" for line in latest.description.splitlines())
        lines.append("")
    lines.extend(format_history_entry(event) for event in detail.history)
    return lines


def _cmd_create(args: argparse.Namespace, service: TaskService, project: str) -> None:
    event = service.create_task(
        project=project,
        title=args.title,
        description=args.description,
        status=args.status,
    )
    print(f"TASK_ADD_{event.task_id}")


def _cmd_update(args: argparse.Namespace, service: TaskService, project: str) -> None:
    event = service.update_task(
        task_id=args.id,
        project=project,
        status=args.status,
        note=args.note,
        description=args.description,
    )
    print(f"TASK_{event.status.upper()}_{event.task_id}")


def _cmd_list(args: argparse.Namespace, service: TaskService, project: str) -> None:
    tasks = service.list_tasks(
        project=None if args.all else project,
        status=args.status,
    )
    if not tasks:
        return
    print(f"{'ID':<10} {'STATUS':<8} {'PROJECT':<24} TITLE")
    for task in tasks:
        print(format_task_row(task))


def _cmd_get(args: argparse.Namespace, service: TaskService, project: str) -> None:
    for line in format_detail(service.get_task(args.id)):
        print(line)


def _cmd_lang(args: argparse.Namespace, lang_config: LangConfig, project: str) -> None:
    if args.unset:
        lang_config.unset(project)
        print("Language setting removed.")
    elif args.code:
        if resolve_lang(args.code) is None:
            raise UnsupportedLanguageError(args.code)
        lang_config.set(project, args.code)
        print(f"Language set to '{args.code}'.")
    else:
        current = lang_config.get(project)
        print(current if current else "Language not set.")


def _cmd_init(args: argparse.Namespace) -> None:
    result = run_init(global_=args.global_)
    if result.injected:
        for path in result.injected:
            print(f"Injected: {path}")
    elif result.up_to_date > 0 or not result.candidates:
        print("Already up-to-date.")
    else:
        print(
            "No instruction files found. Create one of these and run again:\n  "
            + ", ".join(result.candidates)
        )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 主入口，返回进程退出码"""
    setup_logging()
    args = build_parser().parse_args(argv)

    try:
        if args.command == "init":
            _cmd_init(args)
            return 0

        log_path = get_log_path()
        lang_config = LangConfig(get_lang_config_path(log_path))
        project = get_project()

        if args.command == "lang":
            _cmd_lang(args, lang_config, project)
            return 0

        service = TaskService(
            create_event_log(log_path),
            load_cli_settings(),
            lang_config=lang_config,
        )
        handlers = {
            "create": _cmd_create,
            "update": _cmd_update,
            "list": _cmd_list,
            "get": _cmd_get,
        }
        handlers[args.command](args, service, project)
    except TaskCliError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except (TaskLogError, OSError) as e:
        log.info("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
