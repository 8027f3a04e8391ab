"""向 agent 配置文件注入任务管理说明

重复执行是幂等的：文件中已包含检测标记时跳过。
"""

from dataclasses import dataclass, field
from pathlib import Path

import structlog

log = structlog.get_logger()

SNIPPET = """REQUIRED: manage tasks with `task` CLI before, during, and after work. Never skip.
Commands: `task list [status]` | `task create "<title>" ["<desc>"]` | `task update <id> <status> ["<note>"]` | `task get <id>`
Session start: `task list doing` (resume) → `task list todo` (pick) → `task create` (if none). Always `task update <id> doing` before work.
During: human input needed → `task update <id> blocked "<reason>"`. Resumed → `task update <id> doing`.
End: PR → `task update <id> inreview "<pr_url>"`. Direct commit → `task update <id> done`. Unfinished → `blocked`. Unnecessary → `done`.
Limits: title ≤ 80, desc ≤ 500, note ≤ 200 chars."""

SNIPPET_DETECT = "task update <id> doing"

CURSOR_FRONTMATTER = (
    "---\n"
    "description: Task management workflow using the task CLI\n"
    "globs:\n"
    "alwaysApply: true\n"
    "---\n"
)


@dataclass(frozen=True)
class InjectionTarget:
    """注入目标文件"""

    path: Path
    header: str
    # True 时允许新建文件（父目录需已存在）
    create_file: bool = False
    frontmatter: str | None = None


@dataclass
class InitResult:
    injected: list[str] = field(default_factory=list)
    up_to_date: int = 0
    candidates: list[str] = field(default_factory=list)


def inject_into(target: InjectionTarget) -> str | None:
    """向单个目标注入说明

    Returns:
        注入成功时返回文件路径，跳过时返回 None
    """
    path = target.path

    if target.create_file:
        if not path.parent.exists():
            return None
    elif not path.exists():
        return None

    existing = path.read_text(encoding="utf-8") if path.exists() else ""
    if SNIPPET_DETECT in existing:
        return None

    if target.frontmatter is not None:
        content = f"{target.frontmatter}\n{target.header}\n{SNIPPET}\n"
    else:
        content = f"\n\n{target.header}\n{SNIPPET}\n"

    if path.exists():
        path.write_text(existing + content, encoding="utf-8")
    else:
        path.write_text(content.lstrip("\n"), encoding="utf-8")

    log.info("snippet_injected", path=str(path))
    return str(path)


def _is_up_to_date(target: InjectionTarget) -> bool:
    return target.path.exists() and SNIPPET_DETECT in target.path.read_text(
        encoding="utf-8"
    )


def run_init(
    global_: bool = False,
    cwd: Path | None = None,
    home: Path | None = None,
) -> InitResult:
    """注入到本地（当前目录）或全局（HOME 下）配置文件"""
    if global_:
        targets = global_targets(home or Path.home())
    else:
        targets = local_targets(cwd or Path.cwd())

    result = InitResult(
        candidates=[t.path.name for t in targets if not t.create_file],
    )
    for target in targets:
        if _is_up_to_date(target):
            result.up_to_date += 1
            continue
        injected = inject_into(target)
        if injected is not None:
            result.injected.append(injected)
    return result


def local_targets(cwd: Path) -> list[InjectionTarget]:
    return [
        InjectionTarget(path=cwd / "CLAUDE.md", header="## Task Management"),
        InjectionTarget(path=cwd / "AGENTS.md", header="## Task Management"),
        InjectionTarget(path=cwd / "GEMINI.md", header="## Task Management"),
        InjectionTarget(
            path=cwd / ".cursor" / "rules" / "task-management.mdc",
            header="",
            create_file=True,
            frontmatter=CURSOR_FRONTMATTER,
        ),
        InjectionTarget(
            path=cwd / ".clinerules" / "task-management.md",
            header="# Task Management",
            create_file=True,
        ),
    ]


def global_targets(home: Path) -> list[InjectionTarget]:
    return [
        InjectionTarget(
            path=home / ".claude" / "CLAUDE.md",
            header="## Task Management",
            create_file=True,
        ),
        InjectionTarget(
            path=home / ".codex" / "AGENTS.md",
            header="## Task Management",
            create_file=True,
        ),
        InjectionTarget(
            path=home / ".gemini" / "GEMINI.md",
            header="## Task Management",
            create_file=True,
        ),
        InjectionTarget(
            path=home / ".config" / "cline" / "rules" / "task-management.md",
            header="# Task Management",
            create_file=True,
        ),
        InjectionTarget(
            path=home / ".config" / "opencode" / "AGENTS.md",
            header="## Task Management",
            create_file=True,
        ),
    ]
