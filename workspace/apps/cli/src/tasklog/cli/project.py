"""项目（scope）解析

优先使用 git origin 远端地址中的 owner/repo，
无法解析时退回当前工作目录。事件日志只把结果当作不透明字符串。
"""

import subprocess
from pathlib import Path

import structlog

log = structlog.get_logger()

_GIT_TIMEOUT_S = 5


def get_project(cwd: Path | None = None) -> str:
    """解析当前调用所属项目"""
    workdir = cwd or Path.cwd()
    try:
        result = subprocess.run(
            ["git", "remote", "get-url", "origin"],
            cwd=workdir,
            capture_output=True,
            text=True,
            timeout=_GIT_TIMEOUT_S,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        log.debug("git_remote_unavailable", error=str(e))
    else:
        if result.returncode == 0:
            project = extract_project_from_url(result.stdout.strip())
            if project:
                return project

    return str(workdir)


def extract_project_from_url(url: str) -> str | None:
    """从 git 远端地址提取 owner/repo

    支持 git@host:owner/repo(.git)、ssh://git@host/owner/repo(.git)、
    http(s)://host/owner/repo(.git)。其他格式返回 None。
    """
    if url.startswith("git@"):
        _, sep, path = url.partition(":")
        if not sep:
            return None
    elif url.startswith("ssh://git@"):
        _, sep, path = url[len("ssh://git@") :].partition("/")
        if not sep:
            return None
    elif url.startswith(("https://", "http://")):
        without_scheme = url.split("://", 1)[1]
        _, sep, path = without_scheme.partition("/")
        if not sep:
            return None
    else:
        return None

    project = path.removesuffix(".git")
    if "/" not in project:
        return None
    return project
