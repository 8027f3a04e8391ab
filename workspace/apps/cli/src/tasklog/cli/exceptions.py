"""CLI 异常体系

写入路径与命令层的错误；由 main() 统一转换为 stderr 输出和退出码。
"""


class TaskCliError(Exception):
    """CLI 基础异常"""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        """
        Args:
            message: 错误描述（输出为 "Error: <message>"）
            exit_code: 进程退出码
        """
        super().__init__(message)
        self.exit_code = exit_code


class TaskNotFoundError(TaskCliError):
    """引用的任务在日志中没有任何事件"""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"task '{task_id}' not found")
        self.task_id = task_id


class FieldTooLongError(TaskCliError):
    """字段超过长度限制（按字符计数）"""

    def __init__(self, field: str, limit: int, actual: int) -> None:
        super().__init__(f"{field} exceeds {limit} chars ({actual} chars given)")
        self.field = field
        self.limit = limit
        self.actual = actual


class InvalidStatusError(TaskCliError):
    """状态不在 TaskStatus 取值范围内"""

    def __init__(self, status: str, allowed: list[str]) -> None:
        super().__init__(
            f"invalid status '{status}' (expected one of: {', '.join(allowed)})"
        )
        self.status = status


class UnsupportedLanguageError(TaskCliError):
    """不支持的语言代码"""

    def __init__(self, code: str) -> None:
        super().__init__(f"unsupported language code: '{code}'")
        self.code = code


class LanguageMismatchError(TaskCliError):
    """文本语言与项目设定语言不一致

    此异常发生在写入事件之前，被拒绝的请求不会进入日志。
    """

    def __init__(
        self,
        field: str,
        expected: str,
        detected: str,
        confidence: float,
    ) -> None:
        super().__init__(
            f"{field} language mismatch: expected '{expected}' "
            f"but detected '{detected}' (confidence: {confidence:.2f})"
        )
        self.field = field
        self.expected = expected
        self.detected = detected
        self.confidence = confidence
