"""任务标识生成

4 个随机字节 -> 8 位小写十六进制。
不检查日志中是否已存在，接受生日碰撞风险。
"""

import secrets

TASK_ID_BYTES = 4


def new_task_id() -> str:
    """生成新的任务标识"""
    return secrets.token_hex(TASK_ID_BYTES)
