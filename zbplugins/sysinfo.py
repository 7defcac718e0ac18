"""Machine status report and the packed default rate limit setting."""

from __future__ import annotations

import math
import re

import psutil

LIMIT_COMMAND = re.compile(r"^设置默认限速为每\s*(\d+)\s*(分钟|秒)\s*(\d+)\s*次触发$")
_LIMIT = 65536


def decode_limit(data: int) -> tuple[int, int]:
    """Split stored data into (interval seconds, burst)."""
    return data & 0xFFFF, (data >> 16) & 0xFFFF


def encode_limit(interval: int, burst: int) -> int:
    """Pack an interval in seconds and a burst into one integer."""
    return (interval & 0xFFFF) | ((burst << 16) & 0xFFFF0000)


def parse_limit_command(message: str) -> tuple[int, int]:
    """Parse the limit command into (interval seconds, burst)."""
    match = LIMIT_COMMAND.match(message)
    if match is None:
        raise ValueError("not a limit command")
    interval = int(match.group(1))
    if match.group(2) == "分钟":
        interval *= 60
    if not 0 < interval < _LIMIT:
        raise ValueError("interval too big")
    burst = int(match.group(3))
    if not 0 < burst < _LIMIT:
        raise ValueError("burst too big")
    return interval, burst


def _round(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def cpu_percent() -> float:
    """CPU usage over one second, rounded; -1 when it cannot be read."""
    try:
        return _round(psutil.cpu_percent(interval=1))
    except Exception:
        return -1.0


def mem_percent() -> float:
    """Memory usage, rounded; -1 when it cannot be read."""
    try:
        return _round(psutil.virtual_memory().percent)
    except Exception:
        return -1.0


def disk_report() -> str:
    """One line per mounted partition that is in use."""
    try:
        parts = psutil.disk_partitions(all=True)
    except Exception as err:
        return str(err)
    lines = []
    for part in parts:
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except Exception as err:
            lines.append("\n  - " + str(err))
            continue
        pc = int(_round(usage.percent))
        if pc > 0:
            lines.append(f"\n  - {part.mountpoint}({usage.total // 1024 // 1024}M) {pc}%")
    return "".join(lines)


def status_report() -> str:
    """The text of the self-check reply."""
    return (
        f"* CPU占用: {cpu_percent():g}%\n"
        f"* RAM占用: {mem_percent():g}%\n"
        f"* 硬盘使用: {disk_report()}"
    )