"""
Host facts printed alongside benchmark results.

Timings from different machines are not comparable, so every driver run
records the interpreter, platform and hardware it ran on.
"""

from __future__ import annotations

import os
import platform
from typing import Any, Dict, Optional

import psutil


def current_rss_bytes() -> Optional[int]:
    """Return current RSS bytes of this process."""
    try:
        return psutil.Process(os.getpid()).memory_info().rss
    except psutil.Error:  # pragma: no cover - process can vanish on exit
        return None


def system_snapshot() -> Dict[str, Any]:
    """Collect a static description of the benchmarking host."""
    memory = psutil.virtual_memory()
    return {
        "platform": platform.platform(),
        "python": platform.python_version(),
        "processor": platform.processor() or platform.machine(),
        "logical_cpus": psutil.cpu_count(logical=True),
        "physical_cpus": psutil.cpu_count(logical=False),
        "total_memory_bytes": memory.total,
        "available_memory_bytes": memory.available,
    }


def format_bytes(size: int) -> str:
    """Format size in appropriate unit (B, KB, MB, GB)."""
    if size >= 1024 ** 3:
        return f"{size / 1024 ** 3:.2f} GB"
    elif size >= 1024 * 1024:
        return f"{size / (1024 * 1024):.2f} MB"
    elif size >= 1024:
        return f"{size / 1024:.2f} KB"
    else:
        return f"{size} B"
