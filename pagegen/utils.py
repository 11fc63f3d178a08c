"""Utility helpers for path normalization and timing output."""

from __future__ import annotations

import re

TRAILING_SLASH_PATTERN = re.compile(r"/?$")


def prepend_forward_slash(value: str) -> str:
    return value if value.startswith("/") else "/" + value


def append_forward_slash(value: str) -> str:
    return value if value.endswith("/") else value + "/"


def to_posix(value: str) -> str:
    """Replace Windows separators with forward slashes."""
    return value.replace("\\", "/")


def page_name(pathname: str) -> str:
    """Normalize a pathname for build stats: ``/about`` becomes ``about/``."""
    with_slash = TRAILING_SLASH_PATTERN.sub("/", pathname, count=1)
    return with_slash[1:] if with_slash.startswith("/") else with_slash


def get_time_stat(start: float, end: float) -> str:
    """Format the time between two ``time.perf_counter`` readings."""
    elapsed_ms = (end - start) * 1000
    if elapsed_ms < 750:
        return f"{int(elapsed_ms + 0.5)}ms"
    return f"{elapsed_ms / 1000:.2f}s"
