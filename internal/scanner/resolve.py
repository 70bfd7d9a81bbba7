# internal/scanner/resolve.py

from __future__ import annotations

import re
from typing import Iterable, Optional

from internal.errors import InvalidFilter, NotFound


def display_name(summary: dict) -> str:
    names = summary.get("Names") or []
    raw = names[0] if names else (summary.get("Name") or "")
    # docker prefixes container names with "/"
    return raw[1:] if raw.startswith("/") else raw


def resolve_container_id(summaries: list[dict], token: str) -> str:
    """Match `token` against display names first, then raw container IDs."""
    for s in summaries:
        if display_name(s) == token:
            return s.get("Id") or ""
    for s in summaries:
        if s.get("Id") == token:
            return token
    raise NotFound(f"Container {token} not found")


def compile_filter(pattern: str) -> Optional[re.Pattern]:
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidFilter(f"Invalid filter regex {pattern!r}: {e}")


def filter_names(names: Iterable[str], pattern: Optional[re.Pattern]) -> list[str]:
    if pattern is None:
        return list(names)
    return [n for n in names if pattern.search(n)]
