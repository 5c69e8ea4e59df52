"""Locating executables through a PATH-style search list."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [field for field in text.split(sep) if field]


def search_path(env: Mapping[str, str]) -> list[str] | None:
    """Return the directories listed in ``PATH``, or None when it is unset."""
    value = env.get("PATH")
    if value is None:
        return None
    return split_fields(value, ":")


def resolve_command(directories: Iterable[str] | None, name: str) -> str | None:
    """Find ``name`` in ``directories``.

    Returns the first candidate that exists.  When none exists, the last
    candidate tried is returned; with no directories at all, None.
    """
    candidate = None
    for directory in directories or ():
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK):
            return candidate
    return candidate


def parse_command(cmd: str) -> list[str]:
    """Split a command line into its arguments on spaces."""
    argv = split_fields(cmd, " ")
    if not argv:
        raise ValueError("empty command")
    return argv