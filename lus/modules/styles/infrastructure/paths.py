from __future__ import annotations

import glob
import os
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, List, Sequence

DEFAULT_IGNORE = "node_modules/**/*"


def _normalize(path: str) -> str:
    value = path.replace(os.sep, "/")
    while value.startswith("./"):
        value = value[2:]
    return value


def matches_ignore(path: str, pattern: str) -> bool:
    candidate = _normalize(path)
    pattern = _normalize(pattern)
    if fnmatch(candidate, pattern):
        return True
    # "**/" may stand for zero directories.
    collapsed = pattern.replace("**/", "")
    return collapsed != pattern and fnmatch(candidate, collapsed)


def resolve_paths(patterns: Iterable[str], ignore: Sequence[str] = ()) -> List[Path]:
    ignore_patterns = [DEFAULT_IGNORE, *(item for item in ignore if item)]
    seen: set[str] = set()
    resolved: List[Path] = []
    for pattern in patterns:
        if os.path.isfile(pattern):
            candidates = [pattern]
        else:
            candidates = sorted(glob.glob(pattern, recursive=True))
        for candidate in candidates:
            if not os.path.isfile(candidate):
                continue
            key = _normalize(os.path.normpath(candidate))
            if key in seen:
                continue
            if any(matches_ignore(key, item) for item in ignore_patterns):
                continue
            seen.add(key)
            resolved.append(Path(candidate))
    return resolved
