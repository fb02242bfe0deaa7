"""Directory manifest generation: every file under a directory with its checksum."""

from __future__ import annotations

import os
import re
import sys
from collections import deque
from typing import Iterable, Iterator, Optional, TextIO

from mangen.flags import adler32

__all__ = ["pattern_to_regex", "compile_patterns", "walk_manifest", "write_manifest"]

# Characters that are literal in an exclusion word but special in a regex.
_ESCAPED = frozenset("\\^$[](){}+?|")


def pattern_to_regex(word: str) -> str:
    """Turn an exclusion word into an anchored regular expression.

    ``.`` matches any single character and ``*`` any run of characters;
    every other regex metacharacter is taken literally.
    """
    parts = ["^"]
    for char in word:
        if char == "*":
            parts.append(".*")
        elif char in _ESCAPED:
            parts.append("\\" + char)
        else:
            parts.append(char)
    parts.append("$")
    return "".join(parts)


def compile_patterns(words: Iterable[str]) -> list[re.Pattern[str]]:
    """Compile exclusion words; words that fail to compile are reported and skipped."""
    compiled = []
    for word in words:
        regex = pattern_to_regex(word)
        try:
            compiled.append(re.compile(regex))
        except re.error as exc:
            print(f"regcomp error for pattern '{regex}': {exc}", file=sys.stderr)
    return compiled


def _report(label: str, exc: OSError) -> None:
    print(f"{label}: {exc.strerror or exc}", file=sys.stderr)


def _join(base: str, name: str) -> str:
    return name if not base else f"{base}/{name}"


def walk_manifest(
    path: Optional[str], excluded: Iterable[str]
) -> Iterator[tuple[str, int]]:
    """Yield ``(relative_path, checksum)`` for every file under ``path``.

    Directories are visited breadth first; ``None`` or an empty path means the
    current directory. Entries whose name matches an exclusion word are
    skipped together with their contents. The starting directory itself is
    never excluded.
    """
    patterns = compile_patterns(excluded)
    queue: deque[tuple[str, str]] = deque([(path or "", "")])

    while queue:
        abs_path, rel_path = queue.popleft()
        try:
            with os.scandir(abs_path or ".") as entries:
                listing = list(entries)
        except OSError as exc:
            _report("opendir", exc)
            continue

        for entry in listing:
            name = entry.name
            if any(pattern.search(name) for pattern in patterns):
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False

            if is_dir:
                sub_abs = f"{name}/" if not abs_path else f"{abs_path}/{name}"
                queue.append((sub_abs, f"{rel_path}{name}/"))
                continue

            try:
                with open(_join(abs_path, name), "rb") as handle:
                    data = handle.read()
            except OSError as exc:
                _report("fopen", exc)
                continue

            yield f"{rel_path}{name}", adler32(data)


def write_manifest(
    path: Optional[str], excluded: Iterable[str], out: Optional[TextIO] = None
) -> None:
    """Write the manifest of ``path`` as ``name : HEX`` lines to ``out``."""
    stream = sys.stdout if out is None else out
    for name, checksum in walk_manifest(path, excluded):
        stream.write(f"{name} : {checksum:X}\n")