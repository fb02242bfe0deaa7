"""Command-line entry point for the manifest generator."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence

from mangen.flags import Flag, get_flag, usage_text, version_text
from mangen.manifest import write_manifest

__all__ = ["UsageError", "parse_args", "main"]

_NON_FLAGS = (Flag.INVALID, Flag.NOT_A_FLAG)


class UsageError(Exception):
    """Raised when the command line cannot be understood."""


@dataclass
class _Invocation:
    path: Optional[str] = None
    excluded: list[str] = field(default_factory=list)
    action: Optional[Flag] = None


def parse_args(argv: Sequence[str]) -> _Invocation:
    """Parse arguments (without the program name).

    Only the first argument may be the directory path, even if it starts
    with ``-``. ``-h`` and ``-v`` stop parsing at once; ``-e`` takes the next
    argument as an exclusion word, which must not itself be a known flag.
    """
    result = _Invocation()
    args = iter(enumerate(argv))
    for index, arg in args:
        flag = get_flag(arg)
        if flag in _NON_FLAGS:
            if index == 0:
                result.path = arg
                continue
            raise UsageError(f"Invalid command line argument {arg}")
        if flag in (Flag.HELP, Flag.VERSION):
            result.action = flag
            return result
        # Flag.EXCLUDE
        try:
            _, word = next(args)
        except StopIteration:
            raise UsageError("Incorrect use of flag -e") from None
        if get_flag(word) not in _NON_FLAGS:
            raise UsageError("Incorrect use of flag -e")
        result.excluded.append(word)
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        invocation = parse_args(argv)
    except UsageError as exc:
        print(f"mangen: {exc}", file=sys.stderr)
        return 1

    if invocation.action is Flag.HELP:
        sys.stdout.write(usage_text())
        return 0
    if invocation.action is Flag.VERSION:
        sys.stdout.write(version_text())
        return 0

    write_manifest(invocation.path, invocation.excluded)
    return 0


if __name__ == "__main__":
    sys.exit(main())