"""Pick header paths out of a compiler dependency (.d) file for ctags."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

MAX_PATH = 10240
SEPARATORS = (" ", "\n")
USAGE = "Usage: ctags-dlist FILE\nEXAMPLE: ctags-dlist main.d"


class DependencyListError(ValueError):
    """The dependency list cannot be read as a list of paths."""


def _is_ignored(token: str) -> bool:
    return (
        not token
        or token.startswith("\\")
        or (len(token) > 3 and token.endswith("cpp"))
        or (len(token) > 2 and token.endswith("o:"))
    )


def _iter_header_paths(text: str) -> Iterator[str]:
    current: list[str] = []
    for char in text:
        if char in SEPARATORS:
            token = "".join(current)
            current.clear()
            if not _is_ignored(token):
                yield token
        else:
            current.append(char)
            if len(current) >= MAX_PATH:
                raise DependencyListError(f"path longer than {MAX_PATH - 1} characters")
    if current:
        raise DependencyListError("dependency list does not end with a separator")


def header_paths(text: str) -> list[str]:
    """Return the header paths in a dependency list, in order.

    Targets ending in "o:", sources ending in "cpp" and line continuations
    are left out.
    """
    return list(_iter_header_paths(text))


def write_header_list(dep_path: str | Path, out_path: str | Path = "headers.txt") -> None:
    """Write each header path of dep_path on its own line to out_path."""
    with open(dep_path, encoding="utf-8", errors="surrogateescape", newline="") as source:
        text = source.read()
    with open(out_path, "w", encoding="utf-8", errors="surrogateescape", newline="") as out:
        for path in _iter_header_paths(text):
            out.write(path + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 1
    dep_path = args[0]
    try:
        with open(dep_path, encoding="utf-8", errors="surrogateescape", newline="") as source:
            text = source.read()
    except OSError as err:
        print(f"Cannot open dependencies file: {err.strerror}", file=sys.stderr)
        return 1
    try:
        with open("headers.txt", "w", encoding="utf-8", errors="surrogateescape", newline="") as out:
            for path in _iter_header_paths(text):
                out.write(path + "\n")
    except OSError as err:
        print(f"Cannot open output file headers.txt: {err.strerror}", file=sys.stderr)
        return 1
    except DependencyListError as err:
        print(f"Bad dependencies file: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())