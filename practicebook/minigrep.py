"""Case-insensitive search for a phrase in the lines of a text file."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UserArgument:
    """The search phrase and the file to look in."""

    search: str
    file_name: str


def parse_arguments(args: list[str]) -> UserArgument:
    """Build a UserArgument from a full argument list (program name first).

    Raises ValueError when there are too few or too many arguments.
    """
    if len(args) < 3:
        raise ValueError("Not enough arguments")
    if len(args) > 3:
        raise ValueError("Too many arguments")
    _, search, file_name = args
    return UserArgument(search=search, file_name=file_name)


def read_file(search: str, file_name: str | Path) -> list[str]:
    """Return the lines of ``file_name`` that contain ``search``, ignoring case."""
    content = Path(file_name).read_text(encoding="utf-8")
    needle = search.lower()
    return [line for line in _lines(content) if needle in line.lower()]


def _lines(content: str) -> list[str]:
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _format_lines(lines: list[str]) -> str:
    return "[" + ", ".join(json.dumps(line, ensure_ascii=False) for line in lines) + "]"


def main(argv: list[str] | None = None) -> int:
    """Run the search from the command line and print the matching lines."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        arguments = parse_arguments(["minigrep", *argv])
    except ValueError as err:
        print(err)
        return 1
    matches = read_file(arguments.search, arguments.file_name)
    print(_format_lines(matches))
    return 0


if __name__ == "__main__":
    sys.exit(main())