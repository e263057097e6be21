"""A tiny case-insensitive line search over a file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence, Union
from os import PathLike


def read_file_contents(file_name: Union[str, "PathLike[str]"]) -> str:
    """Return the whole text of ``file_name``."""
    return Path(file_name).read_text()


def _lines(contents: str) -> list[str]:
    pieces = contents.split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()
    return [p[:-1] if p.endswith("\r") else p for p in pieces]


def search(query: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` containing ``query``, ignoring case."""
    needle = query.lower()
    return [line for line in _lines(contents) if needle in line.lower()]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Search a file for a query given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    print("Minigrep")
    if not args:
        raise SystemExit("Search Query can't be empty")
    if len(args) < 2:
        raise SystemExit("File name can't be empty")
    search_query, file_name = args[0], args[1]

    print(f"Given Search-query:{search_query}")
    print(f"Given File-name:{file_name}")

    try:
        data = read_file_contents(file_name)
    except FileNotFoundError:
        print(f"{file_name} is not found")
        return 1
    except OSError as error:
        print(error)
        return 1

    res = search(search_query, data)
    print(f"res: {res!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())