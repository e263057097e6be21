"""Walking up a chain of parents, with errors that say which step failed."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Union


@dataclass(eq=False)
class Node:
    """A node that may have a parent."""

    label: str = ""
    parent: Optional["Node"] = None


class GrandParentError(LookupError):
    """Raised when a grandparent cannot be reached."""


class ParentNotFound(GrandParentError):
    """The node has no parent."""

    def __init__(self) -> None:
        super().__init__("ParentNotFound")


class GrandParentNotFound(GrandParentError):
    """The node's parent has no parent."""

    def __init__(self) -> None:
        super().__init__("GrandParentNotFound")


class LogError(Exception):
    """Raised when logging a grandparent fails, wrapping the cause."""

    def __init__(self, error: Union[GrandParentError, OSError]) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        if isinstance(self.error, GrandParentError):
            return f"grandparent error {self.error!r}"
        return str(self.error)


def grand_parent(node: Node) -> Node:
    """Return the parent of the node's parent."""
    parent = node.parent
    if parent is None:
        raise ParentNotFound()
    grand = parent.parent
    if grand is None:
        raise GrandParentNotFound()
    return grand


def log_grand_parent(node: Node, path: Union[str, "PathLike[str]"] = "info.txt") -> None:
    """Write the representation of the node's grandparent to ``path``."""
    try:
        grand = grand_parent(node)
    except GrandParentError as error:
        raise LogError(error) from error
    try:
        Path(path).write_text(repr(grand))
    except OSError as error:
        raise LogError(error) from error