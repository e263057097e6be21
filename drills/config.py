"""Loading a two-line name and age configuration file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Union

_AGE_MAX = 0xFFFF
_UNSIGNED = re.compile(r"\+?[0-9]+")


class ConfigError(ValueError):
    """Raised when a configuration file is incomplete or malformed."""


@dataclass(frozen=True)
class Config:
    """A person's name and age."""

    name: str
    age: int

    def __str__(self) -> str:
        return f"name:{self.name} age:{self.age}"


def _parse_age(text: str) -> int:
    if not text:
        raise ConfigError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ConfigError("invalid digit found in string")
    age = int(text)
    if age > _AGE_MAX:
        raise ConfigError("number too large to fit in target type")
    return age


def load_config(path: Union[str, "PathLike[str]"]) -> Config:
    """Read a name from the first line and an age from the second.

    Raises ConfigError for a missing line or an unparsable age, and
    OSError if the file cannot be read.
    """
    with open(path, encoding="utf-8", newline="") as stream:
        lines = [line.rstrip("\n") for line in stream]
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if not lines:
        raise ConfigError("missing name")
    if len(lines) < 2:
        raise ConfigError("missing age")
    return Config(name=lines[0], age=_parse_age(lines[1]))