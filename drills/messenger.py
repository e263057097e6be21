"""Tracking a value against a quota and warning as it fills up."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod


class Messenger(ABC):
    """Something that can deliver a text message."""

    @abstractmethod
    def send(self, msg: str) -> None:
        """Deliver ``msg``."""


class LimitTracker:
    """Sends a warning through a messenger as a value nears its maximum."""

    def __init__(self, messenger: Messenger, max_value: int) -> None:
        if max_value < 0:
            raise ValueError("the maximum must not be negative")
        self.messenger = messenger
        self.value = 0
        self.max_value = max_value

    def _fraction(self) -> float:
        if self.max_value:
            return self.value / self.max_value
        return math.inf if self.value else math.nan

    def set_value(self, value: int) -> None:
        """Record ``value`` and send a message at 75%, 90% and 100%."""
        if value < 0:
            raise ValueError("the value must not be negative")
        self.value = value
        fraction = self._fraction()
        if fraction >= 1.0:
            self.messenger.send("ERROR: You are out of quota!")
        elif fraction >= 0.9:
            self.messenger.send("WARNING: You used up 90%")
        elif fraction >= 0.75:
            self.messenger.send("WARNING: You used up 75%")