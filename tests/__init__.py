"""Tests for the Crane Scale integration."""
from __future__ import annotations

from collections.abc import Callable

from custom_components.crane_scale.models import WeightReading

TEST_ADDRESS = "2A:C0:19:11:25:65"
TEST_NAME = "IF_B7"


class FakeTicker:
    """Virtual once-per-second tick source."""

    def __init__(self) -> None:
        self.callback: Callable[[], None] | None = None
        self.started = 0
        self.cancelled = 0

    def schedule(self, callback: Callable[[], None]) -> Callable[[], None]:
        self.callback = callback
        self.started += 1

        def cancel() -> None:
            self.cancelled += 1
            self.callback = None

        return cancel

    @property
    def active(self) -> bool:
        return self.callback is not None

    def fire(self, seconds: int = 1) -> None:
        for _ in range(seconds):
            if self.callback is not None:
                self.callback()


def kg(value: float) -> WeightReading:
    """Build a reading from kilograms."""
    return WeightReading(round(value * 100))
