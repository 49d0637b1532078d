"""Data models for Crane Scale integration."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from .const import DEFAULT_THRESHOLD, DEFAULT_UPPER_LIMIT, WEIGHT_DIVISOR

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry

    from .coordinator import CraneScaleDataUpdateCoordinator


@dataclass(frozen=True)
class WeightReading:
    """Weight decoded from one advertisement."""

    raw_value: int  # 16-bit value as broadcast

    @property
    def kilograms(self) -> float:
        """Return the weight in kilograms (0.01 kg resolution)."""
        return self.raw_value / WEIGHT_DIVISOR


class TimerState(StrEnum):
    """State of the above-threshold timer."""

    STOPPED = "stopped"
    RUNNING = "running"


@dataclass(frozen=True)
class ScaleSessionData:
    """Snapshot of a crane scale monitoring session."""

    current_weight: float = 0.0
    max_weight: float = 0.0
    threshold: float = DEFAULT_THRESHOLD
    upper_limit: float = DEFAULT_UPPER_LIMIT
    timer_state: TimerState = TimerState.STOPPED
    elapsed_seconds: int = 0
    last_measurement: datetime | None = None

    @property
    def timer_running(self) -> bool:
        """Return True while the weight is above the threshold."""
        return self.timer_state is TimerState.RUNNING

    @property
    def meter_fraction(self) -> float:
        """Return current weight relative to the upper limit, clamped to 0..1."""
        return min(max(self.current_weight / self.upper_limit, 0.0), 1.0)

    @property
    def elapsed_display(self) -> str:
        """Return elapsed time as MM:SS."""
        minutes, seconds = divmod(self.elapsed_seconds, 60)
        return f"{minutes:02d}:{seconds:02d}"


type CraneScaleConfigEntry = ConfigEntry[CraneScaleDataUpdateCoordinator]
