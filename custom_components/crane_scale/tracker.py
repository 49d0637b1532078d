"""Session tracking for the crane scale: max weight and threshold timer."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
import logging
import math

from .const import (
    DEFAULT_THRESHOLD,
    DEFAULT_UPPER_LIMIT,
    FALLBACK_THRESHOLD,
    FALLBACK_UPPER_LIMIT,
)
from .models import ScaleSessionData, TimerState, WeightReading

_LOGGER = logging.getLogger(__name__)

type CancelTick = Callable[[], None]
type ScheduleTick = Callable[[Callable[[], None]], CancelTick]


@dataclass
class ScaleSession:
    """Mutable state of one monitoring session."""

    current_weight: float = 0.0
    max_weight: float = 0.0
    threshold: float = DEFAULT_THRESHOLD
    upper_limit: float = DEFAULT_UPPER_LIMIT
    timer_state: TimerState = TimerState.STOPPED
    elapsed_seconds: int = 0
    last_measurement: datetime | None = None


def parse_positive(value: str | float | None) -> float | None:
    """Parse an operator edit, returning None unless it is a positive number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


class SessionTracker:
    """Turn decoded readings and clock ticks into session signals.

    The once-per-second tick source is injected as ``schedule_tick``: it is
    given a callback and returns a function that cancels the repetition.
    """

    def __init__(
        self,
        schedule_tick: ScheduleTick,
        threshold: float = DEFAULT_THRESHOLD,
        upper_limit: float = DEFAULT_UPPER_LIMIT,
    ) -> None:
        """Initialize."""
        self._schedule_tick = schedule_tick
        self._cancel_tick: CancelTick | None = None
        self._listeners: list[Callable[[], None]] = []
        self._session = ScaleSession(threshold=threshold, upper_limit=upper_limit)

    @property
    def session(self) -> ScaleSession:
        """Return the live session state."""
        return self._session

    @property
    def timer_running(self) -> bool:
        """Return True while the threshold timer is running."""
        return self._session.timer_state is TimerState.RUNNING

    def snapshot(self) -> ScaleSessionData:
        """Return a read-only copy of the session."""
        session = self._session
        return ScaleSessionData(
            current_weight=session.current_weight,
            max_weight=session.max_weight,
            threshold=session.threshold,
            upper_limit=session.upper_limit,
            timer_state=session.timer_state,
            elapsed_seconds=session.elapsed_seconds,
            last_measurement=session.last_measurement,
        )

    def add_listener(self, update_callback: Callable[[], None]) -> Callable[[], None]:
        """Listen for session changes, returning a function to stop listening."""
        self._listeners.append(update_callback)

        def remove_listener() -> None:
            if update_callback in self._listeners:
                self._listeners.remove(update_callback)

        return remove_listener

    def _notify(self) -> None:
        for update_callback in list(self._listeners):
            update_callback()

    def on_reading(self, reading: WeightReading) -> None:
        """Record a new weight reading."""
        weight = reading.kilograms
        session = self._session
        session.current_weight = weight
        session.last_measurement = datetime.now()
        if weight > session.max_weight:
            session.max_weight = weight

        if weight > session.threshold:
            if not self.timer_running:
                self._start_timer()
        elif self.timer_running:
            self._stop_timer()

        self._notify()

    def on_clock_tick(self) -> None:
        """Count one second while the weight stays above the threshold."""
        if not self.timer_running:
            return
        self._session.elapsed_seconds += 1
        self._notify()

    def reset_max(self) -> None:
        """Reset the maximum weight to zero."""
        self._session.max_weight = 0.0
        self._notify()

    def clear_current_weight(self) -> None:
        """Clear the current weight, e.g. when scanning restarts."""
        self._session.current_weight = 0.0
        self._notify()

    def set_threshold(self, value: str | float | None) -> float:
        """Set the threshold, falling back to the default on invalid input."""
        threshold = parse_positive(value)
        if threshold is None:
            _LOGGER.warning(
                "Invalid threshold %r, using %.1f kg", value, FALLBACK_THRESHOLD
            )
            threshold = FALLBACK_THRESHOLD
        self._session.threshold = threshold
        self._notify()
        return threshold

    def set_upper_limit(self, value: str | float | None) -> float:
        """Set the meter upper limit, falling back to the default on invalid input."""
        upper_limit = parse_positive(value)
        if upper_limit is None:
            _LOGGER.warning(
                "Invalid upper limit %r, using %.1f kg", value, FALLBACK_UPPER_LIMIT
            )
            upper_limit = FALLBACK_UPPER_LIMIT
        self._session.upper_limit = upper_limit
        self._notify()
        return upper_limit

    def shutdown(self) -> None:
        """Stop the timer and cancel the tick source."""
        if self._cancel_tick is not None:
            self._cancel_tick()
            self._cancel_tick = None
        self._session.timer_state = TimerState.STOPPED
        self._session.elapsed_seconds = 0

    def _start_timer(self) -> None:
        _LOGGER.info(
            "Weight above %.2f kg threshold, starting timer", self._session.threshold
        )
        self._session.timer_state = TimerState.RUNNING
        self._session.elapsed_seconds = 0
        if self._cancel_tick is not None:
            self._cancel_tick()
        self._cancel_tick = self._schedule_tick(self.on_clock_tick)

    def _stop_timer(self) -> None:
        _LOGGER.info(
            "Weight back at or below threshold after %d s, stopping timer",
            self._session.elapsed_seconds,
        )
        if self._cancel_tick is not None:
            self._cancel_tick()
            self._cancel_tick = None
        self._session.timer_state = TimerState.STOPPED
        self._session.elapsed_seconds = 0
