"""Sensor platform for Crane Scale integration."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.const import PERCENTAGE, UnitOfMass, UnitOfTime
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .coordinator import CraneScaleDataUpdateCoordinator
from .models import CraneScaleConfigEntry, ScaleSessionData, TimerState

_LOGGER = logging.getLogger(__name__)

PARALLEL_UPDATES = 0  # No limit since coordinator manages all updates


@dataclass(frozen=True, kw_only=True)
class CraneScaleSensorEntityDescription(SensorEntityDescription):
    """Describes a Crane Scale sensor."""

    value_fn: Callable[[ScaleSessionData], float | int | str | None]
    attributes_fn: Callable[[ScaleSessionData], dict[str, Any]] | None = None


SENSOR_DESCRIPTIONS = [
    CraneScaleSensorEntityDescription(
        key="weight",
        name="Weight",
        device_class=SensorDeviceClass.WEIGHT,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfMass.KILOGRAMS,
        suggested_display_precision=2,
        value_fn=lambda data: data.current_weight,
        attributes_fn=lambda data: {
            "last_measurement": (
                data.last_measurement.isoformat() if data.last_measurement else None
            ),
        },
    ),
    CraneScaleSensorEntityDescription(
        key="max_weight",
        name="Max Weight",
        device_class=SensorDeviceClass.WEIGHT,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfMass.KILOGRAMS,
        suggested_display_precision=2,
        icon="mdi:weight-kilogram",
        value_fn=lambda data: data.max_weight,
    ),
    CraneScaleSensorEntityDescription(
        key="time_above_threshold",
        name="Time Above Threshold",
        device_class=SensorDeviceClass.DURATION,
        native_unit_of_measurement=UnitOfTime.SECONDS,
        icon="mdi:timer-outline",
        value_fn=lambda data: data.elapsed_seconds,
        attributes_fn=lambda data: {
            "elapsed": data.elapsed_display,
            "threshold": data.threshold,
        },
    ),
    CraneScaleSensorEntityDescription(
        key="timer_state",
        name="Threshold Timer",
        device_class=SensorDeviceClass.ENUM,
        options=[state.value for state in TimerState],
        icon="mdi:timer-play-outline",
        value_fn=lambda data: data.timer_state.value,
    ),
    CraneScaleSensorEntityDescription(
        key="meter",
        name="Meter",
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=PERCENTAGE,
        suggested_display_precision=0,
        icon="mdi:gauge",
        value_fn=lambda data: round(data.meter_fraction * 100, 1),
        attributes_fn=lambda data: {"upper_limit": data.upper_limit},
    ),
]


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: CraneScaleConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Crane Scale sensor based on a config entry."""
    coordinator = config_entry.runtime_data

    async_add_entities(
        CraneScaleSensor(coordinator, config_entry, description)
        for description in SENSOR_DESCRIPTIONS
    )


class CraneScaleSensor(CoordinatorEntity[CraneScaleDataUpdateCoordinator], SensorEntity):
    """Representation of a Crane Scale session sensor."""

    _attr_has_entity_name = True
    _attr_should_poll = False
    _unrecorded_attributes = frozenset({"last_measurement", "elapsed"})
    entity_description: CraneScaleSensorEntityDescription

    def __init__(
        self,
        coordinator: CraneScaleDataUpdateCoordinator,
        config_entry: CraneScaleConfigEntry,
        description: CraneScaleSensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator)
        self.entity_description = description

        self._attr_unique_id = f"{coordinator.address}_{description.key}"
        self._attr_device_info = coordinator.device_info

    @property
    def native_value(self) -> float | int | str | None:
        """Return the state of the sensor."""
        if not self.coordinator.data:
            return None

        return self.entity_description.value_fn(self.coordinator.data)

    @property
    def extra_state_attributes(self) -> dict[str, Any] | None:
        """Return the state attributes."""
        if not self.coordinator.data or self.entity_description.attributes_fn is None:
            return None

        return self.entity_description.attributes_fn(self.coordinator.data)
