"""Switch platform for Crane Scale integration."""
from __future__ import annotations

from typing import Any

from homeassistant.components.switch import SwitchEntity
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .coordinator import CraneScaleDataUpdateCoordinator
from .models import CraneScaleConfigEntry


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: CraneScaleConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Crane Scale switches based on a config entry."""
    coordinator = config_entry.runtime_data

    async_add_entities([
        CraneScaleScanningSwitch(coordinator, config_entry),
    ])


class CraneScaleScanningSwitch(CoordinatorEntity[CraneScaleDataUpdateCoordinator], SwitchEntity):
    """Switch to start and stop listening for the scale."""

    _attr_has_entity_name = True

    def __init__(
        self,
        coordinator: CraneScaleDataUpdateCoordinator,
        config_entry: CraneScaleConfigEntry,
    ) -> None:
        """Initialize the switch."""
        super().__init__(coordinator)
        self._attr_unique_id = f"{config_entry.entry_id}_scanning"
        self._attr_name = "Scanning"
        self._attr_icon = "mdi:bluetooth-audio"

        self._attr_device_info = coordinator.device_info

    @property
    def is_on(self) -> bool:
        """Return true if scanning."""
        return self.coordinator.is_scanning

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Start scanning."""
        self.coordinator.async_start_scanning()

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Stop scanning."""
        self.coordinator.async_stop_scanning()
