"""Button platform for Crane Scale integration."""
from __future__ import annotations

from homeassistant.components.button import ButtonEntity
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
    """Set up Crane Scale button based on a config entry."""
    coordinator = config_entry.runtime_data

    async_add_entities([
        CraneScaleResetMaxButton(coordinator, config_entry),
    ])


class CraneScaleResetMaxButton(CoordinatorEntity[CraneScaleDataUpdateCoordinator], ButtonEntity):
    """Button resetting the maximum weight of the session."""

    _attr_has_entity_name = True

    def __init__(
        self,
        coordinator: CraneScaleDataUpdateCoordinator,
        config_entry: CraneScaleConfigEntry,
    ) -> None:
        """Initialize the button."""
        super().__init__(coordinator)
        self._attr_unique_id = f"{config_entry.entry_id}_reset_max_weight"
        self._attr_name = "Reset Max Weight"
        self._attr_icon = "mdi:restore"

        self._attr_device_info = coordinator.device_info

    async def async_press(self) -> None:
        """Press the button."""
        self.coordinator.async_reset_max_weight()
