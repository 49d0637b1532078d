"""Text platform for Crane Scale integration."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from homeassistant.components.text import TextEntity, TextEntityDescription
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .coordinator import CraneScaleDataUpdateCoordinator
from .models import CraneScaleConfigEntry, ScaleSessionData


@dataclass(frozen=True, kw_only=True)
class CraneScaleTextEntityDescription(TextEntityDescription):
    """Describes a Crane Scale setting edited as free text."""

    value_fn: Callable[[ScaleSessionData], float]
    set_fn: Callable[[CraneScaleDataUpdateCoordinator, str], None]


TEXT_DESCRIPTIONS = [
    CraneScaleTextEntityDescription(
        key="threshold",
        name="Threshold",
        icon="mdi:timer-cog-outline",
        value_fn=lambda data: data.threshold,
        set_fn=lambda coordinator, value: coordinator.async_set_threshold(value),
    ),
    CraneScaleTextEntityDescription(
        key="upper_limit",
        name="Upper Limit",
        icon="mdi:gauge-full",
        value_fn=lambda data: data.upper_limit,
        set_fn=lambda coordinator, value: coordinator.async_set_upper_limit(value),
    ),
]


async def async_setup_entry(
    hass: HomeAssistant,
    config_entry: CraneScaleConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Crane Scale text entities based on a config entry."""
    coordinator = config_entry.runtime_data

    async_add_entities(
        CraneScaleSettingText(coordinator, config_entry, description)
        for description in TEXT_DESCRIPTIONS
    )


class CraneScaleSettingText(CoordinatorEntity[CraneScaleDataUpdateCoordinator], TextEntity):
    """Text entity for a session setting in kilograms.

    Input that is not a positive number is replaced by the setting's
    fallback value rather than rejected.
    """

    _attr_has_entity_name = True
    entity_description: CraneScaleTextEntityDescription

    def __init__(
        self,
        coordinator: CraneScaleDataUpdateCoordinator,
        config_entry: CraneScaleConfigEntry,
        description: CraneScaleTextEntityDescription,
    ) -> None:
        """Initialize the text entity."""
        super().__init__(coordinator)
        self.entity_description = description
        self._attr_unique_id = f"{config_entry.entry_id}_{description.key}"

        self._attr_device_info = coordinator.device_info

    @property
    def native_value(self) -> str | None:
        """Return the current setting."""
        return str(self.entity_description.value_fn(self.coordinator.data))

    async def async_set_value(self, value: str) -> None:
        """Apply an operator edit."""
        self.entity_description.set_fn(self.coordinator, value)
