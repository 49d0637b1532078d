"""The Crane Scale integration."""
from __future__ import annotations

import logging

from homeassistant.const import CONF_ADDRESS, Platform
from homeassistant.core import HomeAssistant

from .const import CONF_NAME
from .coordinator import CraneScaleDataUpdateCoordinator
from .models import CraneScaleConfigEntry

PLATFORMS: list[Platform] = [Platform.SENSOR, Platform.BUTTON, Platform.SWITCH, Platform.TEXT]

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(hass: HomeAssistant, entry: CraneScaleConfigEntry) -> bool:
    """Set up Crane Scale from a config entry."""
    address = entry.data[CONF_ADDRESS]

    coordinator = CraneScaleDataUpdateCoordinator(
        hass, address, entry.data.get(CONF_NAME), entry
    )

    # Readings arrive only through advertisements, so scanning starts right away
    coordinator.async_start_scanning()
    entry.async_on_unload(coordinator.async_stop_scanning)

    entry.runtime_data = coordinator

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    _LOGGER.debug("Crane Scale %s set up", address)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: CraneScaleConfigEntry) -> bool:
    """Unload a config entry."""
    if unload_ok := await hass.config_entries.async_unload_platforms(entry, PLATFORMS):
        await entry.runtime_data.async_shutdown()
    return unload_ok
