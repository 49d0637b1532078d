"""Diagnostics support for Crane Scale."""
from __future__ import annotations

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.device_registry import DeviceEntry

from .models import CraneScaleConfigEntry

TO_REDACTED = {"address"}


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant, entry: CraneScaleConfigEntry
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    coordinator = entry.runtime_data
    data = coordinator.data

    return {
        "entry": {
            "title": entry.title,
            "data": {
                key: ("**REDACTED**" if key in TO_REDACTED else value)
                for key, value in entry.data.items()
            },
            "options": entry.options,
        },
        "coordinator": {
            "address": "**REDACTED**",
            "device_name": coordinator.device_name,
            "scanning": coordinator.is_scanning,
            "advertisement_stats": coordinator.advertisement_stats,
        },
        "session": {
            "current_weight": data.current_weight if data else None,
            "max_weight": data.max_weight if data else None,
            "threshold": data.threshold if data else None,
            "upper_limit": data.upper_limit if data else None,
            "timer_state": data.timer_state.value if data else None,
            "elapsed_seconds": data.elapsed_seconds if data else None,
            "last_measurement": (
                data.last_measurement.isoformat()
                if data and data.last_measurement
                else None
            ),
        },
    }


async def async_get_device_diagnostics(
    hass: HomeAssistant, entry: ConfigEntry, device: DeviceEntry
) -> dict[str, Any]:
    """Return diagnostics for a device."""
    return await async_get_config_entry_diagnostics(hass, entry)
