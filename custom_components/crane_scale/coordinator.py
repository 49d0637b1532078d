"""DataUpdateCoordinator for Crane Scale."""
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
import logging
from typing import TYPE_CHECKING, Any

from homeassistant.components import bluetooth
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import CALLBACK_TYPE, HomeAssistant, callback
from homeassistant.helpers.event import async_track_time_interval
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

from .const import DEFAULT_DEVICE_NAME, DOMAIN, TICK_INTERVAL_SECONDS
from .decoder import decode_manufacturer_data, matches_target
from .models import ScaleSessionData
from .tracker import SessionTracker

if TYPE_CHECKING:
    from homeassistant.components.bluetooth import BluetoothServiceInfoBleak

_LOGGER = logging.getLogger(__name__)


class CraneScaleDataUpdateCoordinator(DataUpdateCoordinator[ScaleSessionData]):
    """Class to manage advertisement data from the Crane Scale."""

    def __init__(
        self,
        hass: HomeAssistant,
        address: str,
        device_name: str | None,
        config_entry: ConfigEntry,
    ) -> None:
        """Initialize."""
        self.address = address.upper()
        self.device_name = device_name or DEFAULT_DEVICE_NAME
        self._config_entry = config_entry
        self._bluetooth_callback_unload: CALLBACK_TYPE | None = None
        self._advertisements_seen = 0
        self._readings_decoded = 0
        self._payloads_rejected = 0
        self._last_advertisement: datetime | None = None

        super().__init__(
            hass,
            _LOGGER,
            name=DOMAIN,
            update_interval=None,
            config_entry=config_entry,
        )

        self.tracker = SessionTracker(self._schedule_tick)
        self._remove_tracker_listener = self.tracker.add_listener(self._on_session_update)
        self.data = self.tracker.snapshot()

    @property
    def is_scanning(self) -> bool:
        """Return True while listening for scale advertisements."""
        return self._bluetooth_callback_unload is not None

    @property
    def device_info(self) -> dict[str, Any]:
        """Return device information for all entities."""
        return {
            "identifiers": {(DOMAIN, self.address)},
            "name": self._config_entry.title or "Crane Scale",
            "manufacturer": "Crane Scale",
            "model": self.device_name,
            "connections": {("bluetooth", self.address.lower())},
        }

    @property
    def advertisement_stats(self) -> dict[str, Any]:
        """Return advertisement statistics for diagnostics."""
        return {
            "advertisements_seen": self._advertisements_seen,
            "readings_decoded": self._readings_decoded,
            "payloads_rejected": self._payloads_rejected,
            "last_advertisement": (
                self._last_advertisement.isoformat()
                if self._last_advertisement
                else None
            ),
        }

    async def _async_update_data(self) -> ScaleSessionData:
        """Return current data - all updates are reactive via advertisements."""
        return self.tracker.snapshot()

    @callback
    def _schedule_tick(self, tick: Callable[[], None]) -> CALLBACK_TYPE:
        """Run tick once per second until the returned function is called."""

        @callback
        def _async_tick(_now: datetime) -> None:
            tick()

        return async_track_time_interval(
            self.hass, _async_tick, timedelta(seconds=TICK_INTERVAL_SECONDS)
        )

    @callback
    def _on_session_update(self) -> None:
        """Publish the session snapshot to entities."""
        self.async_set_updated_data(self.tracker.snapshot())

    @callback
    def _async_handle_bluetooth_event(
        self,
        service_info: BluetoothServiceInfoBleak,
        change: bluetooth.BluetoothChange,
    ) -> None:
        """Handle Bluetooth events."""
        if change != bluetooth.BluetoothChange.ADVERTISEMENT:
            return

        if not matches_target(
            service_info.address, service_info.name, self.address, self.device_name
        ):
            return

        self._advertisements_seen += 1
        self._last_advertisement = datetime.now()

        manufacturer_data = service_info.manufacturer_data
        if not manufacturer_data:
            return

        _LOGGER.debug(
            "Advertisement from %s: %s",
            service_info.address,
            {company_id: bytes(data).hex() for company_id, data in manufacturer_data.items()},
        )

        reading = decode_manufacturer_data(manufacturer_data)
        if reading is None:
            self._payloads_rejected += 1
            return

        self._readings_decoded += 1
        self.tracker.on_reading(reading)

    @callback
    def async_start_scanning(self) -> None:
        """Start listening for advertisements from the scale."""
        if self.is_scanning:
            return

        _LOGGER.info(
            "Scanning for Crane Scale %s (%s)", self.address, self.device_name
        )
        self.tracker.clear_current_weight()
        # Name matches are not expressible as a single matcher, so filter here
        self._bluetooth_callback_unload = bluetooth.async_register_callback(
            self.hass,
            self._async_handle_bluetooth_event,
            None,
            bluetooth.BluetoothScanningMode.PASSIVE,
        )
        self.async_update_listeners()

    @callback
    def async_stop_scanning(self) -> None:
        """Stop listening for advertisements."""
        if self._bluetooth_callback_unload is None:
            return

        _LOGGER.info("Stopped scanning for Crane Scale %s", self.address)
        self._bluetooth_callback_unload()
        self._bluetooth_callback_unload = None
        self.async_update_listeners()

    @callback
    def async_reset_max_weight(self) -> None:
        """Reset the maximum weight."""
        _LOGGER.info("Resetting max weight (was %.2f kg)", self.tracker.session.max_weight)
        self.tracker.reset_max()

    @callback
    def async_set_threshold(self, value: str) -> None:
        """Set the timer threshold from operator input."""
        threshold = self.tracker.set_threshold(value)
        _LOGGER.debug("Threshold set to %.2f kg", threshold)

    @callback
    def async_set_upper_limit(self, value: str) -> None:
        """Set the meter upper limit from operator input."""
        upper_limit = self.tracker.set_upper_limit(value)
        _LOGGER.debug("Upper limit set to %.2f kg", upper_limit)

    async def async_shutdown(self) -> None:
        """Stop scanning and cancel the threshold timer."""
        self.async_stop_scanning()
        self._remove_tracker_listener()
        self.tracker.shutdown()
        await super().async_shutdown()
