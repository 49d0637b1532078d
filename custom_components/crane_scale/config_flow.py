"""Config flow for Crane Scale integration."""
from __future__ import annotations

import logging
from typing import Any

from bleak import BleakScanner
import voluptuous as vol

from homeassistant import config_entries
from homeassistant.components import bluetooth
from homeassistant.const import CONF_ADDRESS
from homeassistant.data_entry_flow import FlowResult

from .const import CONF_NAME, DEFAULT_DEVICE_NAME, DOMAIN

_LOGGER = logging.getLogger(__name__)


def format_address(address: str) -> str:
    """Normalize a MAC address to AA:BB:CC:DD:EE:FF."""
    compact = address.upper().replace(":", "").replace("-", "")
    if len(compact) == 12:
        return ":".join(compact[i:i + 2] for i in range(0, 12, 2))
    return address.upper()


class CraneScaleConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Crane Scale."""

    VERSION = 1
    MINOR_VERSION = 1

    def __init__(self) -> None:
        """Initialize the config flow."""
        self._discovered_devices: dict[str, str] = {}
        self._discovered_names: dict[str, str] = {}
        self._discovery_info: bluetooth.BluetoothServiceInfoBleak | None = None

    async def async_step_bluetooth(
        self, discovery_info: bluetooth.BluetoothServiceInfoBleak
    ) -> FlowResult:
        """Handle the bluetooth discovery step."""
        if not self._is_supported_device(discovery_info.name):
            return self.async_abort(reason="not_supported")

        await self.async_set_unique_id(discovery_info.address.upper())
        self._abort_if_unique_id_configured()

        device_name = discovery_info.name or discovery_info.address
        self.context["title_placeholders"] = {"name": device_name}
        self._discovery_info = discovery_info

        return await self.async_step_bluetooth_confirm()

    async def async_step_bluetooth_confirm(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Confirm discovery."""
        assert self._discovery_info is not None

        if user_input is not None:
            return self.async_create_entry(
                title=self._discovery_info.name or self._discovery_info.address,
                data={
                    CONF_ADDRESS: self._discovery_info.address.upper(),
                    CONF_NAME: self._discovery_info.name or DEFAULT_DEVICE_NAME,
                },
            )

        self._set_confirm_only()
        return self.async_show_form(
            step_id="bluetooth_confirm",
            description_placeholders={
                "name": self._discovery_info.name or self._discovery_info.address
            },
        )

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Handle the initial step."""
        errors: dict[str, str] = {}

        if user_input is not None:
            address = user_input[CONF_ADDRESS]

            if address == "manual":
                return await self.async_step_manual()

            address = address.upper()
            await self.async_set_unique_id(address)
            self._abort_if_unique_id_configured()

            # Scale only advertises, it never needs to be connectable
            service_info = bluetooth.async_last_service_info(
                self.hass, address, connectable=False
            )

            if not service_info and address not in self._discovered_names:
                errors[CONF_ADDRESS] = "cannot_connect"
            else:
                name = self._discovered_names.get(address) or (
                    service_info.name if service_info else None
                )
                return self.async_create_entry(
                    title=name or address,
                    data={CONF_ADDRESS: address, CONF_NAME: name or DEFAULT_DEVICE_NAME},
                )

        await self._async_discover_scales()

        data_schema = vol.Schema({
            vol.Required(CONF_ADDRESS): vol.In(self._discovered_devices)
        })

        return self.async_show_form(
            step_id="user",
            data_schema=data_schema,
            errors=errors,
        )

    async def _async_discover_scales(self) -> None:
        """Discover crane scales."""
        self._discovered_devices = {}
        self._discovered_names = {}

        try:
            for service_info in bluetooth.async_discovered_service_info(
                self.hass, connectable=False
            ):
                self._add_discovered(service_info.name, service_info.address)

            # Fall back to an active scan when Home Assistant has not seen one yet
            if not self._discovered_devices:
                devices = await BleakScanner.discover(timeout=10.0)
                for device in devices:
                    self._add_discovered(device.name, device.address)

        except Exception:
            _LOGGER.exception("Error discovering scales")

        self._discovered_devices["manual"] = "Enter address manually"

    def _add_discovered(self, name: str | None, address: str) -> None:
        if not self._is_supported_device(name):
            return
        address = address.upper()
        self._discovered_names[address] = name
        self._discovered_devices[address] = f"{name} ({address})"

    def _is_supported_device(self, name: str | None) -> bool:
        """Check if this is a supported crane scale."""
        return bool(name) and name == DEFAULT_DEVICE_NAME

    async def async_step_manual(
        self, user_input: dict[str, Any] | None = None
    ) -> FlowResult:
        """Handle manual address entry."""
        errors: dict[str, str] = {}

        if user_input is not None:
            formatted_address = format_address(user_input[CONF_ADDRESS])

            await self.async_set_unique_id(formatted_address)
            self._abort_if_unique_id_configured()

            return self.async_create_entry(
                title=formatted_address,
                data={
                    CONF_ADDRESS: formatted_address,
                    CONF_NAME: user_input.get(CONF_NAME) or DEFAULT_DEVICE_NAME,
                },
            )

        return self.async_show_form(
            step_id="manual",
            data_schema=vol.Schema({
                vol.Required(CONF_ADDRESS): str,
                vol.Optional(CONF_NAME, default=DEFAULT_DEVICE_NAME): str,
            }),
            errors=errors,
        )
