"""Shared fixtures for Crane Scale tests."""
from __future__ import annotations

import pytest
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.crane_scale.const import CONF_NAME, DOMAIN
from homeassistant.const import CONF_ADDRESS
from homeassistant.core import HomeAssistant

from . import TEST_ADDRESS, TEST_NAME, FakeTicker

pytest_plugins = ["pytest_homeassistant_custom_component"]


@pytest.fixture
def ticker() -> FakeTicker:
    return FakeTicker()


@pytest.fixture
def mock_config_entry(hass: HomeAssistant) -> MockConfigEntry:
    """Return a config entry for the test scale."""
    entry = MockConfigEntry(
        domain=DOMAIN,
        title=TEST_NAME,
        data={CONF_ADDRESS: TEST_ADDRESS, CONF_NAME: TEST_NAME},
        unique_id=TEST_ADDRESS,
    )
    entry.add_to_hass(hass)
    return entry
