"""Advertisement decoding for the crane scale."""
from __future__ import annotations

from collections.abc import Mapping
import logging

from .const import WEIGHT_HEX_LENGTH, WEIGHT_MARKER
from .models import WeightReading

_LOGGER = logging.getLogger(__name__)


def decode_manufacturer_data(manufacturer_data: Mapping[int, bytes]) -> WeightReading | None:
    """Decode the weight from all manufacturer data of an advertisement.

    Home Assistant merges manufacturer data across advertisements with the
    most recently changed entry last, so entries are tried newest first and
    the first one carrying a weight wins.
    """
    for payload in reversed(list(manufacturer_data.values())):
        if (reading := decode_weight(bytes(payload))) is not None:
            return reading
    return None


def matches_target(
    address: str | None,
    name: str | None,
    target_address: str | None,
    target_name: str | None,
) -> bool:
    """Check if an advertisement comes from the configured scale.

    Either the address or the advertised name is enough to match.
    """
    if address and target_address and address.upper() == target_address.upper():
        return True
    return bool(name and target_name and name == target_name)


def decode_weight(payload: bytes) -> WeightReading | None:
    """Decode the weight from crane scale manufacturer data.

    The payload is rendered as lowercase hex and the 4 hex characters in
    front of the first "01f4" marker hold the weight as a big-endian 16-bit
    value in 1/100 kg.
    """
    hex_string = payload.hex()

    marker_index = hex_string.find(WEIGHT_MARKER)
    if marker_index == -1:
        return None

    if marker_index < WEIGHT_HEX_LENGTH:
        _LOGGER.debug(
            "Weight marker at index %d leaves no room for weight field: %s",
            marker_index,
            hex_string,
        )
        return None

    weight_hex = hex_string[marker_index - WEIGHT_HEX_LENGTH:marker_index]
    try:
        raw_value = int(weight_hex, 16)
    except ValueError:
        _LOGGER.debug("Invalid weight field %r in payload %s", weight_hex, hex_string)
        return None

    reading = WeightReading(raw_value)
    _LOGGER.debug(
        "Decoded weight: raw=0x%s (%d) -> %.2f kg", weight_hex, raw_value, reading.kilograms
    )
    return reading
