"""Tests for crane scale advertisement decoding."""
from __future__ import annotations

import pytest

from custom_components.crane_scale.decoder import (
    decode_manufacturer_data,
    decode_weight,
    matches_target,
)
from custom_components.crane_scale.models import WeightReading

from . import TEST_ADDRESS, TEST_NAME


def test_decodes_weight_before_marker() -> None:
    reading = decode_weight(bytes.fromhex("aabb00fa01f4cc"))

    assert reading == WeightReading(250)
    assert reading.kilograms == 2.5


@pytest.mark.parametrize(
    ("raw_value", "padding"),
    [
        (0, "ff"),
        (1, "1234"),
        (0x2710, "00"),
        (0xFFFF, "deadbeef"),
    ],
)
def test_decodes_any_16_bit_value(raw_value: int, padding: str) -> None:
    payload = bytes.fromhex(f"{padding}{raw_value:04x}01f4{padding}")

    reading = decode_weight(payload)

    assert reading is not None
    assert reading.raw_value == raw_value
    assert reading.kilograms == raw_value / 100


def test_full_scale_value() -> None:
    assert decode_weight(bytes.fromhex("ffff01f4")).kilograms == 655.35


def test_marker_matched_on_odd_nibble() -> None:
    # "1234501f40": marker starts at hex index 5
    reading = decode_weight(bytes.fromhex("1234501f40"))

    assert reading == WeightReading(0x2345)


def test_first_marker_wins() -> None:
    reading = decode_weight(bytes.fromhex("000a01f4" + "00ff01f4"))

    assert reading.kilograms == 0.1


@pytest.mark.parametrize(
    "payload",
    [
        b"",
        b"\x00",
        bytes.fromhex("00fa01f5"),
        bytes.fromhex("0102030405060708"),
        bytes.fromhex("f401f0"),
    ],
)
def test_no_marker_returns_none(payload: bytes) -> None:
    assert decode_weight(payload) is None


@pytest.mark.parametrize(
    "payload",
    [
        bytes.fromhex("01f4"),
        bytes.fromhex("01f40000"),
        bytes.fromhex("0a01f4"),
        bytes.fromhex("001f4000"),
    ],
)
def test_marker_without_weight_field_returns_none(payload: bytes) -> None:
    assert decode_weight(payload) is None


def test_accepts_bytearray() -> None:
    assert decode_weight(bytearray.fromhex("03e801f4")) == WeightReading(1000)


def test_manufacturer_data_newest_entry_wins() -> None:
    reading = decode_manufacturer_data(
        {0x0102: b"\x00\x0a\x01\xf4", 0x0304: b"\x00\xfa\x01\xf4"}
    )

    assert reading == WeightReading(250)


def test_manufacturer_data_skips_entries_without_weight() -> None:
    reading = decode_manufacturer_data({0x0102: b"\x00\xfa\x01\xf4", 0x0304: b"\xff"})

    assert reading == WeightReading(250)


def test_manufacturer_data_without_weight() -> None:
    assert decode_manufacturer_data({}) is None
    assert decode_manufacturer_data({0x0102: b"\xff", 0x0304: b"\x01\xf4"}) is None


def test_matches_on_address_or_name() -> None:
    assert matches_target(TEST_ADDRESS, None, TEST_ADDRESS, TEST_NAME)
    assert matches_target(TEST_ADDRESS.lower(), "other", TEST_ADDRESS, TEST_NAME)
    assert matches_target("AA:BB:CC:DD:EE:FF", TEST_NAME, TEST_ADDRESS, TEST_NAME)


def test_does_not_match_other_devices() -> None:
    assert not matches_target("AA:BB:CC:DD:EE:FF", "IF_B8", TEST_ADDRESS, TEST_NAME)
    assert not matches_target("AA:BB:CC:DD:EE:FF", None, TEST_ADDRESS, None)
    assert not matches_target("AA:BB:CC:DD:EE:FF", "", TEST_ADDRESS, "")
