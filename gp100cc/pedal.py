"""Decoding of the GP-100 expression pedal position from its SysEx reports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

SYSEX_LENGTH = 34
"""Length in bytes, F0 and F7 included, of a pedal position report."""

DATA_OFFSET = 25
"""Offset of the eight nibbles that encode the pedal position."""

NIBBLE_COUNT = 8

RECORDED_PEDAL_VALUES: tuple[int, ...] = (
    0x00000000,
    0xC7C6C63F,
    0x15159540,
    0x72720241,
    0x5A5A3A41,
    0x0C0C6C41,
    0xFAF99141,
    0xEEEDAD41,
    0xC7C6C641,
    0xBBBAE241,
    0xAFAEFE41,
    0xC4C30B42,
    0xBEBD1942,
    0xB8B72742,
    0x24243442,
    0x1E1E4242,
    0x8B8A4E42,
    0x85845C42,
    0x7E7E6A42,
    0xEBEA7642,
    0x72728242,
    0x6F6F8942,
    0xA6A58F42,
    0xA3A29642,
    0xA09F9D42,
    0xD6D5A342,
    0xD3D2AA42,
    0xD0CFB142,
    0x0606B842,
    0x0303BF42,
    0x3939C542,
)
"""Pedal values reported by the device, from heel down to toe down."""


class UnknownPedalPosition(LookupError):
    """Raised when a reported pedal value is not one of the recorded ones."""

    def __init__(self, pedal_value: int) -> None:
        super().__init__(f"Unknow position {pedal_value:x}")
        self.pedal_value = pedal_value


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def fill_controller_values(start: int, end: int, count: int) -> list[int]:
    """Spread ``count`` integer values evenly from ``start`` to ``end``."""
    if count < 2:
        raise ValueError("count must be at least 2")
    return [start + _trunc_div(i * (end - start), count - 1) for i in range(count)]


CONTROLLER_VALUES: tuple[int, ...] = tuple(
    fill_controller_values(0, 127, len(RECORDED_PEDAL_VALUES))
)
"""Controller value (0-127) sent for each recorded pedal position."""


def find_recorded_value_index(pedal_value: int) -> int:
    """Return the position index of ``pedal_value`` among the recorded values."""
    try:
        return RECORDED_PEDAL_VALUES.index(pedal_value)
    except ValueError:
        raise UnknownPedalPosition(pedal_value) from None


def nibbles_to_int(data: Sequence[int]) -> int:
    """Combine the first eight bytes of ``data``, four bits each, into an integer."""
    if len(data) < NIBBLE_COUNT:
        raise ValueError(f"need {NIBBLE_COUNT} bytes, got {len(data)}")
    value = 0
    for byte in data[:NIBBLE_COUNT]:
        value = (value << 4) | byte
    return value


def format_sysex(data: Iterable[int]) -> str:
    """Render bytes as lower-case hex pairs, each followed by a space."""
    return "".join(f"{byte:02x} " for byte in data)


def pedal_value_from_sysex(data: Sequence[int]) -> int | None:
    """Return the pedal value of a full SysEx report, or None if it is not one."""
    if len(data) != SYSEX_LENGTH:
        return None
    return nibbles_to_int(data[DATA_OFFSET:DATA_OFFSET + NIBBLE_COUNT])


def controller_value_for_sysex(data: Sequence[int]) -> tuple[int, int, int] | None:
    """Decode a SysEx report into ``(pedal_value, index, controller_value)``.

    Returns None when the message is not a pedal report and raises
    UnknownPedalPosition when the reported value is not a recorded one.
    """
    pedal_value = pedal_value_from_sysex(data)
    if pedal_value is None:
        return None
    index = find_recorded_value_index(pedal_value)
    return pedal_value, index, CONTROLLER_VALUES[index]