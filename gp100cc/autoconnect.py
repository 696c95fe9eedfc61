"""Locating the GP-100 among the MIDI input ports and opening it."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from typing import Any

import mido

DEVICE_NAME = "VALETON GP-100"


class DeviceNotFoundError(LookupError):
    """Raised when no port of the wanted device is present."""


def find_device_port(port_names: Iterable[str], device_name: str = DEVICE_NAME) -> str:
    """Return the first port name that contains ``device_name``."""
    for name in port_names:
        if device_name in name:
            print(f"Found at port '{name}'", file=sys.stderr)
            return name
    print("Could not find output port", file=sys.stderr)
    raise DeviceNotFoundError(f"no port found for {device_name!r}")


def auto_connect(
    port_names: Iterable[str] | None = None,
    open_input: Callable[[str], Any] | None = None,
    device_name: str = DEVICE_NAME,
) -> Any:
    """Open the device's output as an input port and return it.

    ``port_names`` defaults to the available MIDI inputs and ``open_input``
    to opening one of them.
    """
    if port_names is None:
        port_names = mido.get_input_names()
    if open_input is None:
        open_input = mido.open_input
    name = find_device_port(port_names, device_name)
    print(f"Connecting to '{name}'", file=sys.stderr)
    try:
        port = open_input(name)
    except OSError as exc:
        print(f"Connection failed: {exc}", file=sys.stderr)
        raise ConnectionError(f"could not open {name!r}: {exc}") from exc
    print("Successfully connected", file=sys.stderr)
    return port