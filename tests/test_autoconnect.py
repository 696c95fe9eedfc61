import pytest

from gp100cc.autoconnect import (
    DEVICE_NAME,
    DeviceNotFoundError,
    auto_connect,
    find_device_port,
)

NAMES = [
    "Midi Through:Midi Through Port-0 14:0",
    "VALETON GP-100:VALETON GP-100 MIDI 1 24:0",
    "VALETON GP-100:VALETON GP-100 MIDI 2 24:1",
]


def test_find_device_port_returns_first_match():
    assert find_device_port(NAMES) == NAMES[1]


def test_find_device_port_custom_name():
    assert find_device_port(NAMES, "Midi Through") == NAMES[0]


def test_find_device_port_missing():
    with pytest.raises(DeviceNotFoundError):
        find_device_port(NAMES[:1])


def test_find_device_port_reports_missing(capsys):
    with pytest.raises(DeviceNotFoundError):
        find_device_port([], DEVICE_NAME)
    assert "Could not find output port" in capsys.readouterr().err


def test_auto_connect_opens_matching_port(capsys):
    opened = []

    def open_input(name):
        opened.append(name)
        return ("port", name)

    result = auto_connect(NAMES, open_input)
    assert result == ("port", NAMES[1])
    assert opened == [NAMES[1]]
    assert "Successfully connected" in capsys.readouterr().err


def test_auto_connect_missing_device_does_not_open():
    opened = []
    with pytest.raises(DeviceNotFoundError):
        auto_connect(NAMES[:1], opened.append)
    assert opened == []


def test_auto_connect_open_failure():
    def open_input(name):
        raise OSError("busy")

    with pytest.raises(ConnectionError):
        auto_connect(NAMES, open_input)