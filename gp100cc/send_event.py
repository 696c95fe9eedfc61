"""Building and sending note and control change messages."""

from __future__ import annotations

import sys
from typing import Protocol

import mido


class OutputPort(Protocol):
    def send(self, message: mido.Message) -> None: ...


def note_message(channel: int, note: int, velocity: int, note_on: bool) -> mido.Message:
    """Return a note-on or note-off message."""
    kind = "note_on" if note_on else "note_off"
    return mido.Message(kind, channel=channel, note=note, velocity=velocity)


def control_message(channel: int, param: int, value: int) -> mido.Message:
    """Return a control change message."""
    return mido.Message("control_change", channel=channel, control=param, value=value)


def send_note(port: OutputPort, channel: int, note: int, velocity: int, note_on: bool) -> None:
    """Send a note message on ``port``; send failures are ignored."""
    try:
        port.send(note_message(channel, note, velocity, note_on))
    except OSError:
        pass


def send_control(port: OutputPort, channel: int, param: int, value: int) -> None:
    """Send a control change on ``port``, reporting send failures on stderr."""
    try:
        port.send(control_message(channel, param, value))
    except OSError as exc:
        print(f"Error sending control change event: {exc}", file=sys.stderr)