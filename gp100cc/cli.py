"""Command line entry point: turn GP-100 pedal reports into control changes."""

from __future__ import annotations

import getopt
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

import mido

from .autoconnect import DeviceNotFoundError, auto_connect
from .pedal import UnknownPedalPosition, controller_value_for_sysex
from .send_event import OutputPort, send_control

PROG = "gp100cc"
CLIENT_NAME = "MIDI Mapper"
DEFAULT_CHANNEL = 0
DEFAULT_PARAM = 15

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class Options:
    """Settings taken from the command line."""

    channel: int = DEFAULT_CHANNEL
    param: int = DEFAULT_PARAM
    autoconnect: bool = False


def _usage() -> str:
    return f"Usage: {PROG} [--channel|-c N] [--param|-p N] [--autoconnect|-a]"


def parse_arguments(argv: Sequence[str] | None = None) -> Options:
    """Parse command line arguments; raise SystemExit(1) on error or help."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        opts, _ = getopt.gnu_getopt(
            list(argv), "c:p:ah", ["channel=", "param=", "autoconnect", "help"]
        )
    except getopt.GetoptError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        raise SystemExit(1) from None

    channel = DEFAULT_CHANNEL
    param = DEFAULT_PARAM
    autoconnect = False
    for flag, value in opts:
        if flag in ("-c", "--channel"):
            channel = _atoi(value)
        elif flag in ("-p", "--param"):
            param = _atoi(value)
        elif flag in ("-a", "--autoconnect"):
            autoconnect = True
        else:
            print(_usage(), file=sys.stderr)
            raise SystemExit(1)

    print(f"Outputs control change param {param} on channel {channel}", file=sys.stderr)
    return Options(channel=channel, param=param, autoconnect=autoconnect)


class MidiMapper:
    """Maps pedal position reports to control changes on an output port."""

    def __init__(self, output: OutputPort, channel: int = DEFAULT_CHANNEL,
                 param: int = DEFAULT_PARAM) -> None:
        self.output = output
        self.channel = channel
        self.param = param

    def handle(self, message: mido.Message) -> bool:
        """Process one incoming message; return whether to keep listening."""
        if message.type != "sysex":
            return True
        try:
            decoded = controller_value_for_sysex(message.bytes())
        except UnknownPedalPosition as exc:
            print(str(exc), file=sys.stderr)
            return True
        if decoded is not None:
            pedal_value, index, value = decoded
            print(f"{pedal_value:x} -> {index} -> {value} ", file=sys.stderr)
            send_control(self.output, self.channel, self.param, value)
        return True

    def run(self, messages: Iterable[mido.Message]) -> None:
        """Handle messages until they run out or one asks to stop."""
        for message in messages:
            if not self.handle(message):
                break
        print("bye", file=sys.stderr)


def _open_input(autoconnect: bool) -> Any:
    if autoconnect:
        try:
            return auto_connect()
        except (DeviceNotFoundError, ConnectionError):
            pass
    return mido.open_input("source", virtual=True, client_name=CLIENT_NAME)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the mapper; return the process exit status."""
    options = parse_arguments(argv)
    try:
        output = mido.open_output("output", virtual=True, client_name=CLIENT_NAME)
    except OSError as exc:
        print(f"Error creating output port: {exc}", file=sys.stderr)
        return 1
    with output:
        try:
            input_port = _open_input(options.autoconnect)
        except OSError as exc:
            print(f"Error creating input source port: {exc}", file=sys.stderr)
            return 1
        with input_port:
            print("Listening for MIDI events...", file=sys.stderr)
            MidiMapper(output, options.channel, options.param).run(input_port)
    return 0


if __name__ == "__main__":
    sys.exit(main())