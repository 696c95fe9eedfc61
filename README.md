# gp100cc

The VALETON GP-100 reports the position of its expression pedal as SysEx
messages rather than as a MIDI control change. `gp100cc` listens for those
messages, works out the pedal position and sends a standard control change
with a value from 0 to 127, so that a synthesizer or DAW can use the pedal.

## Installation

```
pip install .
```

`gp100cc` uses `mido`, which needs a MIDI backend such as `python-rtmidi`.
The command opens virtual ports, so the backend must support them.

## Usage

```
gp100cc [--channel|-c N] [--param|-p N] [--autoconnect|-a]
```

- `--channel`, `-c`: MIDI channel of the control change that is sent (default `0`).
- `--param`, `-p`: controller number that is sent (default `15`).
- `--autoconnect`, `-a`: open the first MIDI input whose name contains
  `VALETON GP-100` and listen on it. If no such port is found or it cannot
  be opened, a virtual input port named `source` is opened instead.
- `--help`, `-h`: print the usage line and exit with status 1.

Without `--autoconnect`, the command listens on a virtual input port named
`source`. It always sends on a virtual output port named `output`; both
belong to the client `MIDI Mapper`. Connect the GP-100 to `source` (unless
autoconnected) and `output` to your synth or DAW.

Only SysEx messages of 34 bytes are treated as pedal reports; everything
else is ignored. Each mapped report is logged on standard error as
`<raw value in hex> -> <index> -> <controller value>`; a report with an
unknown position is logged as `Unknow position <raw value in hex>` and
nothing is sent. The command runs until its input ends or it is interrupted.

## Library use

The mapping can be used without any MIDI ports:

```python
from gp100cc.pedal import controller_value_for_sysex, UnknownPedalPosition
from gp100cc.send_event import control_message

decoded = controller_value_for_sysex(sysex_bytes)  # F0 ... F7, 34 bytes
if decoded is not None:
    pedal_value, index, value = decoded
    msg = control_message(channel=0, param=15, value=value)
```

`controller_value_for_sysex` returns `None` when the bytes are not 34 long,
and raises `UnknownPedalPosition` when the pedal value is not one of the
31 recorded positions. Other helpers in `gp100cc.pedal`:
`pedal_value_from_sysex`, `find_recorded_value_index`, `nibbles_to_int`,
`fill_controller_values` and `format_sysex`.

`gp100cc.send_event` also provides `note_message`, and `send_note` and
`send_control`, which send on any object with a `send` method.
`gp100cc.autoconnect` provides `find_device_port` and `auto_connect`, which
raise `DeviceNotFoundError` when no matching port exists.
`gp100cc.cli.MidiMapper` does the mapping for the command and can be given
any output port and any iterable of `mido` messages.

## Tests

```
pip install .[test]
pytest
```