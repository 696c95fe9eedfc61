"""Map VALETON GP-100 expression pedal SysEx to MIDI control changes."""

__version__ = "0.1.0"
__all__ = ["__version__"]