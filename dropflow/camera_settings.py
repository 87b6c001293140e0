"""Camera feature settings kept as typed tables and as one flat string table."""

from __future__ import annotations

from dataclasses import dataclass, field

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _default_bools() -> dict[str, bool]:
    return {
        "Overlap": False,  # link frame rate to exposure
        "StaticBlemishCorrection": True,  # noisy pixel correction
        "FastAOIFrameRateEnable": True,  # higher frame rate for small AOI
        "FullAOIControl": True,  # arbitrary AOI selection
        "SensorCooling": True,
        "MetadataEnable": False,
        "MetadataTimestamp": False,
        "MetadataFrameinfo": False,
    }


def _default_ints() -> dict[str, int]:
    return {
        "FrameCount": 1,  # images acquired in each sequence
        "Accumulatecount": 1,  # images summed as one
        "ImageSizeBytes": 0,
        "TimeStampClock": 0,
        "TimeStampClockFrequency": 0,
    }


def _default_floats() -> dict[str, float]:
    return {
        "ExposureTime": 0.004,  # seconds
        "FrameRate": 40.0,  # Hz
        "ReadoutTime": 0.0,
        "RowReadTime": 0.0,
        "LineScanSpeed": 0.0,
        "TargetSensorTemperature": 0.0,
        "SensorTemperature": 0.0,
    }


def _default_enums() -> dict[str, str]:
    return {
        "TriggerMode": "Internal",
        "CycleMode": "Continuous",
        "ElectronicShutteringMode": "Rolling",
        "PixelReadoutRate": "280 MHz",
        "TemperatureStatus": "Stabilized",
        "AOIBinning": "2x2",
        "SimplePreAmpGainControl": "16-bit (low noise & high well capacity)",
        "PixelEncoding": "Mono16",
        "BitDepth": "16 Bit",
    }


def _parse_int(text: str) -> int:
    """Parse a 32-bit integer; anything unparsable or out of range gives 0."""
    try:
        value = int(text.strip())
    except ValueError:
        return 0
    if value < _INT32_MIN or value > _INT32_MAX:
        return 0
    return value


def _parse_float(text: str) -> float:
    """Parse a floating point number; anything unparsable gives 0.0."""
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _format_float(value: float) -> str:
    return f"{value:g}"


@dataclass
class CameraSettings:
    """Typed camera features plus a flat, key-sorted table of their text forms.

    ``flat`` is what a user edits; :meth:`expand` reads it back into the typed
    tables and :meth:`collapse` rebuilds it from them.
    """

    bools: dict[str, bool] = field(default_factory=_default_bools)
    ints: dict[str, int] = field(default_factory=_default_ints)
    floats: dict[str, float] = field(default_factory=_default_floats)
    enums: dict[str, str] = field(default_factory=_default_enums)
    flat: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.collapse()

    def collapse(self) -> dict[str, str]:
        """Rebuild ``flat`` from the typed tables and return it."""
        entries: dict[str, str] = {}
        entries.update((k, str(int(v))) for k, v in self.bools.items())
        entries.update((k, str(v)) for k, v in self.ints.items())
        entries.update((k, _format_float(v)) for k, v in self.floats.items())
        entries.update(self.enums)
        self.flat = dict(sorted(entries.items()))
        return self.flat

    def expand(self) -> None:
        """Copy values present in ``flat`` back into the typed tables.

        Keys of ``flat`` that name no known feature are ignored; text that does
        not parse as a number becomes zero.
        """
        flat = self.flat
        for key in self.bools.keys() & flat.keys():
            self.bools[key] = bool(_parse_int(flat[key]))
        for key in self.ints.keys() & flat.keys():
            self.ints[key] = _parse_int(flat[key])
        for key in self.floats.keys() & flat.keys():
            self.floats[key] = _parse_float(flat[key])
        for key in self.enums.keys() & flat.keys():
            self.enums[key] = flat[key]

    def describe(self) -> str:
        """Text listing of every typed table, one ``name = value`` per line."""
        sections = [
            [f"{k} = {int(v)}" for k, v in self.bools.items()],
            [f"{k} = {v}" for k, v in self.ints.items()],
            [f"{k} = {_format_float(v)}" for k, v in self.floats.items()],
            [f"{k} = {v}" for k, v in self.enums.items()],
        ]
        return "".join("".join(line + "\n" for line in lines) + "\n" for lines in sections)