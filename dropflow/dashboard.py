"""Operator dashboard state: inlet pressure requests and per-channel switches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

FloatCallback = Callable[[list[float]], None]
BoolCallback = Callable[[list[bool]], None]


@dataclass
class Inlet:
    """One pump inlet control, limited to the range 0..limit."""

    pump_id: int
    transducer_id: int
    limit: int
    value: int = 0

    @property
    def label(self) -> str:
        return f"P{self.pump_id} T{self.transducer_id}"

    def clamp(self, value: float) -> int:
        return max(0, min(self.limit, int(value)))


class _CheckGroup:
    """A row of numbered check boxes reporting their states on every click."""

    def __init__(self, callback: BoolCallback | None) -> None:
        self._callback = callback
        self.checked: list[bool] = []

    @property
    def labels(self) -> list[str]:
        return [str(i) for i in range(len(self.checked))]

    def reset(self, count: int) -> None:
        if count < 0:
            raise ValueError("number of channels must not be negative")
        self.checked = [False] * count
        self.emit()

    def set(self, index: int, checked: bool) -> None:
        if not 0 <= index < len(self.checked):
            raise IndexError(f"no check box {index}")
        self.checked[index] = bool(checked)
        self.emit()

    def emit(self) -> None:
        if self._callback is not None:
            self._callback(list(self.checked))


class Dashboard:
    """Inlet requests and channel switches, reported through callbacks."""

    def __init__(
        self,
        on_inlet_requests: FloatCallback | None = None,
        on_auto_catch_requests: BoolCallback | None = None,
        on_use_neck_requests: BoolCallback | None = None,
        on_neck_direction_requests: BoolCallback | None = None,
    ) -> None:
        self._on_inlet_requests = on_inlet_requests
        self.inlets: list[Inlet] = []
        self._auto_catch = _CheckGroup(on_auto_catch_requests)
        self._use_neck = _CheckGroup(on_use_neck_requests)
        self._neck_direction = _CheckGroup(on_neck_direction_requests)

    @property
    def inlet_values(self) -> list[float]:
        return [float(inlet.value) for inlet in self.inlets]

    @property
    def auto_catch(self) -> list[bool]:
        return list(self._auto_catch.checked)

    @property
    def use_neck(self) -> list[bool]:
        return list(self._use_neck.checked)

    @property
    def neck_direction(self) -> list[bool]:
        return list(self._neck_direction.checked)

    def _request_inlets(self) -> None:
        if self._on_inlet_requests is not None:
            self._on_inlet_requests(self.inlet_values)

    def reset_inlets(self, inlet_info: Sequence[Sequence[int]]) -> None:
        """Replace the inlets; each entry is (pump, transducer, order, limit)."""
        self.inlets = [Inlet(info[0], info[1], info[3]) for info in inlet_info]
        self._request_inlets()

    def reset_auto_catch(self, num_channel: int) -> None:
        self._auto_catch.reset(num_channel)

    def reset_use_neck(self, num_channel: int) -> None:
        self._use_neck.reset(num_channel)

    def reset_neck_direction(self, num_channel: int) -> None:
        self._neck_direction.reset(num_channel)

    def set_inlet(self, index: int, value: float) -> None:
        """Move one inlet control; a change reports all inlet values."""
        if not 0 <= index < len(self.inlets):
            raise IndexError(f"no inlet {index}")
        inlet = self.inlets[index]
        new_value = inlet.clamp(value)
        if new_value != inlet.value:
            inlet.value = new_value
            self._request_inlets()

    def regurgitate_inlets(self, values: Sequence[float]) -> None:
        """Show values handed back by the controller on the inlet controls."""
        for index, value in zip(range(len(self.inlets)), values):
            self.set_inlet(index, value)

    def zero_inlets(self) -> None:
        for index in range(len(self.inlets)):
            self.set_inlet(index, 0)

    def set_auto_catch(self, index: int, checked: bool) -> None:
        self._auto_catch.set(index, checked)

    def set_use_neck(self, index: int, checked: bool) -> None:
        self._use_neck.set(index, checked)

    def set_neck_direction(self, index: int, checked: bool) -> None:
        self._neck_direction.set(index, checked)