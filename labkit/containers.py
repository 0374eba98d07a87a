"""Containers that hold devices: a power strip and a garland."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from labkit.devices import ElectroDevice, LightSource

__all__ = ["PowerStrip", "Garland"]

_T = TypeVar("_T")


class _DeviceList(Generic[_T]):
    """An ordered list of connected devices."""

    def __init__(self) -> None:
        self._devices: list[_T] = []

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[_T]:
        return iter(self._devices)

    @property
    def devices(self) -> tuple[_T, ...]:
        return tuple(self._devices)

    def _append(self, device: _T) -> None:
        self._devices.append(device)

    def _remove(self, index: int) -> _T:
        if not 0 <= index < len(self._devices):
            raise IndexError("Invalid index")
        return self._devices.pop(index)

    def _describe(self) -> str:
        if not self._devices:
            return "No devices connected. \n"
        lines = ["Connected devices:\n"]
        lines.extend(f"{i}. {device.name}\n" for i, device in enumerate(self._devices))
        return "".join(lines)


class PowerStrip(_DeviceList[ElectroDevice]):
    """A power strip that charges the electric devices plugged into it."""

    def connect_device(self, device: ElectroDevice) -> None:
        """Plug a device in at the end of the strip."""
        self._append(device)

    def disconnect_device(self, index: int) -> None:
        """Unplug the device at index; raise IndexError if there is none."""
        self._remove(index)

    def format_connected(self) -> str:
        """Describe the connected devices, one numbered line each."""
        return self._describe()

    def charge_devices(self) -> None:
        """Charge every connected device."""
        for device in self._devices:
            device.charged = True


class Garland(_DeviceList[LightSource]):
    """A garland of light sources switched on and off together."""

    def connect_device(self, device: LightSource) -> None:
        """Add a light to the end of the garland."""
        self._append(device)

    def disconnect_device(self, index: int) -> None:
        """Extinguish and remove the light at index; raise IndexError if there is none."""
        device = self._remove(index)
        device.shines = False

    def format_connected(self) -> str:
        """Describe the connected lights, one numbered line each."""
        return self._describe()

    def turn_on(self) -> None:
        """Ask every light to shine."""
        for device in self._devices:
            device.shines = True

    def turn_off(self) -> None:
        """Extinguish every light."""
        for device in self._devices:
            device.shines = False