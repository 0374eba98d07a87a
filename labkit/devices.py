"""Household devices: electric appliances and light sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = [
    "ElectroDevice",
    "LightSource",
    "Candle",
    "KeroseneLamp",
    "Flashlight",
    "ElectroFlashlight",
    "LightBulb",
    "ElectricIron",
]


class ElectroDevice(ABC):
    """Something that can be plugged in and charged."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the device."""

    @property
    @abstractmethod
    def charged(self) -> bool:
        """Whether the device holds a charge."""

    @charged.setter
    @abstractmethod
    def charged(self, value: bool) -> None:
        """Charge or discharge the device."""


class LightSource(ABC):
    """Something that can shine."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the light source."""

    @property
    @abstractmethod
    def shines(self) -> bool:
        """Whether the light source is lit."""

    @shines.setter
    @abstractmethod
    def shines(self, value: bool) -> None:
        """Light or extinguish the light source."""


class _PlainLight(LightSource):
    """A light source that needs no power to be lit."""

    def __init__(self, shines: bool, name: str) -> None:
        self._shines = bool(shines)
        self._name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shines={self._shines!r}, name={self._name!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def shines(self) -> bool:
        return self._shines

    @shines.setter
    def shines(self, value: bool) -> None:
        self._shines = bool(value)


class Candle(_PlainLight):
    """A candle."""

    def __init__(self, shines: bool, name: str) -> None:
        super().__init__(shines, name)


class KeroseneLamp(_PlainLight):
    """A kerosene lamp."""

    def __init__(self, shines: bool, name: str) -> None:
        super().__init__(shines, name)


class Flashlight(_PlainLight):
    """A battery-less flashlight that lights whenever asked."""

    def __init__(self, shines: bool, name: str) -> None:
        super().__init__(shines, name)


class _ElectricLight(ElectroDevice, LightSource):
    """A light source that only lights up while charged."""

    def __init__(self, charged: bool, shines: bool, name: str) -> None:
        self._charged = bool(charged)
        self._shines = bool(shines)
        self._name = name

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(charged={self._charged!r}, "
            f"shines={self._shines!r}, name={self._name!r})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def charged(self) -> bool:
        return self._charged

    @charged.setter
    def charged(self, value: bool) -> None:
        self._charged = bool(value)

    @property
    def shines(self) -> bool:
        return self._shines

    @shines.setter
    def shines(self, value: bool) -> None:
        # Switching on is ignored without charge; switching off always works.
        if value and not self._charged:
            return
        self._shines = bool(value)


class ElectroFlashlight(_ElectricLight):
    """A rechargeable flashlight."""

    def __init__(self, charged: bool, shines: bool, name: str) -> None:
        super().__init__(charged, shines, name)


class LightBulb(_ElectricLight):
    """An electric light bulb."""

    def __init__(self, charged: bool, shines: bool, name: str) -> None:
        super().__init__(charged, shines, name)


class ElectricIron(ElectroDevice):
    """An electric iron."""

    def __init__(self, charged: bool, works: bool, name: str) -> None:
        self._charged = bool(charged)
        self._works = bool(works)
        self._name = name

    def __repr__(self) -> str:
        return (
            f"ElectricIron(charged={self._charged!r}, "
            f"works={self._works!r}, name={self._name!r})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def charged(self) -> bool:
        return self._charged

    @charged.setter
    def charged(self, value: bool) -> None:
        self._charged = bool(value)

    @property
    def works(self) -> bool:
        return self._works

    @works.setter
    def works(self, value: bool) -> None:
        # Switching the iron on also leaves it charged.
        if value:
            self._charged = True
        self._works = bool(value)