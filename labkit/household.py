"""Demonstration of power strips and garlands with household devices."""

from __future__ import annotations

import sys
from typing import Sequence

from labkit.containers import Garland, PowerStrip
from labkit.devices import (
    Candle,
    ElectricIron,
    ElectroFlashlight,
    Flashlight,
    KeroseneLamp,
    LightBulb,
)

__all__ = ["run_demo", "main"]


def _flag(value: bool) -> str:
    return f"{int(value)}\n"


def run_demo() -> str:
    """Run the household scenario and return everything it reports."""
    out: list[str] = []
    strip = PowerStrip()
    garland = Garland()

    electro_flashlight = ElectroFlashlight(False, False, "electro Fonarik")
    bulb = LightBulb(False, False, "Lampochka")
    iron = ElectricIron(False, False, "Ytug")
    kerosene_lamp = KeroseneLamp(False, "Kerosinovay lampa")
    candle = Candle(False, "Svechka")
    flashlight = Flashlight(False, "Fonarik")

    electric = (electro_flashlight, bulb, iron)
    lights = (electro_flashlight, bulb, kerosene_lamp, candle, flashlight)

    def report_charge() -> None:
        out.extend(_flag(device.charged) for device in electric)

    def report_shine() -> None:
        out.extend(_flag(light.shines) for light in lights)

    for device in (electro_flashlight, iron, bulb):
        strip.connect_device(device)
    out.append(strip.format_connected())
    report_charge()
    strip.charge_devices()
    report_charge()
    while len(strip):
        strip.disconnect_device(0)
    out.append(strip.format_connected())
    report_charge()

    for light in lights:
        garland.connect_device(light)
    out.append(garland.format_connected())
    report_shine()
    garland.turn_on()
    report_shine()
    garland.turn_off()
    report_shine()
    while len(garland):
        garland.disconnect_device(0)
    out.append(garland.format_connected())
    report_shine()

    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the household demonstration."""
    sys.stdout.write(run_demo())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())