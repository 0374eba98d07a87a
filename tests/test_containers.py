import pytest

from labkit.containers import Garland, PowerStrip
from labkit.devices import Candle, ElectricIron, ElectroFlashlight, LightBulb


def test_empty_strip_format():
    assert PowerStrip().format_connected() == "No devices connected. \n"


def test_strip_format_lists_in_order():
    strip = PowerStrip()
    strip.connect_device(ElectroFlashlight(False, False, "a"))
    strip.connect_device(ElectricIron(False, False, "b"))
    assert strip.format_connected() == "Connected devices:\n0. a\n1. b\n"
    assert len(strip) == 2


def test_strip_charges_all():
    devices = [ElectroFlashlight(False, False, "a"), ElectricIron(False, False, "b")]
    strip = PowerStrip()
    for device in devices:
        strip.connect_device(device)
    strip.charge_devices()
    assert all(device.charged for device in devices)


def test_strip_disconnect_keeps_charge_and_shifts():
    first = LightBulb(False, False, "a")
    second = LightBulb(False, False, "b")
    strip = PowerStrip()
    strip.connect_device(first)
    strip.connect_device(second)
    strip.charge_devices()
    strip.disconnect_device(0)
    assert strip.devices == (second,)
    assert first.charged is True


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_strip_disconnect_invalid(index):
    strip = PowerStrip()
    strip.connect_device(LightBulb(False, False, "a"))
    with pytest.raises(IndexError):
        strip.disconnect_device(index)
    assert len(strip) == 1


def test_garland_on_respects_charge():
    bulb = LightBulb(False, False, "bulb")
    candle = Candle(False, "candle")
    garland = Garland()
    garland.connect_device(bulb)
    garland.connect_device(candle)
    garland.turn_on()
    assert bulb.shines is False
    assert candle.shines is True
    garland.turn_off()
    assert candle.shines is False


def test_garland_disconnect_extinguishes():
    candle = Candle(True, "candle")
    garland = Garland()
    garland.connect_device(candle)
    garland.disconnect_device(0)
    assert candle.shines is False
    assert garland.format_connected() == "No devices connected. \n"


def test_garland_disconnect_invalid():
    garland = Garland()
    with pytest.raises(IndexError):
        garland.disconnect_device(0)


def test_garland_iterates_connected():
    lights = [Candle(False, "x"), Candle(False, "y")]
    garland = Garland()
    for light in lights:
        garland.connect_device(light)
    assert list(garland) == lights