# labkit

Three small teaching exercises in one package. It has no dependencies beyond the standard library.

## Household devices

`labkit.devices` models household items. Each item has one or both of two roles:

- `ElectroDevice` has a read-only `name` and a `charged` property that can be set. It is implemented by `ElectricIron`, `ElectroFlashlight` and `LightBulb`.
- `LightSource` has a read-only `name` and a `shines` property that can be set. It is implemented by `Candle`, `KeroseneLamp`, `Flashlight`, `ElectroFlashlight` and `LightBulb`.

`Candle`, `KeroseneLamp` and `Flashlight` light up whenever they are asked to.

`ElectroFlashlight` and `LightBulb` ignore a request to shine while they are not charged. They can always be switched off.

`ElectricIron` also has a `works` property. Setting `works` to `True` marks the iron as charged as well.

`labkit.containers` holds the two things that devices plug into:

- `PowerStrip` has the methods `connect_device`, `disconnect_device(index)`, `charge_devices()` and `format_connected()`.
- `Garland` has the methods `connect_device`, `disconnect_device(index)`, `turn_on()`, `turn_off()` and `format_connected()`. Removing a light from the garland also switches it off.

Both containers support `len()`, iteration and a `devices` tuple. `disconnect_device` raises `IndexError` when the index is out of range. `format_connected` returns a numbered list of device names, or `"No devices connected."` when the container is empty.

```python
from labkit.containers import Garland, PowerStrip
from labkit.devices import Candle, LightBulb

bulb = LightBulb(False, False, "Lampochka")
strip = PowerStrip()
strip.connect_device(bulb)
strip.charge_devices()

garland = Garland()
garland.connect_device(bulb)
garland.connect_device(Candle(False, "Svechka"))
garland.turn_on()
print(garland.format_connected())
print(bulb.shines)  # True, because the bulb was charged first
```

The following command runs the full walkthrough. It prints the contents of the containers and each device's state as `1` or `0`:

```
labkit-household
```

`labkit.household.run_demo()` returns the same text as a string.

## Random sample statistics

`labkit.stats` provides these functions:

- `gen_uniform(size, a, b, rng=None)` returns `size` values drawn uniformly from `[a, b)`.
- `gen_normal(size, mean, stddev, rng=None)` returns `size` values drawn from a normal distribution. You can pass a `random.Random` as `rng` to get reproducible samples.
- `mean(values)` returns the arithmetic mean.
- `std_dev(values, mean_value)` returns the population standard deviation.
- `histogram(values)` bins the values by Sturges' rule. It returns `(start, end, count)` for each bin that is not empty.
- `format_histogram(values)` draws the histogram as rows of stars. A bin that holds the whole sample gets 50 stars.

These functions raise `ValueError` for a negative size, for `a > b`, for a standard deviation that is not positive, and for an empty sample.

Start the interactive menu with:

```
labkit-stats
```

The menu reads its choices from standard input and has these options:

1. Generate a uniform sample on `[0, 130)`.
2. Generate a normal sample with mean 65 and standard deviation 32.5.
3. Show the mean and standard deviation.
4. Show the histogram.
0. Exit.

## Train sorting

`labkit.train` provides the following:

- `WagonType` has the members `WOOD = 0` and `STEEL = 1`.
- `TrainStack` is a stack with the methods `push`, `pop`, `top`, `empty` and `copy`. It supports `len()` and iterates from bottom to top. `pop` on an empty stack does nothing, and `top` on an empty stack raises `IndexError`.
- `Train.create_train(wagon_types)` builds a train from a sequence of integers.
- `Train.sort_trains()` empties the train and returns a `(wood, steel)` pair of stacks.
- `Train.format_original()` and `format_train(title, stack)` describe a train as text.

Start the interactive version with:

```
labkit-train
```

It reads the number of wagons from standard input, then reads each wagon's type as `0` for wood or `1` for steel. It prints the original train, the wood train and the steel train. If the input is not a number or not a valid wagon type, it prints an error and exits with status 1.

## Tests

```
pip install .[test]
pytest
```