"""Splitting a train into wood and steel wagons with stacks."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Generic, Iterable, Iterator, Sequence, TypeVar

__all__ = ["WagonType", "TrainStack", "Train", "format_train", "main"]

_T = TypeVar("_T")


class WagonType(IntEnum):
    WOOD = 0
    STEEL = 1

    @property
    def label(self) -> str:
        return "Wood" if self is WagonType.WOOD else "Steel"


class TrainStack(Generic[_T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._data: list[_T] = []

    def push(self, value: _T) -> None:
        self._data.append(value)

    def pop(self) -> None:
        """Drop the top item; does nothing when the stack is empty."""
        if self._data:
            self._data.pop()

    def top(self) -> _T:
        if not self._data:
            raise IndexError("top of an empty stack")
        return self._data[-1]

    def empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[_T]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._data)

    def copy(self) -> TrainStack[_T]:
        clone: TrainStack[_T] = TrainStack()
        clone._data = list(self._data)
        return clone


def format_train(title: str, train: TrainStack[WagonType]) -> str:
    """Describe a train, wagons listed from the first pushed to the last."""
    wagons = "".join(f" - {wagon.label}" for wagon in train)
    return f"\n{title} ({len(train)} wagons):{wagons}\n"


class Train:
    """A train of wagons that can be split by wagon type."""

    def __init__(self) -> None:
        self._wagons: TrainStack[WagonType] = TrainStack()

    @property
    def wagons(self) -> TrainStack[WagonType]:
        return self._wagons.copy()

    def create_train(self, wagon_types: Iterable[int]) -> None:
        """Replace the train with wagons of the given types."""
        wagons: TrainStack[WagonType] = TrainStack()
        for value in wagon_types:
            wagons.push(WagonType(value))
        self._wagons = wagons

    def sort_trains(self) -> tuple[TrainStack[WagonType], TrainStack[WagonType]]:
        """Empty the train into a wood train and a steel train, returned in that order."""
        wood: TrainStack[WagonType] = TrainStack()
        steel: TrainStack[WagonType] = TrainStack()
        while not self._wagons.empty():
            wagon = self._wagons.top()
            self._wagons.pop()
            (wood if wagon is WagonType.WOOD else steel).push(wagon)
        return wood, steel

    def format_original(self) -> str:
        return format_train("Original train", self._wagons)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Read a train from standard input and print it split by wagon type."""
    out = sys.stdout
    tokens = _tokens(sys.stdin)

    def read_int() -> int:
        token = next(tokens, None)
        if token is None:
            raise ValueError("unexpected end of input")
        return int(token)

    try:
        out.write("Enter the number of wagons: ")
        count = read_int()
        types = []
        for number in range(1, count + 1):
            out.write(f"Enter wagon type {number} (0 - wood, 1 - steel): ")
            types.append(read_int())
        train = Train()
        train.create_train(types)
    except ValueError as exc:
        out.write(f"\nError: {exc}\n")
        return 1

    out.write(train.format_original())
    wood, steel = train.sort_trains()
    out.write(format_train("Wood train", wood))
    out.write(format_train("Steel train", steel))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())