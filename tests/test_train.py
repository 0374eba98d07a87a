import io

import pytest

from labkit.train import Train, TrainStack, WagonType, format_train, main


def test_stack_is_last_in_first_out():
    stack = TrainStack()
    for value in (1, 2, 3):
        stack.push(value)
    popped = []
    while not stack.empty():
        popped.append(stack.top())
        stack.pop()
    assert popped == [3, 2, 1]
    assert len(stack) == 0


def test_pop_on_empty_stack_is_noop():
    stack = TrainStack()
    stack.pop()
    assert stack.empty()


def test_top_on_empty_stack_raises():
    with pytest.raises(IndexError):
        TrainStack().top()


def test_copy_is_independent():
    stack = TrainStack()
    stack.push("a")
    clone = stack.copy()
    clone.push("b")
    assert len(stack) == 1
    assert list(clone) == ["a", "b"]


def test_format_original_lists_wagons_in_order():
    train = Train()
    train.create_train([0, 1, 0])
    assert train.format_original() == (
        "\nOriginal train (3 wagons): - Wood - Steel - Wood\n"
    )


def test_format_empty_train():
    assert format_train("Wood train", TrainStack()) == "\nWood train (0 wagons):\n"


def test_create_train_replaces_previous_wagons():
    train = Train()
    train.create_train([1, 1, 1])
    train.create_train([0])
    assert list(train.wagons) == [WagonType.WOOD]


def test_create_train_rejects_unknown_type():
    with pytest.raises(ValueError):
        Train().create_train([0, 5])


def test_sort_trains_splits_and_empties():
    train = Train()
    types = [0, 1, 1, 0, 1]
    train.create_train(types)
    wood, steel = train.sort_trains()
    assert len(wood) == types.count(0)
    assert len(steel) == types.count(1)
    assert all(w is WagonType.WOOD for w in wood)
    assert all(w is WagonType.STEEL for w in steel)
    assert len(train.wagons) == 0


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_main_prints_original_and_sorted(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "3\n1 0 1\n")
    assert code == 0
    assert "Original train (3 wagons): - Steel - Wood - Steel\n" in out
    assert "Wood train (1 wagons): - Wood\n" in out
    assert "Steel train (2 wagons): - Steel - Steel\n" in out
    assert "Enter wagon type 3 (0 - wood, 1 - steel): " in out


def test_main_reports_truncated_input(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2\n0\n")
    assert code == 1
    assert "Error:" in out