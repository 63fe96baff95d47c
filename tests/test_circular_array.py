import pytest

from interviewkit.circular_array import CircularArray


def test_size_grows_then_caps_at_capacity():
    ca = CircularArray(100)
    for i in range(80):
        ca.append(i * 2)
    assert len(ca) == 80
    for i in range(40):
        ca.append(i * 2)
    assert len(ca) == 100


def test_iteration_keeps_newest_items_in_order():
    ca = CircularArray(100)
    values = [i * 2 for i in range(80)] + [i * 2 for i in range(40)]
    for value in values:
        ca.append(value)
    assert list(ca) == values[-100:]


def test_iteration_before_full():
    ca = CircularArray(5)
    for value in "abc":
        ca.append(value)
    assert list(ca) == ["a", "b", "c"]


def test_empty_array():
    ca = CircularArray(3)
    assert len(ca) == 0
    assert list(ca) == []


@pytest.mark.parametrize("capacity", [0, -4])
def test_bad_capacity(capacity):
    with pytest.raises(ValueError):
        CircularArray(capacity)