import pytest

from depsched.sometype import BadAnyCast, SomeType


def test_assign_int():
    holder = SomeType()
    holder.value = 7
    assert holder.cast(int) == 7


def test_assign_string():
    holder = SomeType()
    s = "HarryKane"
    holder.value = s
    assert holder.cast(str) == "HarryKane"


def test_copy_keeps_value():
    first = SomeType()
    first.value = 5
    second = first.copy()
    assert second.cast(int) == 5


def test_reassign_different_types():
    holder = SomeType()
    holder.value = 5
    output = str(holder.cast(int))
    holder.value = 2.0
    output += f"{holder.cast(float):g}"
    assert output == "52"


def test_reassign_string_then_int():
    holder = SomeType()
    holder.value = "CR"
    output = holder.cast(str)
    holder.value = 7
    output += str(holder.cast(int))
    assert output == "CR7"


def test_wrong_type_raises():
    holder = SomeType(7)
    with pytest.raises(BadAnyCast, match="Different types"):
        holder.cast(float)


def test_bool_is_not_int():
    holder = SomeType(True)
    with pytest.raises(BadAnyCast):
        holder.cast(int)
    assert holder.cast(bool) is True


def test_empty_cast_raises():
    holder = SomeType()
    assert holder.empty
    with pytest.raises(BadAnyCast):
        holder.cast(int)


def test_swap_exchanges_contents():
    left = SomeType(1)
    right = SomeType("one")
    left.swap(right)
    assert left.cast(str) == "one"
    assert right.cast(int) == 1


def test_swap_with_empty():
    full = SomeType([1, 2])
    empty = SomeType()
    full.swap(empty)
    assert full.empty
    assert empty.cast(list) == [1, 2]


def test_copy_is_independent():
    original = SomeType([1, 2, 3])
    duplicate = original.copy()
    duplicate.cast(list).append(4)
    assert original.cast(list) == [1, 2, 3]
    assert duplicate.cast(list) == [1, 2, 3, 4]


def test_copy_of_empty_is_empty():
    assert SomeType().copy().empty


def test_none_can_be_held():
    holder = SomeType(None)
    assert not holder.empty
    assert holder.cast(type(None)) is None