import pytest

from pixscale.color_group import ColorGroup


@pytest.mark.parametrize("components", [1, 2, 3, 4])
def test_load_to_list_round_trip(components):
    store = [10, 20, 30, 40, 50, 60]
    group = ColorGroup.load(store, components, 2)
    assert group.to_list() == store[2 : 2 + components]


def test_load_leaves_unread_channels_zero():
    group = ColorGroup.load([7, 8, 9], 2)
    assert (group.r, group.g, group.b, group.a) == (7, 8, 0, 0)


def test_load_short_store_raises():
    with pytest.raises(IndexError):
        ColorGroup.load([1, 2], 4)


@pytest.mark.parametrize("components", [0, 5])
def test_invalid_components(components):
    with pytest.raises(ValueError):
        ColorGroup(components)
    with pytest.raises(ValueError):
        ColorGroup.load([1, 2, 3, 4, 5], components)


def test_dup_sets_every_channel():
    group = ColorGroup.dup(3, 5)
    assert (group.r, group.g, group.b, group.a) == (5, 5, 5, 5)
    assert group.to_list() == [5, 5, 5]


def test_scalar_add_only_touches_active_channels():
    group = ColorGroup(2, 1, 2, 3, 4)
    result = group + 10
    assert (result.r, result.g, result.b, result.a) == (11, 12, 3, 4)
    assert group.to_list() == [1, 2]


def test_group_add_then_sub_round_trip():
    x = ColorGroup(4, 1, 2, 3, 4)
    y = ColorGroup(4, 5, 6, 7, 8)
    assert ((x + y) - y).to_list() == x.to_list()


def test_scalar_sub_and_mul():
    group = ColorGroup(3, 4, 6, 8, 100)
    assert (group - 1).to_list() == [3, 5, 7]
    assert (group * 2).a == 100
    assert (group * 2).to_list() == [g * 2 for g in group.to_list()]


def test_group_mul_four_components_uses_blue_for_alpha():
    x = ColorGroup(4, 1, 1, 1, 1)
    y = ColorGroup(4, 2, 3, 5, 7)
    assert (x * y).to_list() == [2, 3, 5, 5]


def test_group_mul_three_components():
    x = ColorGroup(3, 2, 2, 2, 9)
    y = ColorGroup(3, 1, 2, 3, 4)
    result = x * y
    assert result.to_list() == [2, 4, 6]
    assert result.a == 9


def test_rshift_and_irshift_agree():
    group = ColorGroup(2, 256, 512, 1024, 2048)
    shifted = group >> 8
    assert shifted.to_list() == [1, 2]
    assert shifted.b == 1024
    group >>= 8
    assert group == shifted


def test_iadd_isub_mutate_in_place():
    acc = ColorGroup(3)
    same = acc
    acc += ColorGroup(3, 1, 2, 3, 99)
    assert acc is same
    assert acc.to_list() == [1, 2, 3]
    assert acc.a == 0
    acc -= ColorGroup(3, 1, 2, 3, 0)
    assert acc.to_list() == [0, 0, 0]


def test_mul_add_accumulates_weighted_values():
    acc = ColorGroup(4)
    pixel = ColorGroup.load([1, 2, 3, 4], 4)
    result = acc.mul_add(pixel, 3).mul_add(pixel, 1)
    assert result == pixel * 4


def test_mul_add_keeps_inactive_channels():
    acc = ColorGroup(1, 0, 5, 6, 7)
    result = acc.mul_add(ColorGroup(1, 2, 100, 100, 100), 3)
    assert (result.g, result.b, result.a) == (5, 6, 7)
    assert result.r == 6


def test_mismatched_components_raise():
    with pytest.raises(ValueError):
        ColorGroup(3) + ColorGroup(4)
    with pytest.raises(ValueError):
        ColorGroup(2).mul_add(ColorGroup(1), 1)
    acc = ColorGroup(2)
    with pytest.raises(ValueError):
        acc += ColorGroup(3)