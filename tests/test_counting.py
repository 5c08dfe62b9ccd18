import pytest

from eulerkit.counting import (
    coin_combinations,
    has_only_small_digits,
    int_sqrt32,
    perimeter_with_most_right_triangles,
    small_digit_multiple_sum,
    smallest_small_digit_multiple,
    spiral_diagonal_sum,
)


def test_spiral_single_cell():
    assert spiral_diagonal_sum(1) == 1


def test_spiral_five_by_five():
    assert spiral_diagonal_sum(5) == 101


@pytest.mark.parametrize("size", [3, 5, 7, 21, 101])
def test_spiral_ring_adds_its_corners(size):
    difference = spiral_diagonal_sum(size) - spiral_diagonal_sum(size - 2)
    assert difference == 4 * size * size - 6 * size + 6


@pytest.mark.parametrize("size", [0, -1, 4])
def test_spiral_rejects_bad_size(size):
    with pytest.raises(ValueError):
        spiral_diagonal_sum(size)


def test_coins_zero_target_has_one_way():
    assert coin_combinations(0) == 1


@pytest.mark.parametrize("target", [1, 7, 50])
def test_only_pennies_give_one_way(target):
    assert coin_combinations(target, (1,)) == 1


def test_impossible_target():
    assert coin_combinations(3, (2,)) == 0


def test_coin_order_does_not_matter():
    assert coin_combinations(60, (1, 2, 5, 10, 20)) == coin_combinations(
        60, (20, 10, 5, 2, 1)
    )


def test_coin_larger_than_target_changes_nothing():
    assert coin_combinations(10, (1, 2, 5)) == coin_combinations(10, (1, 2, 5, 20))


def test_coin_errors():
    with pytest.raises(ValueError):
        coin_combinations(-1)
    with pytest.raises(ValueError):
        coin_combinations(5, (0, 1))


def test_int_sqrt32_bounds():
    assert int_sqrt32(0) == 0
    assert int_sqrt32(2**32 - 1) == 0xFFFF


@pytest.mark.parametrize("root", [1, 2, 17, 1000, 65535])
def test_int_sqrt32_squares(root):
    assert int_sqrt32(root * root) == root
    assert int_sqrt32(root * root - 1) == root - 1


@pytest.mark.parametrize("value", [-1, 2**32])
def test_int_sqrt32_out_of_range(value):
    with pytest.raises(ValueError):
        int_sqrt32(value)


def test_perimeter_single_triangle():
    assert perimeter_with_most_right_triangles(12) == 12


def test_perimeter_none_fits():
    assert perimeter_with_most_right_triangles(11) == 0


def test_perimeter_tie_keeps_smallest():
    assert perimeter_with_most_right_triangles(30) == 12


@pytest.mark.parametrize("n,expected", [(0, True), (120, True), (1023, False), (3, False)])
def test_has_only_small_digits(n, expected):
    assert has_only_small_digits(n) is expected


def test_has_only_small_digits_negative():
    with pytest.raises(ValueError):
        has_only_small_digits(-2)


@pytest.mark.parametrize("n", [1, 2, 3, 7, 9, 42, 89, 99])
def test_smallest_multiple_is_minimal(n):
    result = smallest_small_digit_multiple(n)
    assert result % n == 0
    assert has_only_small_digits(result)
    assert not any(has_only_small_digits(k * n) for k in range(1, result // n))


def test_smallest_multiple_zero_and_negative():
    assert smallest_small_digit_multiple(0) == 0
    with pytest.raises(ValueError):
        smallest_small_digit_multiple(-4)


def test_small_digit_sum_hundred():
    assert small_digit_multiple_sum(100) == 11363107


@pytest.mark.parametrize("limit", [1, 10, 57])
def test_small_digit_sum_steps(limit):
    step = small_digit_multiple_sum(limit) - small_digit_multiple_sum(limit - 1)
    assert step == smallest_small_digit_multiple(limit) // limit


def test_small_digit_sum_empty():
    assert small_digit_multiple_sum(0) == 0