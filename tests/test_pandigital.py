import pytest

from eulerkit.pandigital import (
    is_pandigital,
    largest_pandigital_multiple,
    pandigital_product_sum,
    pandigital_products,
)


def test_identity_from_problem_statement_is_pandigital():
    assert is_pandigital(39, 186, 39 * 186) is True


def test_single_number_with_all_digits():
    assert is_pandigital(123456789) is True
    assert is_pandigital(987654321) is True


def test_too_few_digits_is_not_pandigital():
    assert is_pandigital(12, 34) is False


def test_repeated_digit_is_not_pandigital():
    assert is_pandigital(112345678) is False
    assert is_pandigital(1234, 56789, 1) is False


def test_zero_digit_is_rejected():
    assert is_pandigital(1023456789) is False
    assert is_pandigital(102345678) is False


def test_zero_argument_adds_no_digits():
    assert is_pandigital(0, 123456789) is True


def test_no_arguments_is_not_pandigital():
    assert is_pandigital() is False


def test_negative_argument_raises():
    with pytest.raises(ValueError):
        is_pandigital(-123456789)


def test_products_contain_example_and_are_valid():
    products = pandigital_products()
    assert 7254 in products
    for product in products:
        assert any(
            product % factor == 0 and is_pandigital(factor, product // factor, product)
            for factor in range(1, 99)
        )


def test_product_sum_matches_products():
    assert pandigital_product_sum() == sum(pandigital_products())
    assert pandigital_product_sum() == 45228


def test_largest_multiple_is_pandigital_concatenation():
    result = largest_pandigital_multiple()
    assert result == 932718654
    assert is_pandigital(result)