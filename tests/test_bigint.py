import pytest

from eulerkit.bigint import BigInt, is_bigint, to_bigint

BIG = "123456789012345678901234567890"


@pytest.mark.parametrize("text", ["0", "-0", "42", "-42", BIG, "-" + BIG])
def test_is_bigint_accepts_decimal(text):
    assert is_bigint(text) is True


@pytest.mark.parametrize("text", ["", "-", "+5", "12a", "1.5", " 7", "1_000", "--3"])
def test_is_bigint_rejects_other_text(text):
    assert is_bigint(text) is False


def test_invalid_string_raises():
    with pytest.raises(ValueError, match="Invalid Big Integer has been fed."):
        BigInt("12x")


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        BigInt(1.5)


def test_default_is_zero():
    assert BigInt() == 0
    assert str(BigInt()) == "0"


@pytest.mark.parametrize("text", ["0", "7", "-7", BIG, "-" + BIG])
def test_string_round_trip(text):
    assert str(BigInt(text)) == text
    assert str(to_bigint(text)) == text


def test_int_round_trip():
    value = int(BIG)
    assert int(BigInt(value)) == value
    assert int(BigInt(BigInt(value))) == value


def test_repr_shows_digits():
    assert repr(BigInt("-15")) == "BigInt('-15')"


def test_to_bigint_returns_same_instance_for_bigint():
    n = BigInt(5)
    assert to_bigint(n) is n
    assert to_bigint(5) == n


def test_hash_consistent_with_equality():
    assert hash(BigInt("100")) == hash(BigInt(100))
    assert len({BigInt(3), BigInt("3"), BigInt(4)}) == 2


@pytest.mark.parametrize("a,b", [(BIG, "987654321"), ("-" + BIG, "55"), ("3", "-" + BIG)])
def test_add_sub_inverse(a, b):
    x, y = BigInt(a), BigInt(b)
    assert (x + y) - y == x
    assert (x - y) + y == x
    assert x + y == y + x


def test_mixed_int_operands():
    x = BigInt(BIG)
    assert 1 + x == x + 1
    assert (x - 1) + 1 == x
    assert 0 - x == x * -1
    assert 2 * x == x + x


def test_multiplication_matches_repeated_addition():
    x = BigInt("-" + BIG)
    assert x * 3 == x + x + x
    assert x * 0 == 0


@pytest.mark.parametrize(
    "a,b",
    [(BIG, "7"), ("-" + BIG, "7"), (BIG, "-13"), ("-100", "-9"), ("5", "9"), (BIG, "98765432109876543210123")],
)
def test_division_remainder_invariant(a, b):
    x, y = BigInt(a), BigInt(b)
    q, r = x // y, x % y
    assert q * y + r == x
    assert abs(int(r)) < abs(int(y))
    assert int(r) == 0 or (int(r) < 0) == (int(x) < 0)


def test_division_truncates_toward_zero():
    assert BigInt(-7) // 2 == -3
    assert BigInt(7) // -2 == -3
    assert BigInt(-7) % 2 == -1


def test_division_by_zero_gives_zero_and_dividend():
    x = BigInt(BIG)
    assert x // 0 == 0
    assert x % 0 == x


def test_reflected_division_and_mod():
    y = BigInt(7)
    assert 100 // y == BigInt(100) // y
    assert 100 % y == BigInt(100) % y


def test_comparisons():
    small, big = BigInt("-" + BIG), BigInt(BIG)
    assert small < big
    assert big > small
    assert big >= BigInt(BIG)
    assert small <= small
    assert BigInt(5) > 4
    assert 4 < BigInt(5)
    assert not (BigInt(5) < 5)


def test_sorting_orders_numerically():
    values = [BigInt(x) for x in ["10", "-3", "2", BIG, "0"]]
    ordered = sorted(values)
    assert all(a <= b for a, b in zip(ordered, ordered[1:]))
    assert ordered[-1] == BigInt(BIG)


def test_equality_with_other_types_is_false():
    assert (BigInt(1) == "1") is False


def test_unsupported_operand_raises_type_error():
    with pytest.raises(TypeError):
        BigInt(1) + 1.0