"""
Property-based tests for Peano arithmetic.

Hypothesis проверяет алгебраические законы на случайных натуральных числах;
каждый результат сверяется с обычной арифметикой int.
"""

from hypothesis import given
from hypothesis import strategies as st

from peano import ONE, ZERO, Ordering, from_int

# Unary representation: keep operands small enough for mul / div
naturals = st.integers(min_value=0, max_value=60)
positives = st.integers(min_value=1, max_value=60)
small_naturals = st.integers(min_value=0, max_value=25)


class TestConversionProperties:
    @given(st.integers(min_value=-1000, max_value=1000))
    def test_roundtrip_clamps(self, n: int) -> None:
        assert from_int(n).to_int() == max(n, 0)


class TestAdditionProperties:
    @given(naturals)
    def test_identity(self, a: int) -> None:
        x = from_int(a)
        assert x.add(ZERO) == x

    @given(naturals, naturals)
    def test_commutative(self, a: int, b: int) -> None:
        x, y = from_int(a), from_int(b)
        assert x.add(y) == y.add(x)
        assert x.add(y).to_int() == a + b

    @given(naturals, naturals, naturals)
    def test_associative(self, a: int, b: int, c: int) -> None:
        x, y, z = from_int(a), from_int(b), from_int(c)
        assert x.add(y).add(z).to_int() == x.add(y.add(z)).to_int()


class TestSubtractionProperties:
    @given(naturals, naturals)
    def test_floor_at_zero(self, a: int, b: int) -> None:
        assert from_int(a).sub(from_int(b)).to_int() == max(a - b, 0)

    @given(naturals, naturals)
    def test_smaller_minus_larger_is_zero(self, a: int, b: int) -> None:
        lo, hi = sorted((a, b))
        if lo < hi:
            assert from_int(lo).sub(from_int(hi)) == ZERO


class TestMultiplicationProperties:
    @given(small_naturals)
    def test_zero_and_one(self, a: int) -> None:
        x = from_int(a)
        assert x.mul(ZERO) == ZERO
        assert x.mul(ONE) == x

    @given(small_naturals, small_naturals)
    def test_matches_int_product(self, a: int, b: int) -> None:
        x, y = from_int(a), from_int(b)
        assert x.mul(y).to_int() == a * b
        assert x.mul(y) == y.mul(x)


class TestParityProperties:
    @given(naturals)
    def test_even_xor_odd(self, a: int) -> None:
        x = from_int(a)
        assert x.is_even() != x.is_odd()
        assert x.is_even() == (a % 2 == 0)


class TestCompareProperties:
    @given(naturals, naturals)
    def test_matches_int_order(self, a: int, b: int) -> None:
        expected = Ordering.LESS if a < b else Ordering.GREATER if a > b else Ordering.EQUAL
        assert from_int(a).compare(from_int(b)) is expected

    @given(naturals, naturals)
    def test_antisymmetric(self, a: int, b: int) -> None:
        x, y = from_int(a), from_int(b)
        assert x.compare(y).value == -y.compare(x).value


class TestDivisionProperties:
    @given(naturals, positives)
    def test_floor_division(self, a: int, b: int) -> None:
        result = from_int(a).div(from_int(b))
        assert result.ok
        assert result.unwrap().to_int() == a // b

    @given(positives)
    def test_nonzero_by_zero_fails(self, a: int) -> None:
        assert not from_int(a).div(ZERO).ok
