"""
Tests for monoid_fold and the inner products
"""
import itertools

import pytest
from numerics.core.exceptions import InvalidArgumentError
from numerics.core.monoid import (
    FunctionMonoid,
    IntMonoid,
    MultiplyMonoid,
    StringMonoid,
    MaxMonoid,
)
from numerics.core.semiring import (
    Semiring,
    ArithmeticSemiring,
    BooleanSemiring,
    TropicalSemiring,
    MaxPlusSemiring,
)
from numerics.core.sequences import monoid_fold, inner_product, semiring_inner_product


def _mat_add(a, b):
    return tuple(tuple(x + y for x, y in zip(ra, rb)) for ra, rb in zip(a, b))


def _mat_mul(a, b):
    cols = list(zip(*b))
    return tuple(tuple(sum(x * y for x, y in zip(row, col)) for col in cols) for row in a)


ZERO_2X2 = ((0, 0), (0, 0))
IDENTITY_2X2 = ((1, 0), (0, 1))


class TestMonoidFold:
    """Test folding sequences through a monoid"""

    def test_sum(self):
        """Test additive fold"""
        assert monoid_fold([1, 2, 3, 4], IntMonoid()) == 10

    def test_empty_returns_zero(self):
        """Test empty sequence yields the identity"""
        assert monoid_fold([], IntMonoid()) == 0
        assert monoid_fold([], MultiplyMonoid()) == 1
        assert monoid_fold([], StringMonoid()) == ""

    def test_left_to_right_order(self):
        """Test non-commutative fold keeps element order"""
        assert monoid_fold(["a", "b", "c"], StringMonoid()) == "abc"

    def test_generator_input(self):
        """Test lazy sequences are consumed once"""
        values = (n * n for n in range(1, 4))

        assert monoid_fold(values, IntMonoid()) == 14

    def test_repeated_calls_agree(self):
        """Test folding is deterministic"""
        data = [3, 1, 4, 1, 5]
        monoid = MaxMonoid()

        assert monoid_fold(data, monoid) == monoid_fold(data, monoid) == 5
        assert data == [3, 1, 4, 1, 5]

    def test_duck_typed_monoid(self):
        """Test any object with zero and plus works"""

        class Concat:
            def zero(self):
                return ()

            def plus(self, a, b):
                return a + (b,)

        assert monoid_fold([1, 2], Concat()) == (1, 2)

    def test_missing_sequence(self):
        """Test None sequence is rejected"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            monoid_fold(None, IntMonoid())

        assert exc_info.value.argument == "sequence"

    def test_missing_monoid(self):
        """Test None monoid is rejected"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            monoid_fold([1], None)

        assert exc_info.value.argument == "monoid"

    def test_error_is_value_error(self):
        """Test InvalidArgumentError can be caught as ValueError"""
        with pytest.raises(ValueError):
            monoid_fold(None, IntMonoid())


class TestInnerProduct:
    """Test the two-monoid inner product"""

    def test_dot_product(self):
        """Test ordinary dot product"""
        assert inner_product([1, 2, 3], [4, 5, 6], IntMonoid(), MultiplyMonoid()) == 32

    def test_truncates_to_shorter(self):
        """Test extra elements of the longer sequence are ignored"""
        assert inner_product([1, 2], [4, 5, 6], IntMonoid(), MultiplyMonoid()) == 14
        assert inner_product([1, 2, 3], [4], IntMonoid(), MultiplyMonoid()) == 4

    def test_empty_returns_sum_zero(self):
        """Test empty input yields the sum identity"""
        assert inner_product([], [1, 2], IntMonoid(), MultiplyMonoid()) == 0
        assert inner_product([1, 2], [], IntMonoid(), MultiplyMonoid()) == 0

    def test_unbounded_right(self):
        """Test an infinite producer is fine when the other side is finite"""
        result = inner_product([1, 2, 3], itertools.count(1), IntMonoid(), MultiplyMonoid())

        assert result == 14

    def test_strings(self):
        """Test interleaving strings via concatenation in both roles"""
        result = inner_product(["a", "b"], ["x", "y"], StringMonoid(), StringMonoid())

        assert result == "axby"

    def test_matrices(self):
        """Test inner product of sequences of 2x2 matrices"""
        matrix_add = FunctionMonoid(ZERO_2X2, _mat_add)
        matrix_mul = FunctionMonoid(IDENTITY_2X2, _mat_mul)
        c = ((1, 2), (3, 4))
        swap = ((0, 1), (1, 0))

        result = inner_product([IDENTITY_2X2, swap], [c, IDENTITY_2X2], matrix_add, matrix_mul)

        assert result == ((1, 3), (4, 4))

    @pytest.mark.parametrize("argument", ["left", "right", "sum_monoid", "product_monoid"])
    def test_missing_argument(self, argument):
        """Test each argument is required"""
        kwargs = {
            "left": [1],
            "right": [2],
            "sum_monoid": IntMonoid(),
            "product_monoid": MultiplyMonoid(),
        }
        kwargs[argument] = None

        with pytest.raises(InvalidArgumentError) as exc_info:
            inner_product(**kwargs)

        assert exc_info.value.argument == argument


class TestSemiringInnerProduct:
    """Test the semiring inner product"""

    def test_arithmetic(self):
        """Test (+, *) semiring gives the dot product"""
        assert semiring_inner_product([1, 2, 3], [4, 5, 6], ArithmeticSemiring()) == 32

    def test_matches_two_monoid_form(self):
        """Test semiring form delegates to the two-monoid form"""
        add, product = IntMonoid(), MultiplyMonoid()
        ring = Semiring(add=add, product=product)
        left, right = [2, 7, 1], [8, 2, 8]

        assert semiring_inner_product(left, right, ring) == inner_product(left, right, add, product)

    def test_boolean(self):
        """Test reachability through any shared position"""
        ring = BooleanSemiring()

        assert semiring_inner_product([True, False], [False, True], ring) is False
        assert semiring_inner_product([True, True], [False, True], ring) is True

    def test_tropical_shortest_path(self):
        """Test (min, +) picks the cheapest two-hop route"""
        # cost a->via_i then via_i->b
        to_via = [1, 4, 2]
        from_via = [9, 1, 5]

        assert semiring_inner_product(to_via, from_via, TropicalSemiring()) == 5

    def test_max_plus(self):
        """Test (max, +) picks the best-scoring pair"""
        assert semiring_inner_product([1, 4], [2, 1], MaxPlusSemiring()) == 5

    def test_truncates_to_shorter(self):
        """Test zip truncation applies to the semiring form"""
        assert semiring_inner_product([1, 2], [4, 5, 6], ArithmeticSemiring()) == 14

    def test_empty_returns_additive_zero(self):
        """Test empty input yields the additive identity"""
        assert semiring_inner_product([], [], TropicalSemiring()) == float('inf')

    @pytest.mark.parametrize("argument", ["left", "right", "ring"])
    def test_missing_argument(self, argument):
        """Test each argument is checked separately"""
        kwargs = {"left": [1], "right": [2], "ring": ArithmeticSemiring()}
        kwargs[argument] = None

        with pytest.raises(InvalidArgumentError) as exc_info:
            semiring_inner_product(**kwargs)

        assert exc_info.value.argument == argument
        assert argument in str(exc_info.value)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
