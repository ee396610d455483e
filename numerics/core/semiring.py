"""
Semiring: a pair of monoids over the same type

One algesnake monoid plays the additive role (add), the other the
multiplicative role (product). Inner products only need these two
roles, so nothing beyond them is imposed here.

Common choices:
- ArithmeticSemiring: (+, *) over numbers
- BooleanSemiring:    (or, and) over bools, reachability
- TropicalSemiring:   (min, +), shortest paths
- MaxPlusSemiring:    (max, +), best-scoring paths
"""
from typing import Generic, TypeVar

from algesnake import Add, Multiply, Max, Min
from algesnake.abstract import Monoid

from numerics.core.monoid import AnyMonoid, AllMonoid

T = TypeVar('T')


class Semiring(Generic[T]):
    """
    Semiring built from two monoids

    Example usage:
        ring = Semiring(add=Add(), product=Multiply())
        ring.plus(2, 3)   # 5
        ring.times(2, 3)  # 6
    """

    def __init__(self, add: Monoid[T], product: Monoid[T]):
        """
        Initialize Semiring

        Args:
            add: Monoid for the additive role
            product: Monoid for the multiplicative role
        """
        self.add = add
        self.product = product

    def zero(self) -> T:
        """Additive identity"""
        return self.add.zero()

    def one(self) -> T:
        """Multiplicative identity"""
        return self.product.zero()

    def plus(self, a: T, b: T) -> T:
        return self.add.plus(a, b)

    def times(self, a: T, b: T) -> T:
        return self.product.plus(a, b)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(add={type(self.add).__name__}, "
            f"product={type(self.product).__name__})"
        )


class ArithmeticSemiring(Semiring):
    """Ordinary (+, *) with identities 0 and 1"""

    def __init__(self):
        super().__init__(add=Add(), product=Multiply())


class BooleanSemiring(Semiring[bool]):
    """(or, and) with identities False and True"""

    def __init__(self):
        super().__init__(add=AnyMonoid(), product=AllMonoid())


class TropicalSemiring(Semiring[float]):
    """(min, +) with identities +inf and 0"""

    def __init__(self):
        super().__init__(add=Min(), product=Add())


class MaxPlusSemiring(Semiring[float]):
    """(max, +) with identities -inf and 0"""

    def __init__(self):
        super().__init__(add=Max(), product=Add())
