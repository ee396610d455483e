"""
Monoid abstractions inspired by Twitter Algebird - powered by algesnake

A Monoid is an algebraic structure with:
1. An identity element (zero)
2. An associative binary operation (plus)

This enables:
- Folding any sequence into a single value
- Generalized "sum" for numbers, strings, lists, booleans, ...
- Incremental accumulation (Aggregator)
- The additive and multiplicative roles of a Semiring
"""
from typing import Callable, Generic, Iterable, Optional, TypeVar

# Import algesnake abstract classes
from algesnake.abstract import Monoid as AlgesnakeMonoid

# Import concrete monoid implementations from algesnake
from algesnake import Add, Multiply, Max, Min
from algesnake import StringMonoid, ListMonoid

from numerics.core.sequences import monoid_fold

T = TypeVar('T')


# ============================================================
# Monoid interface
# ============================================================

class Monoid(AlgesnakeMonoid[T]):
    """
    Monoid interface on top of algesnake's

    Sequence operations only ever call zero() and plus(), so any object
    exposing those two members can be used in place of a subclass.

    Laws that implementations must satisfy (not checked):
    1. Identity: plus(zero, x) == x and plus(x, zero) == x
    2. Associativity: plus(plus(a, b), c) == plus(a, plus(b, c))
    """

    def sum_option(self, items: Iterable[Optional[T]]) -> Optional[T]:
        """
        Sum a list of optional elements, skipping None values

        Args:
            items: List of optional elements

        Returns:
            Combined result or None if all inputs are None
        """
        non_none = [item for item in items if item is not None]
        if not non_none:
            return None
        return monoid_fold(non_none, self)


class FunctionMonoid(Monoid[T]):
    """
    Monoid built from an identity value and a combining function

    Example usage:
        gcd = FunctionMonoid(0, math.gcd)
        monoid_fold([12, 18, 30], gcd)  # 6
    """

    def __init__(self, identity: T, op: Callable[[T, T], T]):
        self.identity = identity
        self.op = op

    def zero(self) -> T:
        return self.identity

    def plus(self, a: T, b: T) -> T:
        return self.op(a, b)

    def __repr__(self) -> str:
        return f"FunctionMonoid(identity={self.identity!r}, op={self.op!r})"


# ============================================================
# Concrete Monoid Implementations
# ============================================================

# algesnake's numeric monoids under Algebird-style names
IntMonoid = Add
FloatMonoid = Add
AddMonoid = Add
MultiplyMonoid = Multiply
MaxMonoid = Max
MinMonoid = Min

# StringMonoid and ListMonoid come straight from algesnake


class AnyMonoid(Monoid[bool]):
    """Logical or, identity False"""

    def zero(self) -> bool:
        return False

    def plus(self, a: bool, b: bool) -> bool:
        return a or b


class AllMonoid(Monoid[bool]):
    """Logical and, identity True"""

    def zero(self) -> bool:
        return True

    def plus(self, a: bool, b: bool) -> bool:
        return a and b


# ============================================================
# Aggregator: Incremental monoid-based accumulation
# ============================================================

class Aggregator(Generic[T]):
    """
    Running fold that accepts values one at a time or in batches

    Example usage:
        agg = Aggregator(IntMonoid())
        agg.append(1).extend(x * x for x in range(3))
        agg.value  # 6
        agg.count  # 4
    """

    def __init__(self, monoid: Monoid[T]):
        self.monoid = monoid
        self.value = monoid.zero()
        self.count = 0

    def append(self, item: T) -> 'Aggregator[T]':
        self.value = self.monoid.plus(self.value, item)
        self.count += 1
        return self

    def extend(self, items: Iterable[T]) -> 'Aggregator[T]':
        """Fold a batch and combine it after the current value"""
        batch = list(items)
        self.value = self.monoid.plus(self.value, monoid_fold(batch, self.monoid))
        self.count += len(batch)
        return self

    def combine(self, other: 'Aggregator[T]') -> 'Aggregator[T]':
        """Append everything other has seen, in order after self"""
        self.value = self.monoid.plus(self.value, other.value)
        self.count += other.count
        return self

    def clear(self) -> 'Aggregator[T]':
        self.value = self.monoid.zero()
        self.count = 0
        return self
