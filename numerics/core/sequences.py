"""
Sequence operations over monoids and semirings

- monoid_fold: reduce a sequence with a monoid
- inner_product: zip two sequences, multiply pairwise, sum the products
- semiring_inner_product: inner_product with both roles taken from a semiring
- permute: apply a cycle of swaps to a copy of a sequence

Sequences are consumed in a single forward pass, so generators work.
"""
from operator import index as as_index
from typing import TYPE_CHECKING, Iterable, List, TypeVar
import logging

from numerics.config import settings
from numerics.core.exceptions import InvalidArgumentError, IndexOutOfRangeError

if TYPE_CHECKING:
    from numerics.core.monoid import Monoid
    from numerics.core.semiring import Semiring

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _require(value, argument: str) -> None:
    if value is None:
        raise InvalidArgumentError(argument)


def monoid_fold(sequence: Iterable[T], monoid: "Monoid[T]") -> T:
    """
    Fold a sequence through a monoid

    Starts from monoid.zero() and applies acc = monoid.plus(acc, item)
    left to right.

    Args:
        sequence: Elements to combine (any iterable, consumed once)
        monoid: Monoid providing zero() and plus()

    Returns:
        The accumulated value, monoid.zero() for an empty sequence

    Example:
        monoid_fold([1, 2, 3, 4], AddMonoid())  # 10
    """
    _require(sequence, "sequence")
    _require(monoid, "monoid")

    accumulator = monoid.zero()
    count = 0
    for item in sequence:
        accumulator = monoid.plus(accumulator, item)
        count += 1

    logger.debug(f"Folded {count} elements with {type(monoid).__name__}")
    return accumulator


def inner_product(
    left: Iterable[T],
    right: Iterable[T],
    sum_monoid: "Monoid[T]",
    product_monoid: "Monoid[T]",
) -> T:
    """
    Generalized dot product

    Pairs left and right position by position, combines each pair with
    product_monoid.plus and folds the results with sum_monoid. Pairing
    stops at the shorter sequence; the longer tail is ignored.

    Args:
        left: First sequence
        right: Second sequence
        sum_monoid: Monoid used to add the products
        product_monoid: Monoid used to multiply each pair

    Returns:
        The folded products, sum_monoid.zero() if either sequence is empty

    Example:
        inner_product([1, 2, 3], [4, 5, 6], AddMonoid(), MultiplyMonoid())  # 32
    """
    _require(left, "left")
    _require(right, "right")
    _require(sum_monoid, "sum_monoid")
    _require(product_monoid, "product_monoid")

    products = (product_monoid.plus(x, y) for x, y in zip(left, right))
    return monoid_fold(products, sum_monoid)


def semiring_inner_product(left: Iterable[T], right: Iterable[T], ring: "Semiring[T]") -> T:
    """
    Inner product with sum and product taken from a semiring

    Same as inner_product(left, right, ring.add, ring.product).

    Example:
        semiring_inner_product([1, 4], [2, 1], TropicalSemiring())  # 3
    """
    _require(left, "left")
    _require(right, "right")
    _require(ring, "ring")

    return inner_product(left, right, ring.add, ring.product)


def permute(source: Iterable[T], cycle_indexes: Iterable[int]) -> List[T]:
    """
    Permute a copy of source by walking a cycle of indexes

    Starting with cell at the first index, every index in turn is swapped
    with cell and then becomes the new cell. The value found at the first
    index is carried around the cycle:

        permute("abcd", [0, 1, 2, 3])
        # abcd -> bacd -> bcad -> bcda  => ['b', 'c', 'd', 'a']

    Repeated indexes are not rejected; the swaps are applied exactly as
    listed.

    Args:
        source: Elements to permute (never modified)
        cycle_indexes: Ordered positions within source, at least two

    Returns:
        A new list holding the permuted elements

    Raises:
        InvalidArgumentError: source or cycle_indexes is None, fewer than
            two indexes are given, or an index is not an integer
        IndexOutOfRangeError: an index is outside [0, len(source)); raised
            when that swap is reached, after the earlier swaps were applied
    """
    _require(source, "source")
    _require(cycle_indexes, "cycle_indexes")

    indexes = list(cycle_indexes)
    if len(indexes) < 2:
        raise InvalidArgumentError(
            "cycle_indexes",
            f"'cycle_indexes' must hold at least 2 entries, got {len(indexes)}",
        )

    work = list(source)
    size = len(work)
    trace = settings.TRACE_PERMUTATIONS
    seen = set()
    cell = None

    for position, raw in enumerate(indexes):
        try:
            i = as_index(raw)
        except TypeError as e:
            raise InvalidArgumentError(
                "cycle_indexes", f"Index {raw!r} at position {position} is not an integer"
            ) from e

        if not 0 <= i < size:
            logger.debug(f"Permutation stopped at position {position}: index {i}, size {size}")
            raise IndexOutOfRangeError(i, size, position, list(work))

        if cell is None:
            cell = i
        elif i in seen:
            logger.warning(f"Cycle revisits index {i} at position {position}")
        seen.add(i)

        work[cell], work[i] = work[i], work[cell]
        if trace:
            logger.debug(f"swap({cell}, {i}) -> {work}")
        cell = i

    return work
