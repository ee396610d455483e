"""
Algebraic structures and the sequence operations built on them
"""
from numerics.core.exceptions import NumericsError, InvalidArgumentError, IndexOutOfRangeError
from numerics.core.monoid import Monoid, FunctionMonoid, Aggregator
from numerics.core.semiring import Semiring
from numerics.core.sequences import monoid_fold, inner_product, semiring_inner_product, permute

__all__ = [
    'NumericsError',
    'InvalidArgumentError',
    'IndexOutOfRangeError',
    'Monoid',
    'FunctionMonoid',
    'Aggregator',
    'Semiring',
    'monoid_fold',
    'inner_product',
    'semiring_inner_product',
    'permute',
]
