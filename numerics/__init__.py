"""
numerics: folds, inner products and permutations over user-supplied
monoids and semirings
"""
import logging

from numerics.config import Settings, settings
from numerics.core.exceptions import NumericsError, InvalidArgumentError, IndexOutOfRangeError
from numerics.core.monoid import (
    Monoid,
    FunctionMonoid,
    AddMonoid,
    MultiplyMonoid,
    MaxMonoid,
    MinMonoid,
    StringMonoid,
    ListMonoid,
    AnyMonoid,
    AllMonoid,
    IntMonoid,
    FloatMonoid,
    Aggregator,
)
from numerics.core.semiring import (
    Semiring,
    ArithmeticSemiring,
    BooleanSemiring,
    TropicalSemiring,
    MaxPlusSemiring,
)
from numerics.core.sequences import monoid_fold, inner_product, semiring_inner_product, permute


def configure_logging(config: Settings = settings) -> None:
    """
    Configure root logging from settings

    Not called on import; applications and scripts call it once at startup.

    Args:
        config: Settings to read level and format from
    """
    logging.basicConfig(
        level=config.get_log_level(),
        format=config.LOG_FORMAT,
    )


__all__ = [
    'Settings',
    'settings',
    'configure_logging',
    'NumericsError',
    'InvalidArgumentError',
    'IndexOutOfRangeError',
    'Monoid',
    'FunctionMonoid',
    'AddMonoid',
    'MultiplyMonoid',
    'MaxMonoid',
    'MinMonoid',
    'StringMonoid',
    'ListMonoid',
    'AnyMonoid',
    'AllMonoid',
    'IntMonoid',
    'FloatMonoid',
    'Aggregator',
    'Semiring',
    'ArithmeticSemiring',
    'BooleanSemiring',
    'TropicalSemiring',
    'MaxPlusSemiring',
    'monoid_fold',
    'inner_product',
    'semiring_inner_product',
    'permute',
]
