"""
Core math modules

Арифметика фиксированной точности над DigitVector и ряд арккотангенса.
"""

# Big Real
from src.core.math.big_real import (
    # Defaults
    DEFAULT_BASE,
    DEFAULT_CONFIG,
    DEFAULT_LIMB_DIGITS,
    DEFAULT_MAX_SAFE_DIVISOR,
    # Exceptions
    BigRealContractViolation,
    ScalarOverflowError,
    SizeMismatchError,
    SubtractUnderflowError,
    # Types
    BigRealConfig,
    DigitVector,
    # Primitives
    add,
    compare,
    copy_into,
    div_scalar,
    is_zero,
    mul_scalar,
    set_integer,
    sub,
)

# Arccot
from src.core.math.arccot import (
    DivideStrategy,
    arccot,
    arccot_into,
    select_strategy,
)

__all__ = [
    # Big Real — Defaults
    "DEFAULT_BASE",
    "DEFAULT_CONFIG",
    "DEFAULT_LIMB_DIGITS",
    "DEFAULT_MAX_SAFE_DIVISOR",
    # Big Real — Exceptions
    "BigRealContractViolation",
    "ScalarOverflowError",
    "SizeMismatchError",
    "SubtractUnderflowError",
    # Big Real — Types
    "BigRealConfig",
    "DigitVector",
    # Big Real — Primitives
    "add",
    "compare",
    "copy_into",
    "div_scalar",
    "is_zero",
    "mul_scalar",
    "set_integer",
    "sub",
    # Arccot
    "DivideStrategy",
    "arccot",
    "arccot_into",
    "select_strategy",
]
