"""
Printer — текстовое представление DigitVector

Формат вывода:

    3.
    1415926535...   (25 разрядов по LB цифр)             100
    ...

Каждый разряд дополняется нулями до LB символов; после каждого
limbs_per_line-го разряда печатается номер последней цифры в колонке
шириной 16.
"""

from typing import Final

from src.core.math.big_real import DigitVector

LIMBS_PER_LINE: Final[int] = 25
POSITION_COLUMN_WIDTH: Final[int] = 16


def format_big_real(x: DigitVector, limbs_per_line: int = LIMBS_PER_LINE) -> str:
    """Многострочная печать с аннотацией позиций."""
    if limbs_per_line < 1:
        raise ValueError(f"limbs_per_line must be >= 1, got {limbs_per_line}")

    width = x.config.limb_digits
    parts = [f"{x.integer_part}.\n"]
    for i in range(1, x.size):
        parts.append(f"{x.digits[i]:0{width}d}")
        if i % limbs_per_line == 0:
            parts.append(f"{i * width:>{POSITION_COLUMN_WIDTH}d}\n")
    parts.append("\n")
    return "".join(parts)


def format_decimal(x: DigitVector, digits: int) -> str:
    """'3.1415...' ровно с digits знаками (усечение)."""
    width = x.config.limb_digits
    fraction = "".join(f"{limb:0{width}d}" for limb in x.limbs)
    if digits > len(fraction):
        raise ValueError(
            f"vector holds {len(fraction)} decimals, {digits} requested"
        )
    return f"{x.integer_part}.{fraction[:digits]}"
