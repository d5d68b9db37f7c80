"""
Arccot — arctan(1/p) через знакопеременный ряд Тейлора

    arctan(1/p) = 1/p - 1/(3 p^3) + 1/(5 p^5) - ...

Вычисление ведётся над DigitVector фиксированного размера: очередной член
u_k = u_{k-2} / p^2 усекается, поэтому на конечной точности он рано или
поздно становится точным нулём. Это и есть критерий остановки — явного
ограничения на число итераций нет.

Деление на p^2 делается за один шаг, пока p < max_safe_divisor, иначе
двумя делениями на p (см. предусловие div_scalar). Стратегия выбирается
один раз на вызов.
"""

import logging
from enum import Enum
from typing import Optional

from src.core.math.big_real import (
    DEFAULT_CONFIG,
    BigRealConfig,
    DigitVector,
    add,
    div_scalar,
    is_zero,
    set_integer,
    sub,
)

logger = logging.getLogger(__name__)


class DivideStrategy(str, Enum):
    """Как продвигать член ряда на множитель 1/p^2."""

    SINGLE = "single"  # один div_scalar(term, p*p)
    DOUBLE = "double"  # два div_scalar(term, p)


def select_strategy(p: int, config: BigRealConfig = DEFAULT_CONFIG) -> DivideStrategy:
    """Выбор стратегии деления по порогу max_safe_divisor."""
    if p < config.max_safe_divisor:
        return DivideStrategy.SINGLE
    return DivideStrategy.DOUBLE


def arccot_into(
    p: int,
    x: DigitVector,
    term: DigitVector,
    scratch: DigitVector,
    strategy: Optional[DivideStrategy] = None,
) -> int:
    """
    x = arctan(1/p) с использованием двух буферов вызывающего.

    term и scratch полностью перезаписываются и на входе не читаются.

    Args:
        p: целое p >= 2
        x: результат
        term: буфер для u_k
        scratch: буфер для u_k / k
        strategy: принудительная стратегия деления (по умолчанию — по порогу)

    Returns:
        Число итераций ряда после первого члена

    Raises:
        ValueError: если p < 2
    """
    if p < 2:
        raise ValueError(f"p must be >= 2, got {p}")

    config = x.config
    if strategy is None:
        strategy = select_strategy(p, config)
    p2 = p * p

    set_integer(x, 0)
    set_integer(term, 1)
    div_scalar(term, p)  # u_1 = 1/p
    add(x, term)

    k = 3
    subtract = True
    iterations = 0
    while not is_zero(term):
        if strategy is DivideStrategy.SINGLE:
            div_scalar(term, p2)
        else:
            div_scalar(term, p)
            div_scalar(term, p)
        div_scalar(term, k, scratch, bounded=False)
        if subtract:
            sub(x, scratch)
        else:
            add(x, scratch)
        k += 2
        subtract = not subtract
        iterations += 1

    logger.debug(
        "arccot(%d): %d iterations, strategy=%s, size=%d",
        p, iterations, strategy.value, x.size,
    )
    return iterations


def arccot(
    p: int,
    size: int,
    config: BigRealConfig = DEFAULT_CONFIG,
    strategy: Optional[DivideStrategy] = None,
) -> DigitVector:
    """
    arctan(1/p) как новый DigitVector размера size.

    Examples:
        >>> arccot(239, 4).digits
        [0, 41, 8407, 6002]
    """
    x = DigitVector.zeros(size, config)
    term = DigitVector.zeros(size, config)
    scratch = DigitVector.zeros(size, config)
    arccot_into(p, x, term, scratch, strategy=strategy)
    return x
