"""
Big Real — Fixed-Base Multiprecision Digit Vector

Модуль реализует "большое вещественное" число фиксированной точности:

    X = x(0) + x(1)/B^1 + ... + x(n-1)/B^(n-1),   0 <= x(i) < B для i >= 1

и школьные in-place операции над ним:
- set_integer / is_zero
- add / sub (перенос и заём по одному разряду)
- mul_scalar / div_scalar (умножение и деление на машинное целое)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После любой операции с валидными входами дробные разряды лежат в [0, B)
2. Разряд 0 — целая часть, по модулю B не редуцируется
3. size вектора фиксирован, операции не выделяют новую память под цифры
4. В checked-режиме нарушение контракта → BigRealContractViolation
   до изменения каких-либо разрядов
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Final, List, Optional, Sequence

# =============================================================================
# DEFAULTS
# =============================================================================

# Рабочее основание и его десятичная ширина
DEFAULT_BASE: Final[int] = 10000
DEFAULT_LIMB_DIGITS: Final[int] = 4

# Примерно sqrt(2^31 / B): делитель до MAX_SAFE_DIVISOR^2 не переполняет
# 32-битный аккумулятор при B = 10^4
DEFAULT_MAX_SAFE_DIVISOR: Final[int] = 450


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigRealContractViolation(Exception):
    """
    Нарушение контракта вызывающей стороны.

    В trusting-режиме (checked=False) такие нарушения молча портят разряды;
    в checked-режиме поднимается одно из подклассов этого исключения.
    """
    pass


class SizeMismatchError(BigRealContractViolation):
    """Операнды разного размера или с разной конфигурацией."""
    pass


class SubtractUnderflowError(BigRealContractViolation):
    """sub(x, y) при x < y: результат был бы отрицательным."""
    pass


class ScalarOverflowError(BigRealContractViolation):
    """Скаляр вне диапазона, безопасного для аккумулятора."""
    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BigRealConfig:
    """Конфигурация арифметики.

    Attributes:
        base: основание B (степень десяти)
        limb_digits: log10(B), ширина разряда при печати
        max_safe_divisor: MaxDiv; делитель ограничен MaxDiv^2
        checked: проверять предусловия (True) или доверять вызывающему (False)
    """

    base: int = DEFAULT_BASE
    limb_digits: int = DEFAULT_LIMB_DIGITS
    max_safe_divisor: int = DEFAULT_MAX_SAFE_DIVISOR
    checked: bool = True

    def __post_init__(self):
        if self.limb_digits < 1:
            raise ValueError(f"limb_digits must be >= 1, got {self.limb_digits}")
        if self.base != 10 ** self.limb_digits:
            raise ValueError(
                f"base must equal 10**limb_digits, got base={self.base}, "
                f"limb_digits={self.limb_digits}"
            )
        if self.max_safe_divisor < 2:
            raise ValueError(
                f"max_safe_divisor must be >= 2, got {self.max_safe_divisor}"
            )

    @classmethod
    def for_limb_digits(cls, limb_digits: int, **kwargs) -> "BigRealConfig":
        """Конфигурация с B = 10**limb_digits."""
        return cls(base=10 ** limb_digits, limb_digits=limb_digits, **kwargs)

    @property
    def max_scalar(self) -> int:
        """Верхняя граница скаляра для mul_scalar/div_scalar."""
        return self.max_safe_divisor * self.max_safe_divisor


DEFAULT_CONFIG: Final[BigRealConfig] = BigRealConfig()


# =============================================================================
# DIGIT VECTOR
# =============================================================================


class DigitVector:
    """
    Владеющий контейнер разрядов большого вещественного числа.

    digits[0] — целая часть, digits[1:] — дробные разряды base B,
    старший разряд первым. Размер фиксируется при создании.
    """

    __slots__ = ("config", "digits")

    def __init__(self, digits: Sequence[int], config: BigRealConfig = DEFAULT_CONFIG):
        if len(digits) < 1:
            raise ValueError("DigitVector needs at least one digit")
        self.config = config
        self.digits: List[int] = list(digits)
        if config.checked:
            for i in range(1, len(self.digits)):
                if not 0 <= self.digits[i] < config.base:
                    raise ValueError(
                        f"digit {i} = {self.digits[i]} outside [0, {config.base})"
                    )

    @classmethod
    def zeros(cls, size: int, config: BigRealConfig = DEFAULT_CONFIG) -> "DigitVector":
        if size < 1:
            raise ValueError(f"size must be >= 1, got {size}")
        return cls([0] * size, config)

    @classmethod
    def from_integer(
        cls, value: int, size: int, config: BigRealConfig = DEFAULT_CONFIG
    ) -> "DigitVector":
        x = cls.zeros(size, config)
        set_integer(x, value)
        return x

    @property
    def size(self) -> int:
        return len(self.digits)

    @property
    def integer_part(self) -> int:
        return self.digits[0]

    @property
    def limbs(self) -> List[int]:
        """Дробные разряды (копия)."""
        return self.digits[1:]

    def copy(self) -> "DigitVector":
        clone = DigitVector.zeros(self.size, self.config)
        clone.digits[:] = self.digits
        return clone

    def truncated(self, size: int) -> "DigitVector":
        """Копия из первых size разрядов (младшие отбрасываются)."""
        if not 1 <= size <= self.size:
            raise ValueError(f"size must be in [1, {self.size}], got {size}")
        return DigitVector(self.digits[:size], self.config)

    def as_fraction(self) -> Fraction:
        """Точное рациональное значение вектора."""
        numerator = 0
        for digit in self.digits:
            numerator = numerator * self.config.base + digit
        return Fraction(numerator, self.config.base ** (self.size - 1))

    def is_normalized(self) -> bool:
        """Все дробные разряды в [0, B)."""
        base = self.config.base
        return all(0 <= d < base for d in self.digits[1:])

    def __eq__(self, other):
        if not isinstance(other, DigitVector):
            return NotImplemented
        return self.config == other.config and self.digits == other.digits

    __hash__ = None

    def __repr__(self):
        return f"DigitVector(size={self.size}, base={self.config.base}, digits={self.digits!r})"


# =============================================================================
# PRECONDITION CHECKS
# =============================================================================


def _check_same_shape(x: DigitVector, y: DigitVector) -> None:
    if x.size != y.size or x.config != y.config:
        raise SizeMismatchError(
            f"operand mismatch: size {x.size} vs {y.size}, "
            f"base {x.config.base} vs {y.config.base}"
        )


def _check_scalar(value: int, low: int, config: BigRealConfig, op: str) -> None:
    if not low <= value <= config.max_scalar:
        raise ScalarOverflowError(
            f"{op}: scalar {value} outside [{low}, {config.max_scalar}] "
            f"(max_safe_divisor={config.max_safe_divisor})"
        )


# =============================================================================
# PRIMITIVES
# =============================================================================


def set_integer(x: DigitVector, value: int) -> None:
    """x = value (целое), дробные разряды обнуляются."""
    digits = x.digits
    for i in range(1, len(digits)):
        digits[i] = 0
    digits[0] = value


def is_zero(x: DigitVector) -> bool:
    """True, если все разряды равны нулю (включая младший)."""
    for digit in x.digits:
        if digit != 0:
            return False
    return True


def compare(x: DigitVector, y: DigitVector) -> int:
    """
    Сравнение нормализованных векторов одинакового размера.

    Returns:
        -1 если x < y, 0 если x == y, 1 если x > y
    """
    if x.config.checked:
        _check_same_shape(x, y)
    for a, b in zip(x.digits, y.digits):
        if a != b:
            return -1 if a < b else 1
    return 0


def copy_into(x: DigitVector, y: DigitVector) -> None:
    """x = y без выделения памяти."""
    if x.config.checked:
        _check_same_shape(x, y)
    x.digits[:] = y.digits


def add(x: DigitVector, y: DigitVector) -> None:
    """
    x += y, как школьное сложение с переносом.

    Идём от младшего разряда (size-1) к старшему (0); перенос 0 или 1.
    Перенос из разряда 1 уходит в целую часть без редукции.
    """
    if x.config.checked:
        _check_same_shape(x, y)

    base = x.config.base
    xd = x.digits
    yd = y.digits
    carry = 0
    for i in range(len(xd) - 1, 0, -1):
        value = xd[i] + yd[i] + carry
        if value < base:
            carry = 0
        else:
            carry = 1
            value -= base
        xd[i] = value
    xd[0] += yd[0] + carry


def sub(x: DigitVector, y: DigitVector) -> None:
    """
    x -= y, как школьное вычитание с заёмом.

    Предусловие: x >= y. В checked-режиме нарушение обнаруживается до
    изменения разрядов (SubtractUnderflowError); в trusting-режиме
    разряд 0 молча становится отрицательным.
    """
    if x.config.checked and compare(x, y) < 0:
        raise SubtractUnderflowError(
            f"sub underflow: x={x.as_fraction()} < y={y.as_fraction()}"
        )

    base = x.config.base
    xd = x.digits
    yd = y.digits
    borrow = 0
    for i in range(len(xd) - 1, 0, -1):
        value = xd[i] - yd[i] - borrow
        if value < 0:
            value += base
            borrow = 1
        else:
            borrow = 0
        xd[i] = value
    xd[0] -= yd[0] + borrow


def mul_scalar(x: DigitVector, q: int) -> None:
    """
    x *= q для малого неотрицательного целого q.

    Разряд = (d*q + carry) mod B, carry = (d*q + carry) // B; итоговый
    перенос остаётся в целой части.
    """
    config = x.config
    if config.checked:
        _check_scalar(q, 0, config, "mul_scalar")

    base = config.base
    xd = x.digits
    carry = 0
    for i in range(len(xd) - 1, 0, -1):
        carry, xd[i] = divmod(xd[i] * q + carry, base)
    xd[0] = xd[0] * q + carry


def div_scalar(
    x: DigitVector,
    d: int,
    y: Optional[DigitVector] = None,
    *,
    bounded: bool = True,
) -> DigitVector:
    """
    y = x / d, как школьное деление с остатком.

    Идём от старшего разряда к младшему, остаток переносится в следующий
    разряд как carry*B. Результат усекается. y может совпадать с x
    (по умолчанию y = x).

    Предусловие: 1 <= d <= max_safe_divisor^2. Для большего делителя
    вызывающий делит дважды на множители. bounded=False снимает верхнюю
    границу (знаменатель ряда k растёт без ограничений), d >= 1 остаётся.

    Returns:
        y
    """
    if y is None:
        y = x
    config = x.config
    if config.checked:
        _check_same_shape(x, y)
        if bounded:
            _check_scalar(d, 1, config, "div_scalar")
        elif d < 1:
            raise ScalarOverflowError(f"div_scalar: divisor {d} must be >= 1")

    base = config.base
    xd = x.digits
    yd = y.digits
    carry = 0
    for i in range(len(xd)):
        quotient, carry = divmod(xd[i] + carry * base, d)
        yd[i] = quotient
    return y
