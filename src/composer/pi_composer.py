"""Pi Composer — сборка Pi из арккотангенсов по формуле Машина-подобного типа.

Pi/4 = Σ m_i · arctan(1/p_i):
1. Накопитель обнуляется
2. Для каждого слагаемого: arccot(p_i) → mul_scalar(|m_i|) → add/sub
3. mul_scalar(acc, 4)

Размер вектора выводится из числа знаков: size = 1 + ceil(digits / LB)
плюс guard_limbs запасных разрядов, которые поглощают ошибку усечения
(несколько единиц младшего разряда на итерацию ряда).
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from src.core.domain.identity import GAUSS, MachinIdentity, get_identity
from src.core.domain.pi_result import PiRequest, PiResult
from src.core.math.arccot import arccot_into
from src.core.math.big_real import (
    BigRealConfig,
    DigitVector,
    add,
    mul_scalar,
    set_integer,
    sub,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComposerConfig:
    """Конфигурация композитора.

    guard_limbs: запасные разряды сверх запрошенной точности
    big_real: конфигурация арифметики
    """

    guard_limbs: int = 2
    big_real: BigRealConfig = field(default_factory=BigRealConfig)

    def __post_init__(self):
        if self.guard_limbs < 0:
            raise ValueError(f"guard_limbs must be >= 0, got {self.guard_limbs}")


def limb_count_for_digits(
    digits: int, config: BigRealConfig, guard_limbs: int = 0
) -> int:
    """size = 1 (целая часть) + ceil(digits / LB) + guard_limbs."""
    if digits <= 0:
        raise ValueError(f"digits must be positive, got {digits}")
    return 1 + math.ceil(digits / config.limb_digits) + guard_limbs


class PiComposer:
    """Вычисляет Pi по заданной формуле.

    Буферы (arctan, term, scratch) выделяются один раз на вызов compose
    и переиспользуются для всех слагаемых.
    """

    def __init__(self, config: Optional[ComposerConfig] = None):
        self.config = config or ComposerConfig()

    def compose(self, identity: MachinIdentity, size: int) -> DigitVector:
        """
        Pi как DigitVector размера size.

        Args:
            identity: формула Pi/4 = Σ m_i·arctan(1/p_i)
            size: число разрядов (включая целую часть)

        Returns:
            Накопитель со значением Pi
        """
        big_real = self.config.big_real
        pi = DigitVector.zeros(size, big_real)
        arctan = DigitVector.zeros(size, big_real)
        term = DigitVector.zeros(size, big_real)
        scratch = DigitVector.zeros(size, big_real)

        set_integer(pi, 0)
        for t in identity.ordered_terms():
            iterations = arccot_into(t.p, arctan, term, scratch)
            mul_scalar(arctan, abs(t.coefficient))
            if t.coefficient > 0:
                add(pi, arctan)
            else:
                sub(pi, arctan)
            logger.debug(
                "term %+d*arctan(1/%d) folded after %d iterations",
                t.coefficient, t.p, iterations,
            )
        mul_scalar(pi, 4)
        return pi

    def compute(self, digits: int, identity: MachinIdentity = GAUSS) -> PiResult:
        """Pi с digits десятичными знаками."""
        big_real = self.config.big_real
        size = limb_count_for_digits(digits, big_real, self.config.guard_limbs)
        logger.info(
            "computing %d digits of Pi with %s (size=%d, base=%d)",
            digits, identity.name, size, big_real.base,
        )
        pi = self.compose(identity, size)
        return PiResult(
            identity=identity.name,
            digits=digits,
            limb_digits=big_real.limb_digits,
            integer_part=pi.integer_part,
            limbs=tuple(pi.limbs),
        )


def compute_pi(request: PiRequest) -> PiResult:
    """Вычисление по запросу PiRequest."""
    config = ComposerConfig(
        guard_limbs=request.guard_limbs,
        big_real=BigRealConfig.for_limb_digits(
            request.limb_digits, checked=request.checked
        ),
    )
    return PiComposer(config).compute(request.digits, get_identity(request.identity))
