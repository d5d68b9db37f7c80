"""
PiResult — результат вычисления Pi

Immutable Pydantic модели запроса и результата. Результат хранит целую
часть и дробные разряды DigitVector в base 10**limb_digits и умеет
отдавать усечённую десятичную строку.
"""

from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.identity import IDENTITIES


class PiRequest(BaseModel):
    """Запрос на вычисление Pi."""

    digits: int = Field(..., gt=0, description="Число десятичных знаков после запятой")
    identity: str = Field("gauss", min_length=1, description="Ключ формулы в реестре")
    limb_digits: int = Field(4, ge=1, le=9, description="log10(B)")
    guard_limbs: int = Field(2, ge=0, description="Запас разрядов против усечения")
    checked: bool = Field(True, description="Проверять предусловия арифметики")

    model_config = {"frozen": True}

    @field_validator("identity")
    @classmethod
    def validate_identity(cls, v: str) -> str:
        """Ключ приводится к нижнему регистру и должен быть в реестре."""
        key = v.strip().lower()
        if key not in IDENTITIES:
            raise ValueError(
                f"unknown identity {v!r}, expected one of {sorted(IDENTITIES)}"
            )
        return key


class PiResult(BaseModel):
    """
    Вычисленное значение Pi.

    limbs включают запасные разряды; decimal_string() усекает до digits.
    """

    identity: str = Field(..., min_length=1)
    digits: int = Field(..., gt=0)
    limb_digits: int = Field(..., ge=1)
    integer_part: int = Field(..., ge=0)
    limbs: Tuple[int, ...] = Field(...)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_limbs(self) -> "PiResult":
        base = 10 ** self.limb_digits
        for i, limb in enumerate(self.limbs):
            if not 0 <= limb < base:
                raise ValueError(f"limb {i + 1} = {limb} outside [0, {base})")
        if len(self.limbs) * self.limb_digits < self.digits:
            raise ValueError(
                f"{len(self.limbs)} limbs of {self.limb_digits} digits "
                f"cannot hold {self.digits} decimals"
            )
        return self

    def fraction_digits(self) -> str:
        """Все дробные цифры, включая запасные."""
        width = self.limb_digits
        return "".join(f"{limb:0{width}d}" for limb in self.limbs)

    def decimal_string(self) -> str:
        """'3.1415...' ровно с digits знаками после запятой (усечение)."""
        return f"{self.integer_part}.{self.fraction_digits()[:self.digits]}"

    def to_contract(self) -> Dict[str, Any]:
        """Данные для контракта pi_result."""
        return {
            "identity": self.identity,
            "digits": self.digits,
            "limb_digits": self.limb_digits,
            "integer_part": self.integer_part,
            "limbs": list(self.limbs),
            "decimal": self.decimal_string(),
        }
