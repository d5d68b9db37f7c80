"""
Machin-like Identity — формулы вида Pi/4 = Σ m_i · arctan(1/p_i)

Immutable Pydantic модели формулы и реестр известных формул:

    Pi/4 =    arctan(1/2) + arctan(1/3)                      (Hutton 1)
    Pi/4 =  2*arctan(1/3) + arctan(1/7)                      (Hutton 2)
    Pi/4 =  4*arctan(1/5) - arctan(1/239)                    (Machin)
    Pi/4 = 12*arctan(1/18) + 8*arctan(1/57) - 5*arctan(1/239) (Gauss)

Мера Лемера E = Σ 1/log10(p_i): чем она меньше, тем эффективнее формула.
Например, для Machin: E = 1/log10(5) + 1/log10(239) = 1.852
"""

import math
from typing import Dict, Final, List, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

# Допуск проверки формулы в float
IDENTITY_CHECK_TOLERANCE: Final[float] = 1e-9


# =============================================================================
# MODELS
# =============================================================================


class ArctanTerm(BaseModel):
    """Слагаемое m · arctan(1/p)."""

    coefficient: int = Field(..., description="Целый коэффициент m (может быть < 0)")
    p: int = Field(..., ge=2, description="Аргумент арккотангенса p >= 2")

    model_config = {"frozen": True}

    @field_validator("coefficient")
    @classmethod
    def validate_nonzero(cls, v: int) -> int:
        if v == 0:
            raise ValueError("coefficient must be non-zero")
        return v

    def float_value(self) -> float:
        return self.coefficient * math.atan(1.0 / self.p)


class MachinIdentity(BaseModel):
    """
    Формула Машина-подобного типа.

    Проверяется при создании: 4 · Σ m_i·atan(1/p_i) должно совпадать с Pi.
    """

    name: str = Field(..., min_length=1, description="Имя формулы")
    terms: Tuple[ArctanTerm, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_is_pi(self) -> "MachinIdentity":
        value = 4.0 * sum(term.float_value() for term in self.terms)
        if abs(value - math.pi) > IDENTITY_CHECK_TOLERANCE:
            raise ValueError(
                f"identity {self.name!r} evaluates to {value!r}, not Pi"
            )
        return self

    @classmethod
    def from_pairs(cls, name: str, pairs: List[Tuple[int, int]]) -> "MachinIdentity":
        """Создание из пар (m, p)."""
        return cls(
            name=name,
            terms=tuple(ArctanTerm(coefficient=m, p=p) for m, p in pairs),
        )

    def lehmer_measure(self) -> float:
        """E = Σ 1/log10(p_i)."""
        return sum(1.0 / math.log10(term.p) for term in self.terms)

    def ordered_terms(self) -> List[ArctanTerm]:
        """
        Слагаемые с положительными коэффициентами первыми.

        Накопитель должен расти до вычитаний, иначе sub уйдёт в минус.
        """
        return sorted(self.terms, key=lambda term: term.coefficient < 0)

    def describe(self) -> str:
        """Pi/4 = 12*arctan(1/18)+8*arctan(1/57)-5*arctan(1/239) (Gauss)"""
        parts = []
        for i, term in enumerate(self.terms):
            m = abs(term.coefficient)
            sign = "-" if term.coefficient < 0 else ("+" if i else "")
            factor = f"{m}*" if m != 1 else ""
            parts.append(f"{sign}{factor}arctan(1/{term.p})")
        return f"Pi/4 = {''.join(parts)} ({self.name})"


# =============================================================================
# REGISTRY
# =============================================================================


HUTTON_1: Final[MachinIdentity] = MachinIdentity.from_pairs("Hutton 1", [(1, 2), (1, 3)])
HUTTON_2: Final[MachinIdentity] = MachinIdentity.from_pairs("Hutton 2", [(2, 3), (1, 7)])
MACHIN: Final[MachinIdentity] = MachinIdentity.from_pairs("Machin", [(4, 5), (-1, 239)])
GAUSS: Final[MachinIdentity] = MachinIdentity.from_pairs(
    "Gauss", [(12, 18), (8, 57), (-5, 239)]
)

IDENTITIES: Final[Dict[str, MachinIdentity]] = {
    "hutton1": HUTTON_1,
    "hutton2": HUTTON_2,
    "machin": MACHIN,
    "gauss": GAUSS,
}


def get_identity(name: str) -> MachinIdentity:
    """
    Формула из реестра по ключу (регистр не важен).

    Raises:
        KeyError: неизвестная формула
    """
    key = name.strip().lower()
    if key not in IDENTITIES:
        raise KeyError(
            f"unknown identity {name!r}, expected one of {sorted(IDENTITIES)}"
        )
    return IDENTITIES[key]
