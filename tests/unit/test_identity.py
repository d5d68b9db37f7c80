"""
Тесты для Machin-like Identity моделей

Покрывает:
- Создание и валидация ArctanTerm / MachinIdentity
- Проверка, что формула действительно даёт Pi
- Мера Лемера для формул реестра
- Порядок слагаемых и текстовое описание
- Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    GAUSS,
    HUTTON_1,
    HUTTON_2,
    IDENTITIES,
    MACHIN,
    ArctanTerm,
    MachinIdentity,
    get_identity,
)


# =============================================================================
# ТЕСТЫ: ArctanTerm
# =============================================================================


class TestArctanTerm:
    """Тесты слагаемого m·arctan(1/p)."""

    def test_valid(self):
        term = ArctanTerm(coefficient=-5, p=239)
        assert term.coefficient == -5
        assert term.p == 239

    def test_zero_coefficient_rejected(self):
        with pytest.raises(ValidationError, match="non-zero"):
            ArctanTerm(coefficient=0, p=5)

    @pytest.mark.parametrize("p", [1, 0, -3])
    def test_p_below_two_rejected(self, p):
        with pytest.raises(ValidationError):
            ArctanTerm(coefficient=1, p=p)

    def test_frozen(self):
        term = ArctanTerm(coefficient=1, p=2)
        with pytest.raises(ValidationError):
            term.p = 3


# =============================================================================
# ТЕСТЫ: MachinIdentity
# =============================================================================


class TestMachinIdentity:
    """Тесты формулы Pi/4 = Σ m_i·arctan(1/p_i)."""

    def test_registry(self):
        assert set(IDENTITIES) == {"hutton1", "hutton2", "machin", "gauss"}
        assert IDENTITIES["gauss"] is GAUSS

    def test_gauss_terms(self):
        pairs = [(t.coefficient, t.p) for t in GAUSS.terms]
        assert pairs == [(12, 18), (8, 57), (-5, 239)]

    def test_not_pi_rejected(self):
        with pytest.raises(ValidationError, match="not Pi"):
            MachinIdentity.from_pairs("wrong", [(4, 5)])

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            MachinIdentity(name="empty", terms=())

    def test_custom_identity(self):
        """Формула Стёрмера (1896) вне реестра."""
        identity = MachinIdentity.from_pairs(
            "Stormer", [(6, 8), (2, 57), (1, 239)]
        )
        assert len(identity.terms) == 3

    def test_from_json_dict(self):
        data = {"name": "Machin", "terms": [{"coefficient": 4, "p": 5},
                                            {"coefficient": -1, "p": 239}]}
        assert MachinIdentity.model_validate(data) == MACHIN

    @pytest.mark.parametrize(
        "identity,measure",
        [(HUTTON_1, 5.418), (HUTTON_2, 3.280), (MACHIN, 1.852), (GAUSS, 1.786)],
    )
    def test_lehmer_measure(self, identity, measure):
        assert identity.lehmer_measure() == pytest.approx(measure, abs=2e-3)

    def test_gauss_most_efficient(self):
        measures = {key: i.lehmer_measure() for key, i in IDENTITIES.items()}
        assert min(measures, key=measures.get) == "gauss"

    def test_ordered_terms_positive_first(self):
        identity = MachinIdentity.from_pairs("reversed", [(-5, 239), (12, 18), (8, 57)])
        ordered = [(t.coefficient, t.p) for t in identity.ordered_terms()]
        assert ordered == [(12, 18), (8, 57), (-5, 239)]

    def test_describe(self):
        assert GAUSS.describe() == (
            "Pi/4 = 12*arctan(1/18)+8*arctan(1/57)-5*arctan(1/239) (Gauss)"
        )
        assert MACHIN.describe() == "Pi/4 = 4*arctan(1/5)-arctan(1/239) (Machin)"
        assert HUTTON_1.describe() == "Pi/4 = arctan(1/2)+arctan(1/3) (Hutton 1)"


class TestGetIdentity:
    def test_case_insensitive(self):
        assert get_identity(" Gauss ") is GAUSS
        assert get_identity("MACHIN") is MACHIN

    def test_unknown(self):
        with pytest.raises(KeyError, match="unknown identity"):
            get_identity("chudnovsky")
