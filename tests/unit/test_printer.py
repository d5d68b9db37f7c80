"""
Тесты для Printer и PiResult

Проверяет:
1. Дополнение разрядов нулями до LB символов
2. Колонку позиций после каждых limbs_per_line разрядов
3. Усечение десятичной строки
4. Валидацию PiResult
"""

import pytest
from pydantic import ValidationError

from src.composer.printer import LIMBS_PER_LINE, format_big_real, format_decimal
from src.core.domain.pi_result import PiRequest, PiResult
from src.core.math.big_real import BigRealConfig, DigitVector


class TestFormatBigReal:
    """Тесты многострочной печати."""

    def test_zero_padding(self):
        x = DigitVector([0, 41, 8407])
        assert format_big_real(x) == "0.\n00418407\n"

    def test_position_column(self):
        x = DigitVector([3, 1415, 9265, 3589])
        expected = "3.\n14159265" + " " * 15 + "8\n" + "3589\n"
        assert format_big_real(x, limbs_per_line=2) == expected

    def test_full_default_line(self):
        x = DigitVector([3] + [1234] * LIMBS_PER_LINE)
        text = format_big_real(x)
        lines = text.split("\n")
        assert lines[0] == "3."
        assert lines[1] == "1234" * 25 + " " * 13 + "100"
        assert text.endswith("100\n\n")

    def test_base10(self):
        x = DigitVector([3, 1, 4, 1], BigRealConfig.for_limb_digits(1))
        assert format_big_real(x) == "3.\n141\n"

    def test_invalid_line_width(self):
        with pytest.raises(ValueError):
            format_big_real(DigitVector([3, 1]), limbs_per_line=0)


class TestFormatDecimal:
    """Тесты плоской десятичной строки."""

    def test_truncates(self):
        x = DigitVector([3, 1415, 9265])
        assert format_decimal(x, 5) == "3.14159"

    def test_leading_zeros(self):
        assert format_decimal(DigitVector([0, 41, 8407]), 8) == "0.00418407"

    def test_too_many_digits(self):
        with pytest.raises(ValueError, match="requested"):
            format_decimal(DigitVector([3, 1415]), 5)


class TestPiResult:
    """Тесты модели результата."""

    def test_decimal_string(self):
        result = PiResult(identity="Gauss", digits=6, limb_digits=4,
                          integer_part=3, limbs=(1415, 9265))
        assert result.decimal_string() == "3.141592"
        assert result.fraction_digits() == "14159265"

    def test_to_contract(self):
        result = PiResult(identity="Gauss", digits=4, limb_digits=4,
                          integer_part=3, limbs=(1415, 9265))
        data = result.to_contract()
        assert data["limbs"] == [1415, 9265]
        assert data["decimal"] == "3.1415"

    def test_limb_out_of_range(self):
        with pytest.raises(ValidationError, match="outside"):
            PiResult(identity="Gauss", digits=4, limb_digits=4,
                     integer_part=3, limbs=(10000,))

    def test_too_few_limbs(self):
        with pytest.raises(ValidationError, match="cannot hold"):
            PiResult(identity="Gauss", digits=9, limb_digits=4,
                     integer_part=3, limbs=(1415, 9265))


class TestPiRequest:
    def test_defaults(self):
        request = PiRequest(digits=10)
        assert request.identity == "gauss"
        assert request.limb_digits == 4
        assert request.guard_limbs == 2
        assert request.checked is True

    def test_invalid_digits(self):
        with pytest.raises(ValidationError):
            PiRequest(digits=0)

    def test_identity_normalized(self):
        assert PiRequest(digits=10, identity=" Hutton1 ").identity == "hutton1"

    def test_unknown_identity(self):
        with pytest.raises(ValidationError, match="unknown identity"):
            PiRequest(digits=10, identity="euler")
