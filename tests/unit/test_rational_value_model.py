"""
Тесты для RationalValue — структурированная форма Rational

Проверяет:
1. Создание и валидацию модели Pydantic
2. Отклонение неканонических пар
3. Immutability (frozen=True)
4. Сериализацию/десериализацию JSON
"""

import json

import pytest
from pydantic import ValidationError

from exact_arithmetic.core.domain import RationalValue
from exact_arithmetic.core.math.rational import Rational


class TestRationalValue:
    """Тесты для модели RationalValue"""

    @pytest.fixture
    def three_quarters(self) -> RationalValue:
        return RationalValue(numerator=3, denominator=4)

    def test_creation(self, three_quarters: RationalValue) -> None:
        assert three_quarters.numerator == 3
        assert three_quarters.denominator == 4

    def test_immutable(self, three_quarters: RationalValue) -> None:
        with pytest.raises(ValidationError):
            three_quarters.numerator = 1  # type: ignore

    def test_from_rational(self) -> None:
        value = RationalValue.from_rational(Rational(-6, 8))
        assert (value.numerator, value.denominator) == (-3, 4)

    def test_to_rational(self, three_quarters: RationalValue) -> None:
        assert three_quarters.to_rational() == Rational(3, 4)

    def test_str(self, three_quarters: RationalValue) -> None:
        assert str(three_quarters) == "3/4"
        assert str(RationalValue(numerator=5, denominator=1)) == "5"

    def test_zero_denominator_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RationalValue(numerator=1, denominator=0)

    def test_negative_denominator_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RationalValue(numerator=1, denominator=-2)

    def test_unreduced_pair_rejected(self) -> None:
        with pytest.raises(ValidationError, match="not reduced"):
            RationalValue(numerator=6, denominator=8)

    def test_non_canonical_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="0/1"):
            RationalValue(numerator=0, denominator=5)

    def test_strict_integers(self) -> None:
        """Строки и float не приводятся к int"""
        with pytest.raises(ValidationError):
            RationalValue(numerator="3", denominator=4)  # type: ignore
        with pytest.raises(ValidationError):
            RationalValue(numerator=3.0, denominator=4)  # type: ignore

    def test_json_round_trip(self) -> None:
        value = RationalValue.from_rational(Rational(-22, 7))
        data = json.loads(value.model_dump_json())
        assert data == {"numerator": -22, "denominator": 7}

        restored = RationalValue.model_validate_json(value.model_dump_json())
        assert restored == value
        assert restored.to_rational() == Rational(-22, 7)

    def test_json_non_canonical_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RationalValue.model_validate_json('{"numerator": 2, "denominator": 4}')
