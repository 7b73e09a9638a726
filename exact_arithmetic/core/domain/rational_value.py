"""
RationalValue — структурированное представление Rational

Immutable Pydantic модель для обмена точными значениями в JSON
({"numerator": n, "denominator": d}). Соответствует схеме contracts/schema/rational.json.

Модель принимает только каноническую пару: неканоническая запись (например, 6/8)
отклоняется, а не сокращается молча.
"""

from pydantic import BaseModel, Field, model_validator

from exact_arithmetic.core.math.gcd import gcd
from exact_arithmetic.core.math.rational import Rational


class RationalValue(BaseModel):
    """
    Каноническая пара (numerator, denominator).

    Immutable модель (frozen=True). Все значения, полученные через
    from_rational, автоматически канонические.
    """

    numerator: int = Field(..., description="Числитель (несёт знак значения)")
    denominator: int = Field(..., gt=0, description="Знаменатель (всегда положительный)")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def validate_canonical(self) -> "RationalValue":
        """
        Проверка канонической формы.

        - numerator == 0 ⇒ denominator == 1
        - numerator != 0 ⇒ gcd(|numerator|, denominator) == 1
        """
        if self.numerator == 0:
            if self.denominator != 1:
                raise ValueError(
                    f"zero must be stored as 0/1, got 0/{self.denominator}"
                )
            return self

        factor = gcd(self.numerator, self.denominator)
        if factor != 1:
            raise ValueError(
                f"{self.numerator}/{self.denominator} is not reduced "
                f"(common factor {factor})"
            )
        return self

    @classmethod
    def from_rational(cls, r: Rational) -> "RationalValue":
        """
        Структурированная форма Rational.

        Args:
            r: Исходное значение

        Returns:
            RationalValue с теми же компонентами
        """
        return cls(numerator=r.numerator, denominator=r.denominator)

    def to_rational(self) -> Rational:
        """
        Обратная конверсия в Rational.

        Returns:
            Rational, равный исходному значению
        """
        return Rational(self.numerator, self.denominator)

    def __str__(self) -> str:
        return str(self.to_rational())
