"""
Numerical Safeguards — проверки float на границе с точной арифметикой

Float попадает в точную арифметику только в двух местах: конструирование
Rational из float и параметр точности этого конструирования. Модуль
отсекает значения, которые не имеют рационального представления.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в числитель/знаменатель
2. Параметры точности всегда положительные и конечные
"""

import math
import sys
from typing import Final

# Максимальный знаменатель, при котором r * denominator ещё вычислим во float
FLOAT_SCALE_MAX: Final[float] = sys.float_info.max


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что float конечный.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value равно NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a finite float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_scale(denominator: int, value: float) -> None:
    """
    Проверка, что масштабирующий знаменатель остаётся в диапазоне float.

    Для очень малых |value| цикл масштабирования уводит знаменатель за
    пределы float, и произведение value * denominator не вычислимо.

    Args:
        denominator: Степень десяти, накопленная циклом масштабирования
        value: Исходное float значение

    Raises:
        ValueError: Если denominator > FLOAT_SCALE_MAX
    """
    if denominator > FLOAT_SCALE_MAX:
        raise ValueError(
            f"Cannot scale {value!r} to a rational: "
            f"scaling denominator exceeds the float range"
        )
