"""
Rational — точное рациональное число

Дробь двух целых чисел в канонической форме (сокращённая, знаменатель > 0).
Арифметика, сравнение и текстовый формат без ошибок округления float.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 в любом наблюдаемом состоянии
2. gcd(|numerator|, denominator) == 1 при numerator != 0; ноль хранится как 0/1
3. Знак значения несёт только numerator
4. Нормализация (normalize) — единственная точка входа для сырой пары;
   экземпляры immutable, поля доступны только на чтение

ФОРМУЛЫ (cross-multiplication):
    a/b + c/d = (a*d + c*b) / (b*d)
    a/b - c/d = (a*d - c*b) / (b*d)
    a/b * c/d = (a*c) / (b*d)
    a/b / c/d = (a*d) / (b*c)        c == 0 → DivideByZeroError
    a/b < c/d  ⇔  a*d < c*b          (b > 0, d > 0 по инварианту 1)

ТЕКСТОВЫЙ ФОРМАТ:
    "<numerator>" если denominator == 1, иначе "<numerator>/<denominator>"
"""

import logging
import re
from typing import Final, Optional, Union

from exact_arithmetic.core.math.gcd import gcd
from exact_arithmetic.core.math.numerical_safeguards import (
    validate_finite,
    validate_positive,
    validate_scale,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Порог масштабирования при конструировании из float:
# |r| умножается на 10 до достижения порога (~6-7 значащих десятичных цифр)
FLOAT_SCALING_PRECISION: Final[float] = 1_000_000.0

# Литерал: целое со знаком, опционально "/" сразу за ним и второе целое.
# Пробелы допустимы в начале и перед делителем, но не в конце.
# Общий источник грамматики для парсера и JSON Schema контракта.
LITERAL_REGEX: Final[str] = r"\s*([+-]?[0-9]+)(?:/\s*([+-]?[0-9]+))?"

_LITERAL_PATTERN: Final = re.compile(LITERAL_REGEX)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivideByZeroError(ZeroDivisionError):
    """
    Нормализация обнаружила нулевой знаменатель.

    Возникает при явном конструировании с divisor == 0, делении на нулевой
    Rational и разборе литерала вида "7/0".
    """

    pass


class RationalFormatError(ValueError):
    """
    Текст не является корректным литералом Rational.

    Attributes:
        text: Исходная строка (для диагностики)
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"{text!r} cannot be parsed as a Rational")


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение пары (numerator, denominator) к канонической форме.

    Алгоритм:
        1. denominator == 0 → DivideByZeroError
        2. denominator < 0 → смена знака обоих компонентов
        3. numerator == 0 или denominator == 1 → denominator = 1
        4. Иначе — сокращение на gcd(numerator, denominator)

    Args:
        numerator: Числитель (любой знак)
        denominator: Знаменатель (любой знак, кроме нуля)

    Returns:
        Каноническая пара (numerator, denominator)

    Raises:
        DivideByZeroError: Если denominator == 0

    Examples:
        >>> normalize(6, 8)
        (3, 4)
        >>> normalize(-1, -2)
        (1, 2)
        >>> normalize(0, 5)
        (0, 1)
    """
    if denominator == 0:
        raise DivideByZeroError(f"Zero denominator in {numerator}/{denominator}")

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    if numerator == 0 or denominator == 1:
        return numerator, 1

    factor = gcd(numerator, denominator)
    return numerator // factor, denominator // factor


def _scale_float(value: float, precision: float) -> tuple[int, int]:
    """
    Десятичное масштабирование float в сырую пару (numerator, denominator).

    Аппроксимация с ограниченной точностью, не точная конверсия двоичной дроби.
    """
    validate_finite(value, "value")
    validate_positive(precision, "precision")

    if value == 0.0:
        # Цикл масштабирования не завершается для нуля
        return 0, 1

    x = abs(value)
    denominator = 1
    while x < precision:
        x *= 10
        denominator *= 10

    validate_scale(denominator, value)

    # int() усекает к нулю
    numerator = int(value * denominator)

    logger.debug(
        "Approximated float %r as %d/%d (precision=%s)",
        value,
        numerator,
        denominator,
        precision,
    )
    return numerator, denominator


def _parse_literal(text: str) -> tuple[int, int]:
    """
    Разбор литерала в сырую (ненормализованную) пару.

    Формат проверяется целиком до нормализации: "7/0x" — ошибка формата,
    "7/0" — корректный литерал с нулевым делителем.
    """
    match = _LITERAL_PATTERN.fullmatch(text)
    if match is None:
        logger.debug("Rejected rational literal %r", text)
        raise RationalFormatError(text)

    numerator, divisor = match.groups()
    try:
        return int(numerator), (int(divisor) if divisor is not None else 1)
    except ValueError as e:
        # Превышен лимит длины int-конверсии (sys.set_int_max_str_digits)
        logger.debug("Rejected oversized rational literal of %d chars", len(text))
        raise RationalFormatError(text) from e


def _is_integer(value: object) -> bool:
    # bool — подкласс int, но не целое число в смысле Rational
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# RATIONAL
# =============================================================================


class Rational:
    """
    Точное рациональное число в канонической форме.

    Конструирование:
        Rational()            → 0/1
        Rational(n, d)        → n/d после нормализации (d == 0 → DivideByZeroError)
        Rational(i)           → i/1
        Rational(r: float)    → десятичная аппроксимация (см. from_float)
        Rational(text: str)   → разбор литерала "n" или "n/d"
        Rational(other)       → равное значение

    Immutable: составное присваивание (+=, -=, *=, /=) связывает имя с новым
    значением, вычисленным той же формулой, что и бинарный оператор.
    Операнды int продвигаются до n/1; float не продвигаются.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(
        self,
        value: Union["Rational", int, float, str] = 0,
        divisor: Optional[int] = None,
    ):
        if divisor is not None:
            if not (_is_integer(value) and _is_integer(divisor)):
                raise TypeError(
                    f"Rational(dividend, divisor) requires two integers, "
                    f"got {type(value).__name__} and {type(divisor).__name__}"
                )
            numerator, denominator = normalize(int(value), int(divisor))
        elif isinstance(value, Rational):
            numerator, denominator = value._numerator, value._denominator
        elif _is_integer(value):
            # Уже каноническая форма, сокращение не требуется
            numerator, denominator = int(value), 1
        elif isinstance(value, float):
            numerator, denominator = normalize(
                *_scale_float(value, FLOAT_SCALING_PRECISION)
            )
        elif isinstance(value, str):
            numerator, denominator = normalize(*_parse_literal(value))
        else:
            raise TypeError(
                f"Cannot construct a Rational from {type(value).__name__}"
            )

        self._numerator = numerator
        self._denominator = denominator

    @classmethod
    def _from_canonical(cls, numerator: int, denominator: int) -> "Rational":
        """Сборка из уже канонической пары без повторной нормализации."""
        instance = cls.__new__(cls)
        instance._numerator = numerator
        instance._denominator = denominator
        return instance

    @classmethod
    def from_float(
        cls, value: float, precision: float = FLOAT_SCALING_PRECISION
    ) -> "Rational":
        """
        Аппроксимация float десятичным масштабированием.

        Алгоритм:
            x = |value|, denominator = 1
            пока x < precision: x *= 10, denominator *= 10
            numerator = trunc(value * denominator), затем нормализация

        Args:
            value: Конечный float
            precision: Порог масштабирования (default: FLOAT_SCALING_PRECISION)

        Returns:
            Rational с точностью ~log10(precision) значащих цифр

        Raises:
            ValueError: Если value NaN/Inf, precision не положительный,
                или |value| слишком мал для масштабирования во float

        Examples:
            >>> Rational.from_float(0.5)
            Rational(1, 2)
            >>> Rational.from_float(0.1)
            Rational(1, 10)
            >>> Rational.from_float(3.14159, precision=100.0)
            Rational(157, 50)
        """
        return cls._from_canonical(*normalize(*_scale_float(value, precision)))

    @staticmethod
    def parse(text: str) -> "Rational":
        """
        Разбор текстового литерала.

        Raises:
            RationalFormatError: Некорректный литерал
            DivideByZeroError: Корректный литерал с нулевым делителем
        """
        if not isinstance(text, str):
            raise TypeError(f"Rational literal must be str, got {type(text).__name__}")
        return Rational._from_canonical(*normalize(*_parse_literal(text)))

    # -------------------------------------------------------------------------
    # Компоненты
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Union["Rational", int]) -> "Rational":
        other = _as_rational(other)
        if other is None:
            return NotImplemented
        a, b = self._numerator, self._denominator
        c, d = other._numerator, other._denominator
        return Rational(a * d + c * b, b * d)

    def __radd__(self, other: Union["Rational", int]) -> "Rational":
        other = _as_rational(other)
        if other is None:
            return NotImplemented
        return other + self

    def __sub__(self, other: Union["Rational", int]) -> "Rational":
        other = _as_rational(other)
        if other is None:
            return NotImplemented
        a, b = self._numerator, self._denominator
        c, d = other._numerator, other._denominator
        return Rational(a * d - c * b, b * d)

    def __rsub__(self, other: Union["Rational", int]) -> "Rational":
        other = _as_rational(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: Union["Rational", int]) -> "Rational":
        other = _as_rational(other)
        if other is None:
            return NotImplemented
        return Rational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def __rmul__(self, other: Union["Rational", int]) -> "Rational":
        other = _as_rational(other)
        if other is None:
            return NotImplemented
        return other * self

    def __truediv__(self, other: Union["Rational", int]) -> "Rational":
        other = _as_rational(other)
        if other is None:
            return NotImplemented
        # other == 0 → нулевой знаменатель → DivideByZeroError в normalize
        return Rational(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def __rtruediv__(self, other: Union["Rational", int]) -> "Rational":
        other = _as_rational(other)
        if other is None:
            return NotImplemented
        return other / self

    def __neg__(self) -> "Rational":
        return Rational.negate(self)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return Rational.abs(self)

    @staticmethod
    def abs(r: "Rational") -> "Rational":
        """Модуль: тот же знаменатель, |numerator|."""
        return Rational._from_canonical(abs(r._numerator), r._denominator)

    @staticmethod
    def negate(r: "Rational") -> "Rational":
        """Смена знака: знаменатель всегда положителен, знак несёт numerator."""
        return Rational._from_canonical(-r._numerator, r._denominator)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if isinstance(other, Rational):
            return (
                self._numerator == other._numerator
                and self._denominator == other._denominator
            )
        if _is_integer(other):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        # Совместимо с hash(int) для целых значений
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def _cross(self, other) -> Optional[tuple[int, int]]:
        """(a*d, c*b) для сравнения a/b с c/d."""
        other = _as_rational(other)
        if other is None:
            return None
        return (
            self._numerator * other._denominator,
            other._numerator * self._denominator,
        )

    def __lt__(self, other) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] < cross[1]

    def __gt__(self, other) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] > cross[1]

    def __le__(self, other) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] <= cross[1]

    def __ge__(self, other) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] >= cross[1]

    def __bool__(self) -> bool:
        return self._numerator != 0

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_int(self) -> int:
        """
        Целая часть с усечением к нулю.

        Examples:
            >>> Rational(7, 2).to_int()
            3
            >>> Rational(-7, 2).to_int()
            -3
        """
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient

    def to_double(self) -> float:
        """
        Конверсия во float.

        Единственная операция, где точность намеренно теряется
        (стандартное округление float).
        """
        return self._numerator / self._denominator

    def __int__(self) -> int:
        return self.to_int()

    def __trunc__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return self.to_double()

    # -------------------------------------------------------------------------
    # Текст, копирование, pickle
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return format_rational(self)

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __reduce__(self):
        return (Rational, (self._numerator, self._denominator))

    def __copy__(self) -> "Rational":
        return self

    def __deepcopy__(self, memo) -> "Rational":
        return self


def _as_rational(value: object) -> Optional[Rational]:
    """Продвижение операнда: Rational как есть, int → n/1, иначе None."""
    if isinstance(value, Rational):
        return value
    if _is_integer(value):
        return Rational._from_canonical(int(value), 1)
    return None


# =============================================================================
# ТЕКСТОВЫЙ ФОРМАТ
# =============================================================================


def format_rational(r: Rational) -> str:
    """
    Каноническая запись: "n" при denominator == 1, иначе "n/d".

    Examples:
        >>> format_rational(Rational(6, 8))
        '3/4'
        >>> format_rational(Rational(0, 5))
        '0'
    """
    if r.denominator == 1:
        return str(r.numerator)
    return f"{r.numerator}/{r.denominator}"


def parse_rational(text: str) -> Rational:
    """
    Разбор литерала "n" или "n/d" (см. Rational.parse).

    Examples:
        >>> parse_rational("-3/-6")
        Rational(1, 2)
        >>> parse_rational(" 42 ")
        Rational(42, 1)
    """
    return Rational.parse(text)
