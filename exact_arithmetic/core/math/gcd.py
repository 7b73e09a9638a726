"""
GCD — наибольший общий делитель

Единственный потребитель — нормализация Rational (сокращение дроби).

ИНВАРИАНТЫ:
1. Результат всегда неотрицательный (знак аргументов игнорируется)
2. gcd(a, 0) == |a|, gcd(0, 0) == 0
"""


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель двух целых чисел (алгоритм Евклида).

    Принимает отрицательные аргументы: работает с абсолютными значениями,
    поэтому делитель всегда положительный (кроме gcd(0, 0) == 0).

    Args:
        a: Первое целое (любой знак)
        b: Второе целое (любой знак)

    Returns:
        Неотрицательный наибольший общий делитель

    Examples:
        >>> gcd(6, 8)
        2
        >>> gcd(-6, 8)
        2
        >>> gcd(7, 0)
        7
    """
    a = abs(a)
    b = abs(b)

    while b:
        a, b = b, a % b

    return a
