"""
Rational — точная рациональная арифметика произвольной точности

Единственный числовой тип кодека: все вычисления (кодирование, декодирование,
парсинг, поиск кратчайшей десятичной записи) выполняются над дробями
numerator/denominator из целых Python произвольной длины.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1
3. Нулевой знаменатель никогда не представляется (ZeroDivisionError)
4. Значения никогда не конвертируются в float (ни для сравнения, ни для округления)
5. Публичные операции не мутируют операнды — всегда возвращается новый объект
"""

from math import gcd
from typing import Final

# log10(2) ≈ 30103 / 100000
_LOG10_2_NUM: Final[int] = 30103
_LOG10_2_DEN: Final[int] = 100000

# Ниже предела sys.get_int_max_str_digits() (4300 цифр ≈ 14284 бит)
_MAX_DECIMAL_TEXT_BITS: Final[int] = 14000


class Rational:
    """
    Несократимая дробь numerator/denominator.

    Все публичные операции возвращают новый объект. Мутирующие помощники
    (_subtract_int_in_place, _multiply_by_ten_in_place) предназначены только
    для локальных scratch-копий внутри циклов извлечения цифр.
    """

    __slots__ = ("num", "den")

    def __init__(self, num: int, den: int = 1):
        """
        Args:
            num: Числитель (любое целое)
            den: Знаменатель (ненулевое целое, default: 1)

        Raises:
            ZeroDivisionError: Если den == 0
        """
        if den == 0:
            raise ZeroDivisionError(f"Rational with zero denominator: {num}/0")
        self.num = int(num)
        self.den = int(den)
        if self.den != 1:
            self._cancel()

    def _cancel(self) -> None:
        """Сокращение на gcd и перенос знака в числитель."""
        g = gcd(self.num, self.den)
        if g > 1:
            self.num //= g
            self.den //= g
        if self.den < 0:
            self.num = -self.num
            self.den = -self.den

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Rational") -> "Rational":
        return Rational(self.num * other.den + self.den * other.num, self.den * other.den)

    def sub(self, other: "Rational") -> "Rational":
        return Rational(self.num * other.den - self.den * other.num, self.den * other.den)

    def mul(self, other: "Rational") -> "Rational":
        return Rational(self.num * other.num, self.den * other.den)

    def div(self, other: "Rational") -> "Rational":
        """
        Точное частное self / other.

        Raises:
            ZeroDivisionError: Если other равен нулю
        """
        if other.num == 0:
            raise ZeroDivisionError(f"division of {self} by zero")
        return Rational(self.num * other.den, self.den * other.num)

    def abs(self) -> "Rational":
        return Rational(-self.num, self.den) if self.num < 0 else Rational(self.num, self.den)

    def neg(self) -> "Rational":
        return Rational(-self.num, self.den)

    # =========================================================================
    # СРАВНЕНИЯ (только перекрёстное умножение, без деления)
    # =========================================================================

    def eq(self, other: "Rational") -> bool:
        return self.num * other.den == self.den * other.num

    def gt(self, other: "Rational") -> bool:
        # Знаковые short-circuit до перекрёстного умножения
        if self.num > 0 and other.num <= 0:
            return True
        if self.num <= 0 and other.num > 0:
            return False
        return self.num * other.den > self.den * other.num

    def ge(self, other: "Rational") -> bool:
        return self.gt(other) or self.eq(other)

    def lt(self, other: "Rational") -> bool:
        return other.gt(self)

    def le(self, other: "Rational") -> bool:
        return self.lt(other) or self.eq(other)

    def is_zero(self) -> bool:
        return self.num == 0

    def is_positive(self) -> bool:
        # Знаменатель всегда положителен
        return self.num > 0

    def is_negative(self) -> bool:
        return self.num < 0

    # =========================================================================
    # ЦЕЛАЯ ЧАСТЬ И ОЦЕНКИ ЛОГАРИФМОВ
    # =========================================================================

    def floor(self) -> int:
        """
        Целая часть неотрицательной дроби.

        Raises:
            ValueError: Если дробь отрицательная
        """
        if self.num < 0:
            raise ValueError(f"floor() requires a non-negative value, got {self}")
        return self.num // self.den

    def decimal_log_ceiling_estimate(self) -> int:
        """
        Грубая оценка ceil(log10(self)) для положительной дроби.

        Считается по длинам в битах (без перевода в десятичную строку),
        поэтому работает и для чисел длиннее предела int -> str.
        Результат отличается от точного не более чем на единицу;
        вызывающий код обязан уточнить его итерацией.

        Examples:
            >>> Rational(100).decimal_log_ceiling_estimate()
            2
            >>> Rational(1, 10).decimal_log_ceiling_estimate()
            0
        """
        bits = self.num.bit_length() - self.den.bit_length()
        return (bits * _LOG10_2_NUM) // _LOG10_2_DEN + 1

    def binary_log_estimate(self) -> int:
        """
        Грубая оценка log2(self) для положительной дроби.

        Используется как стартовая точка нормализации в энкодере
        (точный результат находится циклом удвоения/деления пополам).
        """
        return self.num.bit_length() - self.den.bit_length()

    # =========================================================================
    # SCRATCH-ПОМОЩНИКИ (только для локальных копий)
    # =========================================================================

    def _subtract_int_in_place(self, k: int) -> None:
        self.num -= k * self.den
        self._cancel()

    def _multiply_by_ten_in_place(self) -> None:
        self.num *= 10
        self._cancel()

    # =========================================================================
    # ПРОТОКОЛЫ PYTHON
    # =========================================================================

    def __add__(self, other: "Rational") -> "Rational":
        return self.add(other)

    def __sub__(self, other: "Rational") -> "Rational":
        return self.sub(other)

    def __mul__(self, other: "Rational") -> "Rational":
        return self.mul(other)

    def __truediv__(self, other: "Rational") -> "Rational":
        return self.div(other)

    def __neg__(self) -> "Rational":
        return self.neg()

    def __abs__(self) -> "Rational":
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.eq(other)

    def __lt__(self, other: "Rational") -> bool:
        return self.lt(other)

    def __le__(self, other: "Rational") -> bool:
        return self.le(other)

    def __gt__(self, other: "Rational") -> bool:
        return self.gt(other)

    def __ge__(self, other: "Rational") -> bool:
        return self.ge(other)

    def __hash__(self) -> int:
        return hash((self.num, self.den))

    def __repr__(self) -> str:
        return f"Rational({_int_text(self.num)}, {_int_text(self.den)})"

    def __str__(self) -> str:
        return f"{_int_text(self.num)}/{_int_text(self.den)}"


def _int_text(value: int) -> str:
    """Десятичная запись целого; длинные целые печатаются в hex."""
    if value.bit_length() > _MAX_DECIMAL_TEXT_BITS:
        return hex(value)
    return str(value)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Rational] = Rational(0)
ONE: Final[Rational] = Rational(1)
TWO: Final[Rational] = Rational(2)
HALF: Final[Rational] = Rational(1, 2)


# =============================================================================
# КОНСТРУКТОРЫ СТЕПЕНЕЙ
# =============================================================================


def times_power_of_two(val: int, exp: int) -> Rational:
    """
    Точное значение val * 2^exp (сдвигами, без деления).

    Examples:
        >>> times_power_of_two(3, 2)
        Rational(12, 1)
        >>> times_power_of_two(3, -2)
        Rational(3, 4)
    """
    if exp >= 0:
        return Rational(val << exp)
    return Rational(val, 1 << -exp)


def times_power_of_ten(val: int, exp: int) -> Rational:
    """
    Точное значение val * 10^exp.

    Examples:
        >>> times_power_of_ten(25, 1)
        Rational(250, 1)
        >>> times_power_of_ten(25, -2)
        Rational(1, 4)
    """
    if exp >= 0:
        return Rational(val * 10**exp)
    return Rational(val, 10**-exp)
