"""
FormatParams — параметры двоичного формата IEEE-754 для заданной разрядности

Поддерживаемые разрядности: 16, 32, 64, 128 бит.

Параметры формата передаются явно в каждую операцию кодека/парсера/форматтера;
глобального "текущего формата" нет, поэтому значения разных разрядностей
можно обрабатывать одновременно без взаимного влияния.
"""

from dataclasses import dataclass
from typing import Final

from floatcodec.core.math.rational import Rational, times_power_of_two


# =============================================================================
# КОНСТАНТЫ ФОРМАТОВ
# =============================================================================

SUPPORTED_BIT_WIDTHS: Final[tuple[int, ...]] = (16, 32, 64, 128)

DEFAULT_BIT_WIDTH: Final[int] = 64

# total_bits -> (exp_sentinel, mantissa_bits, display_width)
# display_width — максимальная длина записи без научной нотации
_FORMAT_TABLE: Final[dict[int, tuple[int, int, int]]] = {
    16: (16, 10, 5),
    32: (128, 23, 9),
    64: (1024, 52, 17),
    128: (16384, 112, 36),
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedBitWidth(ValueError):
    """Запрошенная разрядность не входит в SUPPORTED_BIT_WIDTHS."""

    pass


# =============================================================================
# FORMAT PARAMS
# =============================================================================


@dataclass(frozen=True)
class FormatParams:
    """
    Неизменяемые параметры формата.

    exp_sentinel — несмещённая экспонента, зарезервированная для NaN/Inf.
    min_positive_halved — половина наименьшего положительного субнормального
    числа; всё, что не больше этого порога, кодируется как ноль.
    """

    total_bits: int
    mantissa_bits: int
    exp_sentinel: int
    min_positive_halved: Rational
    display_width: int

    @property
    def exponent_bits(self) -> int:
        """Ширина поля экспоненты (без знака и мантиссы)."""
        return self.total_bits - self.mantissa_bits - 1

    @property
    def hex_digits(self) -> int:
        return self.total_bits // 4

    @property
    def min_exponent(self) -> int:
        """Экспонента нуля и субнормальных чисел в закодированном виде."""
        return 1 - self.exp_sentinel

    @property
    def min_normal_exponent(self) -> int:
        """Наименьшая экспонента нормализованного числа."""
        return 2 - self.exp_sentinel

    @property
    def exponent_bias(self) -> int:
        return self.exp_sentinel - 1


def _build_params(total_bits: int) -> FormatParams:
    exp_sentinel, mantissa_bits, display_width = _FORMAT_TABLE[total_bits]
    return FormatParams(
        total_bits=total_bits,
        mantissa_bits=mantissa_bits,
        exp_sentinel=exp_sentinel,
        min_positive_halved=times_power_of_two(1, 1 - mantissa_bits - exp_sentinel),
        display_width=display_width,
    )


_PARAMS: Final[dict[int, FormatParams]] = {bits: _build_params(bits) for bits in SUPPORTED_BIT_WIDTHS}


def format_params(bits: int = DEFAULT_BIT_WIDTH) -> FormatParams:
    """
    Параметры формата для разрядности bits.

    Args:
        bits: Разрядность (16, 32, 64 или 128; default: 64)

    Returns:
        Неизменяемый FormatParams (один экземпляр на разрядность)

    Raises:
        UnsupportedBitWidth: Если разрядность не поддерживается

    Examples:
        >>> format_params(32).mantissa_bits
        23
        >>> format_params(16).exp_sentinel
        16
    """
    try:
        return _PARAMS[bits]
    except KeyError:
        raise UnsupportedBitWidth(
            f"bit width must be one of {SUPPORTED_BIT_WIDTHS}, got {bits}"
        ) from None
