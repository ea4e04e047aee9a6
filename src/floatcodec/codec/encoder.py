"""
Encoder — точный модуль → битовые поля IEEE-754

Алгоритм:
1. NaN/Inf разрешаются до численной работы (ненулевой payload NaN сохраняется)
2. Модуль <= min_positive_halved → ноль (flush-to-zero)
3. Нормализация модуля в [1, 2) с оценкой экспоненты через binary_log_estimate
4. Переполнение экспоненты → Inf
5. Субнормальные числа: сдвиг вправо, скрытого бита нет
6. Извлечение mantissa_bits бит удвоением остатка
7. Округление round-to-nearest, ties-to-even с переносом;
   перенос за старший бит увеличивает экспоненту (и может дать Inf)

Ни на одном шаге не используется float — только Rational и целые.
"""

import logging

from floatcodec.core.domain.float_value import FloatValue
from floatcodec.core.domain.format_params import FormatParams
from floatcodec.core.math.rational import HALF, ONE, TWO, ZERO, Rational, times_power_of_two

logger = logging.getLogger(__name__)


def _special_bits(value: FloatValue, params: FormatParams, fill: int) -> FloatValue:
    return value.model_copy(
        update={
            "magnitude": ZERO,
            "exponent": params.exp_sentinel,
            "mantissa_bits": (fill,) * params.mantissa_bits,
        }
    )


def _infinity_bits(value: FloatValue, params: FormatParams) -> FloatValue:
    return _special_bits(value, params, 0).model_copy(update={"is_inf": True})


def _normalize(magnitude: Rational) -> tuple[Rational, int]:
    """
    Приведение положительного модуля к виду val * 2^exp, где 1 <= val < 2.

    Оценка log2 отличается от точного значения не более чем на единицу,
    поэтому циклы коррекции делают O(1) шагов.
    """
    num, den = magnitude.num, magnitude.den
    exp = magnitude.binary_log_estimate()
    if exp > 0:
        den <<= exp
    elif exp < 0:
        num <<= -exp
    # Слишком большое значение
    while num >= den << 1:
        den <<= 1
        exp += 1
    # Слишком маленькое значение
    while num < den:
        num <<= 1
        exp -= 1
    return Rational(num, den), exp


def _increment(mantissa: list[int]) -> bool:
    """
    Прибавление единицы к мантиссе как к двоичному числу.

    Returns:
        True если перенос ушёл за старший бит (все биты стали нулями)
    """
    index = len(mantissa) - 1
    while index >= 0:
        if mantissa[index] == 0:
            mantissa[index] = 1
            return False
        mantissa[index] = 0
        index -= 1
    return True


def encode(value: FloatValue, params: FormatParams) -> FloatValue:
    """
    Вычисление битовых полей (exponent, mantissa_bits) из точного модуля.

    Args:
        value: Значение с заполненным magnitude (или NaN/Inf)
        params: Параметры формата

    Returns:
        Новый FloatValue с заполненными битовыми полями. При переполнении
        is_inf=True; при flush-to-zero модуль обнуляется.

    Examples:
        >>> from floatcodec.core.domain.format_params import format_params
        >>> encode(FloatValue.from_int(1), format_params(64)).exponent
        0
    """
    if value.is_nan:
        bits = value.mantissa_bits
        if bits is not None and len(bits) == params.mantissa_bits and any(bits):
            # Payload декодированного NaN сохраняется
            return value.model_copy(update={"exponent": params.exp_sentinel})
        return _special_bits(value, params, 1)
    if value.is_inf:
        return _infinity_bits(value, params)

    magnitude = value.magnitude
    if magnitude.is_zero() or magnitude.le(params.min_positive_halved):
        if not magnitude.is_zero():
            logger.debug("flush to zero: %s <= %s", magnitude, params.min_positive_halved)
        return value.model_copy(
            update={
                "magnitude": ZERO,
                "exponent": params.min_exponent,
                "mantissa_bits": (0,) * params.mantissa_bits,
            }
        )

    val, exp = _normalize(magnitude)

    if exp >= params.exp_sentinel:
        logger.debug("overflow to infinity: exponent %d >= %d", exp, params.exp_sentinel)
        return _infinity_bits(value, params)

    if exp < params.min_normal_exponent:
        # Субнормальное число: сдвиг вправо даёт ведущие нули мантиссы
        val = val.div(times_power_of_two(1, params.min_normal_exponent - exp))
        exp = params.min_exponent
    else:
        # Скрытый бит
        val = val.sub(ONE)

    mantissa: list[int] = []
    for _ in range(params.mantissa_bits):
        val = val.mul(TWO)
        if val.ge(ONE):
            mantissa.append(1)
            val = val.sub(ONE)
        else:
            mantissa.append(0)

    # val — остаток для округления
    if val.gt(HALF) or (val.eq(HALF) and mantissa[-1] == 1):
        if _increment(mantissa):
            # Мантисса переполнилась до 1.000...: одна ступень экспоненты вверх
            # (для субнормальных чисел это переход к наименьшему нормальному)
            exp += 1
            if exp == params.exp_sentinel:
                logger.debug("rounding carried into infinity")
                return _infinity_bits(value, params)

    return value.model_copy(update={"exponent": exp, "mantissa_bits": tuple(mantissa)})
