"""
Decoder — битовые поля IEEE-754 → точный модуль

Обратная операция к encode:
- exponent == exp_sentinel: нулевая мантисса → Inf, иначе NaN
- exponent == 1 - exp_sentinel: нулевая мантисса → ноль, иначе субнормальное
  число (скрытый бит 0, эффективная экспонента 2 - exp_sentinel)
- иначе: скрытый бит 1, эффективная экспонента равна сохранённой

Модуль = (hidden << mantissa_bits | mantissa) * 2^(exp - mantissa_bits),
вычисляется сдвигами числителя или знаменателя.
"""

from typing import Sequence

from floatcodec.core.domain.float_value import FloatValue
from floatcodec.core.domain.format_params import FormatParams
from floatcodec.core.math.rational import ZERO, times_power_of_two


def mantissa_to_int(mantissa_bits: Sequence[int]) -> int:
    """Мантисса как целое (старший бит первым)."""
    result = 0
    for bit in mantissa_bits:
        result = (result << 1) | bit
    return result


def decode(
    exponent: int,
    mantissa_bits: Sequence[int],
    sign: bool,
    params: FormatParams,
) -> FloatValue:
    """
    Восстановление значения по битовым полям.

    Args:
        exponent: Несмещённая экспонента в диапазоне [1 - exp_sentinel, exp_sentinel]
        mantissa_bits: Ровно params.mantissa_bits бит (0/1)
        sign: Знаковый бит
        params: Параметры формата

    Returns:
        FloatValue с заполненными magnitude и битовыми полями

    Raises:
        ValueError: Если длина мантиссы, её содержимое или экспонента
            не соответствуют формату
    """
    bits = tuple(int(bit) for bit in mantissa_bits)
    if len(bits) != params.mantissa_bits:
        raise ValueError(
            f"mantissa must have {params.mantissa_bits} bits, got {len(bits)}"
        )
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError(f"mantissa must contain only 0 and 1, got {mantissa_bits!r}")
    if not params.min_exponent <= exponent <= params.exp_sentinel:
        raise ValueError(
            f"exponent must be in [{params.min_exponent}, {params.exp_sentinel}], got {exponent}"
        )

    fields = {"sign": sign, "exponent": exponent, "mantissa_bits": bits}
    fraction = mantissa_to_int(bits)

    if exponent == params.exp_sentinel:
        if fraction == 0:
            return FloatValue(is_inf=True, **fields)
        return FloatValue(is_nan=True, **fields)

    hidden = 1
    effective_exponent = exponent
    if exponent == params.min_exponent:
        if fraction == 0:
            return FloatValue(magnitude=ZERO, **fields)
        # Субнормальное число
        hidden = 0
        effective_exponent = params.min_normal_exponent

    significand = (hidden << params.mantissa_bits) | fraction
    magnitude = times_power_of_two(significand, effective_exponent - params.mantissa_bits)
    return FloatValue(magnitude=magnitude, **fields)
