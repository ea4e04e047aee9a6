"""
DecimalFormatter — кратчайшая десятичная запись, однозначно восстанавливающая биты

Алгоритм Burger/Dybvig в точной рациональной арифметике (без оптимизаций):
1. value = v * 2^e (v включает скрытый бит для нормальных чисел)
2. Соседние представимые значения pred/succ; на границе степени двойки
   (мантисса 000...0, нормальное число выше наименьшей экспоненты) нижний
   сосед ближе: (2v - 1) * 2^(e - 1)
3. low/high — середины интервалов к соседям; границы включаются только если
   последний бит мантиссы чётный (ties-to-even)
4. k — наименьшее целое с 10^k >= high; если high включается и равна 10^k,
   k увеличивается на единицу, чтобы сама граница 10^k осталась кандидатом
5. Цифры извлекаются по одной; кандидаты d1 (цифры как есть) и d2 (последняя
   цифра + 1) проверяются против low/high; первый подходящий — кратчайший

Цикл извлечения цифр не ограничен статически, но завершается для всех
поддерживаемых разрядностей: интервал (low, high) имеет конечную ширину,
и десятичный кандидат попадает в него не более чем через несколько сотен цифр.
"""

from floatcodec.codec.encoder import encode
from floatcodec.core.domain.float_value import FloatValue
from floatcodec.core.domain.format_params import FormatParams
from floatcodec.core.math.rational import Rational, times_power_of_ten, times_power_of_two


def _from_digits(digits: list[int], k: int) -> Rational:
    """Значение 0.d1d2...dn * 10^k."""
    return times_power_of_ten(int("".join(map(str, digits))), k - len(digits))


def _midpoint(a: Rational, b: Rational) -> Rational:
    total = a.add(b)
    return Rational(total.num, total.den << 1)


def _decimal_exponent(high: Rational, inclusive: bool) -> int:
    """
    Наименьшее k, для которого 10^k >= high (10^k > high при inclusive).

    Постусловие: 10^(k-1) < high <= 10^k, либо 10^(k-1) == high при inclusive.
    Во втором случае первая цифра равна 0, а кандидат d2 = [1] совпадает с high.
    """
    k = high.decimal_log_ceiling_estimate()
    while times_power_of_ten(1, k).lt(high):
        k += 1
    while times_power_of_ten(1, k - 1).ge(high):
        k -= 1
    if inclusive and times_power_of_ten(1, k).eq(high):
        k += 1
    return k


def shortest_digits(value: FloatValue, params: FormatParams) -> tuple[int, list[int]]:
    """
    Кратчайшие десятичные цифры конечного ненулевого закодированного значения.

    Args:
        value: Конечное ненулевое значение с заполненными битовыми полями
        params: Параметры формата

    Returns:
        (k, digits): значение ≈ 0.d1d2...dn * 10^k
    """
    mantissa = value.mantissa_bits
    is_even = mantissa[-1] == 0

    v = 0
    for bit in mantissa:
        v = (v << 1) | bit
    if value.exponent == params.min_exponent:
        subnormal = True
        e = params.min_normal_exponent - params.mantissa_bits
    else:
        subnormal = False
        v |= 1 << params.mantissa_bits
        e = value.exponent - params.mantissa_bits

    succ = times_power_of_two(v + 1, e)
    if not subnormal and value.exponent > params.min_normal_exponent and not any(mantissa):
        # Граница степени двойки: нижний сосед на полшага ближе
        pred = times_power_of_two(2 * v - 1, e - 1)
    else:
        pred = times_power_of_two(v - 1, e)
    exact = times_power_of_two(v, e)

    low = _midpoint(exact, pred)
    high = _midpoint(exact, succ)

    k = _decimal_exponent(high, is_even)
    # Scratch-копия, мутируется только внутри цикла
    q = exact.div(times_power_of_ten(1, k))
    digits: list[int] = []
    while True:
        q._multiply_by_ten_in_place()
        digit = q.floor()
        digits.append(digit)

        candidate1 = _from_digits(digits, k)
        cond1 = (is_even and candidate1.ge(low)) or candidate1.gt(low)

        cond2 = False
        if digit < 9:
            rounded_up = digits[:-1] + [digit + 1]
            candidate2 = _from_digits(rounded_up, k)
            cond2 = (is_even and candidate2.le(high)) or candidate2.lt(high)

        if cond1 and not cond2:
            return k, digits
        if cond2 and not cond1:
            return k, rounded_up
        if cond1 and cond2:
            # Оба подходят: ближайший к точному значению
            if candidate1.sub(exact).abs().lt(candidate2.sub(exact).abs()):
                return k, digits
            return k, rounded_up

        q._subtract_int_in_place(digit)


def render_decimal(negative: bool, k: int, digits: list[int], display_width: int) -> str:
    """
    Строковое представление 0.d1d2...dn * 10^k.

    Фиксированная точка, если запись укладывается в display_width,
    иначе научная нотация d.dddEn.

    Examples:
        >>> render_decimal(False, 1, [1], 17)
        '1.0'
        >>> render_decimal(True, -2, [1, 5], 17)
        '-0.0015'
        >>> render_decimal(False, 21, [1], 17)
        '1E20'
    """
    sign = "-" if negative else ""
    text = "".join(map(str, digits))
    if len(digits) <= k < display_width:
        # Целые числа без показателя степени
        return f"{sign}{text}{'0' * (k - len(digits))}.0"
    if k < 1 and len(digits) - k <= display_width:
        # Модуль меньше единицы без показателя степени
        return f"{sign}0.{'0' * -k}{text}"

    # По умолчанию точка после первой цифры, но сдвигается если возможно
    index = k if 1 <= k < len(digits) else 1
    result = sign + text[:index]
    if index < len(digits):
        result += "." + text[index:]
    if k != index:
        result += f"E{k - index}"
    return result


def format_value(value: FloatValue, params: FormatParams) -> str:
    """
    Кратчайшая десятичная запись значения.

    Незакодированное значение сначала кодируется в формате params.
    Специальные значения: NaN, Inf, -Inf, 0.0, -0.0.

    Args:
        value: Значение
        params: Параметры формата

    Returns:
        Строка, которая при разборе и кодировании даёт те же биты

    Examples:
        >>> from floatcodec.core.math.rational import Rational
        >>> from floatcodec.core.domain.format_params import format_params
        >>> format_value(FloatValue(magnitude=Rational(1, 10)), format_params(64))
        '0.1'
    """
    if not value.is_encoded:
        value = encode(value, params)
    if value.is_nan:
        return "NaN"
    sign = "-" if value.sign else ""
    if value.is_inf:
        return f"{sign}Inf"
    if value.exponent == params.min_exponent and not any(value.mantissa_bits):
        return f"{sign}0.0"
    k, digits = shortest_digits(value, params)
    return render_decimal(value.sign, k, digits, params.display_width)
