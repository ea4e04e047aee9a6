"""
ArithmeticOps — сложение, вычитание, умножение и деление с семантикой IEEE-754

Результат — точное значение (FloatValue с magnitude, без битовых полей);
округление до формата выполняет вызывающий код через encode/quantize.

Специальные значения:
- NaN в любом операнде → NaN (проверяется здесь, а не вызывающим кодом)
- Inf + (-Inf) → NaN; 0 * Inf → NaN; Inf / Inf → NaN; 0 / 0 → NaN
- x / 0 → ±Inf; x / Inf → ±0
- (-0) + (-0) → -0; точный ноль разности положительный
"""

from floatcodec.core.domain.float_value import FloatValue


def _signs_differ(a: FloatValue, b: FloatValue) -> bool:
    return a.sign != b.sign


def add(a: FloatValue, b: FloatValue) -> FloatValue:
    """
    Сумма a + b.

    Examples:
        >>> add(FloatValue.zero(True), FloatValue.zero(True)).sign
        True
        >>> add(FloatValue.infinity(), FloatValue.infinity(True)).is_nan
        True
    """
    if a.is_nan or b.is_nan:
        return FloatValue.nan()

    if a.is_inf or b.is_inf:
        if not b.is_inf:
            return FloatValue.infinity(a.sign)
        if not a.is_inf:
            return FloatValue.infinity(b.sign)
        if a.sign == b.sign:
            return FloatValue.infinity(a.sign)
        return FloatValue.nan()

    if a.is_zero and b.is_zero and a.sign and b.sign:
        return FloatValue.zero(negative=True)

    if a.sign == b.sign:
        return FloatValue(sign=a.sign, magnitude=a.magnitude.add(b.magnitude))

    # Разные знаки: знак результата определяет больший по модулю операнд
    return FloatValue.from_rational(a.signed_value().add(b.signed_value()))


def sub(a: FloatValue, b: FloatValue) -> FloatValue:
    """Разность a - b = a + (-b)."""
    if a.is_nan or b.is_nan:
        return FloatValue.nan()
    return add(a, FloatValue(sign=not b.sign, is_inf=b.is_inf, magnitude=b.magnitude))


def mul(a: FloatValue, b: FloatValue) -> FloatValue:
    """Произведение a * b (знак — XOR знаков операндов)."""
    if a.is_nan or b.is_nan:
        return FloatValue.nan()

    negative = _signs_differ(a, b)
    if a.is_inf or b.is_inf:
        if a.is_zero or b.is_zero:
            return FloatValue.nan()
        return FloatValue.infinity(negative)
    return FloatValue(sign=negative, magnitude=a.magnitude.mul(b.magnitude))


def div(a: FloatValue, b: FloatValue) -> FloatValue:
    """Частное a / b (знак — XOR знаков операндов)."""
    if a.is_nan or b.is_nan:
        return FloatValue.nan()

    negative = _signs_differ(a, b)
    if a.is_inf and b.is_inf:
        return FloatValue.nan()
    if a.is_inf:
        return FloatValue.infinity(negative)
    if b.is_inf:
        return FloatValue.zero(negative)
    if b.is_zero:
        if a.is_zero:
            return FloatValue.nan()
        return FloatValue.infinity(negative)
    return FloatValue(sign=negative, magnitude=a.magnitude.div(b.magnitude))
