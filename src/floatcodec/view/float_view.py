"""
FloatView — отображаемые поля закодированного значения

Чистые функции для внешнего слоя (страница, CLI):
- битовая и шестнадцатеричная запись шаблона
- разбор значения на поля (знак, экспонента, скрытый бит, мантисса)
- десятичное значение мантиссы и экспоненты
- обратное чтение отредактированных битовых полей (decode_fields)

Immutable Pydantic модель FloatView соответствует JSON Schema
(floatcodec/core/contracts/schema/float_view.json).
"""

import re

from pydantic import BaseModel, Field

from floatcodec.codec.decoder import decode
from floatcodec.codec.encoder import encode
from floatcodec.core.domain.float_value import FloatValue
from floatcodec.core.domain.format_params import FormatParams
from floatcodec.text.formatter import format_value


# =============================================================================
# FLOAT VIEW MODEL
# =============================================================================


class FloatView(BaseModel):
    """
    Набор строк для отображения одного значения.

    Immutable модель (frozen=True).
    """

    bits: int = Field(..., description="Разрядность формата")
    binary: str = Field(..., pattern="^0b[01]+$", description="Битовый шаблон")
    hexadecimal: str = Field(..., pattern="^0x[0-9A-F]+$", description="Шаблон в hex")
    sign_bit: str = Field(..., pattern="^[01]$", description="Знаковый бит")
    exponent_field: str = Field(..., pattern="^[01]+$", description="Смещённая экспонента")
    mantissa_field: str = Field(..., pattern="^[01]+$", description="Биты мантиссы")
    hidden_bit: str = Field(..., pattern="^[01 ]$", description="Скрытый бит или пробел")
    sign_text: str = Field(..., pattern="^[+-]?$", description="Знак для отображения")
    significand_text: str = Field(..., min_length=1, description="Десятичная мантисса")
    exponent_text: str = Field(..., description="Десятичная экспонента")
    text: str = Field(..., min_length=1, description="Кратчайшая десятичная запись")

    model_config = {"frozen": True}


# =============================================================================
# БИТОВЫЕ ЗАПИСИ
# =============================================================================


def _ensure_encoded(value: FloatValue, params: FormatParams) -> FloatValue:
    return value if value.is_encoded else encode(value, params)


def _exponent_field(value: FloatValue, params: FormatParams) -> str:
    return format(value.exponent + params.exponent_bias, f"0{params.exponent_bits}b")


def _bit_pattern(value: FloatValue, params: FormatParams) -> str:
    value = _ensure_encoded(value, params)
    sign_bit = "1" if value.sign else "0"
    mantissa = "".join(map(str, value.mantissa_bits))
    return sign_bit + _exponent_field(value, params) + mantissa


def to_bit_string(value: FloatValue, params: FormatParams) -> str:
    """
    Битовый шаблон "0b" + total_bits цифр.

    Examples:
        >>> from floatcodec.core.domain.format_params import format_params
        >>> to_bit_string(FloatValue.from_int(1), format_params(16))
        '0b0011110000000000'
    """
    return "0b" + _bit_pattern(value, params)


def to_hex_string(value: FloatValue, params: FormatParams) -> str:
    """
    Битовый шаблон "0x" + total_bits/4 шестнадцатеричных цифр (верхний регистр).

    Examples:
        >>> from floatcodec.core.domain.format_params import format_params
        >>> to_hex_string(FloatValue.from_int(1), format_params(32))
        '0x3F800000'
    """
    pattern = int(_bit_pattern(value, params), 2)
    return "0x" + format(pattern, f"0{params.hex_digits}X")


# =============================================================================
# ДЕСЯТИЧНЫЕ ПОЛЯ
# =============================================================================


def significand_text(value: FloatValue, params: FormatParams) -> str:
    """
    Десятичное значение мантиссы (без знака и экспоненты).

    Для нормальных чисел это 1.mantissa; у субнормальных мантисса сдвигается
    влево за первый единичный бит и показывается как 1.rest * 2^-index.
    """
    value = _ensure_encoded(value, params)
    if value.is_nan:
        return "NaN"
    if value.is_inf:
        return "Inf"
    mantissa = value.mantissa_bits
    if value.exponent == params.min_exponent:
        if not any(mantissa):
            return "0.0"
        index = mantissa.index(1) + 1
        mantissa = mantissa[index:] + (0,) * index
        exponent = -index
    else:
        exponent = 0
    return format_value(decode(exponent, mantissa, False, params), params)


def exponent_text(value: FloatValue, params: FormatParams) -> str:
    """Десятичная экспонента: +e/-e, 2 - sentinel для субнормальных, +0 для нуля."""
    value = _ensure_encoded(value, params)
    if value.is_nan or value.is_inf:
        return ""
    if value.exponent == params.min_exponent:
        if not any(value.mantissa_bits):
            return "+0"
        return str(params.min_normal_exponent)
    return f"{value.exponent:+d}"


def describe(value: FloatValue, params: FormatParams) -> FloatView:
    """
    Все отображаемые поля значения.

    Args:
        value: Значение (кодируется, если битовые поля ещё не заполнены)
        params: Параметры формата

    Returns:
        FloatView
    """
    value = _ensure_encoded(value, params)
    pattern = _bit_pattern(value, params)

    if value.is_nan or value.is_inf:
        hidden = " "
    elif value.exponent == params.min_exponent:
        hidden = "0"
    else:
        hidden = "1"

    if value.is_nan:
        sign = ""
    else:
        sign = "-" if value.sign else "+"

    return FloatView(
        bits=params.total_bits,
        binary="0b" + pattern,
        hexadecimal=to_hex_string(value, params),
        sign_bit=pattern[0],
        exponent_field=pattern[1 : 1 + params.exponent_bits],
        mantissa_field=pattern[1 + params.exponent_bits :],
        hidden_bit=hidden,
        sign_text=sign,
        significand_text=significand_text(value, params),
        exponent_text=exponent_text(value, params),
        text=format_value(value, params),
    )


# =============================================================================
# ЧТЕНИЕ ОТРЕДАКТИРОВАННЫХ ПОЛЕЙ
# =============================================================================


def _to_bit_chars(text: str) -> str:
    return re.sub(r"[^01]", "0", text)


def decode_fields(sign: str, exponent: str, mantissa: str, params: FormatParams) -> FloatValue:
    """
    Значение из отредактированных вручную полей.

    Args:
        sign: "1" — отрицательное значение, иначе положительное
        exponent: "+n"/"-n" — десятичная несмещённая экспонента; иначе
            смещённый битовый шаблон
        mantissa: биты мантиссы; посторонние символы считаются нулями,
            строка дополняется нулями СПРАВА
        params: Параметры формата

    Returns:
        Декодированный FloatValue
    """
    mantissa = _to_bit_chars(mantissa.strip())[: params.mantissa_bits] or "0"
    mantissa = mantissa.ljust(params.mantissa_bits, "0")

    exponent = exponent.strip()
    if exponent[:1] in ("+", "-"):
        digits = re.sub(r"[^0-9]", "", exponent).lstrip("0") or "0"
        # Длиннее любой экспоненты формата: заведомо вне диапазона
        unbiased = int(digits) if len(digits) <= 6 else params.exp_sentinel
        if exponent[0] == "-":
            unbiased = -unbiased
        if not params.min_exponent < unbiased < params.exp_sentinel:
            unbiased = 0
    else:
        field = _to_bit_chars(exponent)[-params.exponent_bits :] or "0"
        unbiased = int(field, 2) - params.exponent_bias

    return decode(unbiased, [int(ch) for ch in mantissa], sign.strip() == "1", params)
