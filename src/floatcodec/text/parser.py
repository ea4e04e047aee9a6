"""
TextParser — текстовая запись → FloatValue

Грамматики (первое совпадение побеждает, пробелы по краям отбрасываются):
1. nan                       → NaN
2. [+-]inf                   → ±Inf
3. 0b + 1..total_bits бит    → битовый шаблон (дополняется нулями слева)
4. 0x + 1..total_bits/4 hex  → битовый шаблон
5. [+-]целое/целое           → точная дробь (x/0 → ±Inf, 0/0 → NaN)
6. десятичная запись         → [+-](цифры[.цифры] | .цифры)[E[+-]1-5 цифр]

Всё остальное → NaN: ошибка разбора выражается значением NaN, а не исключением.
"""

import logging
import re
from typing import Final

from floatcodec.codec.decoder import decode
from floatcodec.core.domain.float_value import FloatValue
from floatcodec.core.domain.format_params import FormatParams
from floatcodec.core.math.rational import Rational, times_power_of_ten

logger = logging.getLogger(__name__)

# Длина куска для int(); меньше sys.get_int_max_str_digits() по умолчанию
_INT_CHUNK_DIGITS: Final = 4000


# =============================================================================
# РЕГУЛЯРНЫЕ ВЫРАЖЕНИЯ
# =============================================================================

_NAN_RE: Final = re.compile(r"nan", re.IGNORECASE)
_INF_RE: Final = re.compile(r"([+-])?inf", re.IGNORECASE)
_BIN_PREFIX_RE: Final = re.compile(r"0b", re.IGNORECASE)
_HEX_PREFIX_RE: Final = re.compile(r"0x", re.IGNORECASE)
_BIN_DIGITS_RE: Final = re.compile(r"[01]+")
_HEX_DIGITS_RE: Final = re.compile(r"[0-9a-fA-F]+")
_FRACTION_RE: Final = re.compile(r"([+-])?([0-9]+)/([0-9]+)")

# Все способы записать ноль (показатель степени не ограничен)
_ZERO_RE: Final = re.compile(r"([+-])?(?:0(?:\.0*)?|\.0+)(?:E[+-]?[0-9]+)?", re.IGNORECASE)
_DECIMAL_RE: Final = re.compile(
    r"([+-])?([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:E([+-]?[0-9]{1,5}))?", re.IGNORECASE
)


# =============================================================================
# СПЕЦИАЛИЗИРОВАННЫЕ ПАРСЕРЫ
# =============================================================================


def _digits_to_int(digits: str) -> int:
    """Целое из строки десятичных цифр любой длины (int() по кускам)."""
    value = 0
    for start in range(0, len(digits), _INT_CHUNK_DIGITS):
        chunk = digits[start : start + _INT_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def parse_bin(digits: str, params: FormatParams) -> FloatValue:
    """
    Битовый шаблон из строки 0/1 (без префикса 0b).

    Короткая строка дополняется нулями слева до total_bits.
    """
    digits = digits.strip()
    if not _BIN_DIGITS_RE.fullmatch(digits) or len(digits) > params.total_bits:
        return FloatValue.nan()
    digits = digits.rjust(params.total_bits, "0")
    split = params.total_bits - params.mantissa_bits
    exponent = int(digits[1:split], 2) - params.exponent_bias
    mantissa = [int(ch) for ch in digits[split:]]
    return decode(exponent, mantissa, digits[0] == "1", params)


def parse_hex(digits: str, params: FormatParams) -> FloatValue:
    """Битовый шаблон из шестнадцатеричных цифр (без префикса 0x)."""
    digits = digits.strip()
    if not _HEX_DIGITS_RE.fullmatch(digits) or len(digits) > params.hex_digits:
        return FloatValue.nan()
    bin_digits = "".join(format(int(ch, 16), "04b") for ch in digits)
    return parse_bin(bin_digits, params)


def parse_fraction(text: str) -> FloatValue:
    """Точная дробь вида [+-]целое/целое."""
    match = _FRACTION_RE.fullmatch(text.strip())
    if not match:
        return FloatValue.nan()
    negative = match.group(1) == "-"
    num = _digits_to_int(match.group(2))
    den = _digits_to_int(match.group(3))
    if den == 0:
        return FloatValue.nan() if num == 0 else FloatValue.infinity(negative)
    if num == 0:
        return FloatValue.zero(negative)
    return FloatValue(sign=negative, magnitude=Rational(num, den))


def parse_decimal(text: str) -> FloatValue:
    """
    Десятичная запись с необязательным показателем E.

    Точка и все ведущие и хвостовые нули переносятся в показатель степени:
    значение = целое * 10^exp. Длина записи не ограничена.
    """
    text = text.strip()
    match = _ZERO_RE.fullmatch(text)
    if match:
        return FloatValue.zero(match.group(1) == "-")

    match = _DECIMAL_RE.fullmatch(text)
    if not match:
        return FloatValue.nan()
    negative = match.group(1) == "-"
    mantissa = match.group(2).lstrip("0")
    exp = int(match.group(3) or "0")

    dot = mantissa.find(".")
    if dot != -1:
        mantissa = mantissa.rstrip("0")
        exp -= len(mantissa) - dot - 1
        mantissa = (mantissa[:dot] + mantissa[dot + 1 :]).lstrip("0")
    significant = mantissa.rstrip("0")
    exp += len(mantissa) - len(significant)

    if not significant:
        return FloatValue.zero(negative)
    digits = _digits_to_int(significant)
    return FloatValue(sign=negative, magnitude=times_power_of_ten(digits, exp))


# =============================================================================
# ОБЩИЙ ПАРСЕР
# =============================================================================


def parse(text: str, params: FormatParams) -> FloatValue:
    """
    Разбор любой поддерживаемой текстовой записи.

    Args:
        text: Входная строка
        params: Параметры формата (нужны для битовых шаблонов)

    Returns:
        FloatValue с точным модулем (битовые поля заполнены только для
        0b/0x-записей). Нераспознанный текст → NaN.

    Examples:
        >>> from floatcodec.core.domain.format_params import format_params
        >>> parse("-inf", format_params(32)).is_inf
        True
        >>> parse("garbage", format_params(32)).is_nan
        True
    """
    text = text.strip()
    if _NAN_RE.fullmatch(text):
        return FloatValue.nan()
    match = _INF_RE.fullmatch(text)
    if match:
        return FloatValue.infinity(match.group(1) == "-")
    if _BIN_PREFIX_RE.match(text):
        return parse_bin(text[2:], params)
    if _HEX_PREFIX_RE.match(text):
        return parse_hex(text[2:], params)
    if _FRACTION_RE.fullmatch(text):
        return parse_fraction(text)

    result = parse_decimal(text)
    if result.is_nan:
        logger.debug("unparseable input %r, falling back to NaN", text)
    return result
