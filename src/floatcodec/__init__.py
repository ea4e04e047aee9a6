"""
floatcodec — точный кодек IEEE-754 для 16/32/64/128-битных форматов.

Преобразования между точным рациональным значением, битовым шаблоном
и текстовыми записями (десятичная, дробь, 0b/0x, inf/nan) без использования
встроенного float.
"""

from floatcodec.arithmetic import add, div, mul, sub
from floatcodec.codec import decode, encode, quantize
from floatcodec.core.domain import (
    DEFAULT_BIT_WIDTH,
    SUPPORTED_BIT_WIDTHS,
    FloatValue,
    FormatParams,
    UnsupportedBitWidth,
    format_params,
)
from floatcodec.core.math import Rational
from floatcodec.text import format_value, parse
from floatcodec.view import FloatView, decode_fields, describe, to_bit_string, to_hex_string

__all__ = [
    # Types
    "Rational",
    "FloatValue",
    "FormatParams",
    "FloatView",
    # Config
    "DEFAULT_BIT_WIDTH",
    "SUPPORTED_BIT_WIDTHS",
    "UnsupportedBitWidth",
    "format_params",
    # Codec
    "encode",
    "decode",
    "quantize",
    # Text
    "parse",
    "format_value",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "div",
    # View
    "describe",
    "decode_fields",
    "to_bit_string",
    "to_hex_string",
]
