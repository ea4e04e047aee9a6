"""View — отображаемые поля значения и чтение отредактированных полей."""

from floatcodec.view.float_view import (
    FloatView,
    decode_fields,
    describe,
    exponent_text,
    significand_text,
    to_bit_string,
    to_hex_string,
)

__all__ = [
    "FloatView",
    "describe",
    "decode_fields",
    "exponent_text",
    "significand_text",
    "to_bit_string",
    "to_hex_string",
]
