"""
Quantize — округление точного значения до ближайшего представимого

encode + decode: битовые поля и magnitude после этого согласованы.
"""

from floatcodec.codec.decoder import decode
from floatcodec.codec.encoder import encode
from floatcodec.core.domain.float_value import FloatValue
from floatcodec.core.domain.format_params import FormatParams


def quantize(value: FloatValue, params: FormatParams) -> FloatValue:
    """
    Ближайшее представимое в формате params значение.

    Args:
        value: Произвольное значение (точный модуль или NaN/Inf)
        params: Параметры формата

    Returns:
        FloatValue, у которого magnitude точно равен значению битовых полей
    """
    encoded = encode(value, params)
    return decode(encoded.exponent, encoded.mantissa_bits, encoded.sign, params)
