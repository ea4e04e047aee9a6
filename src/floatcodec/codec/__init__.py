"""
Codec — преобразование между точным модулем и битовыми полями IEEE-754.
"""

from floatcodec.codec.decoder import decode, mantissa_to_int
from floatcodec.codec.encoder import encode
from floatcodec.codec.quantize import quantize

__all__ = [
    "encode",
    "decode",
    "quantize",
    "mantissa_to_int",
]
