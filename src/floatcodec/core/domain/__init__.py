"""
Domain models and value objects.

Contains the format parameters and the in-memory floating-point value.
"""

from floatcodec.core.domain.float_value import FloatValue
from floatcodec.core.domain.format_params import (
    DEFAULT_BIT_WIDTH,
    SUPPORTED_BIT_WIDTHS,
    FormatParams,
    UnsupportedBitWidth,
    format_params,
)

__all__ = [
    # Format params
    "DEFAULT_BIT_WIDTH",
    "SUPPORTED_BIT_WIDTHS",
    "FormatParams",
    "UnsupportedBitWidth",
    "format_params",
    # Value model
    "FloatValue",
]
