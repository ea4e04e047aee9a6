"""
Contract Validation Module

Модуль для валидации JSON контрактов floatcodec.
"""

from .validators import (
    ContractValidator,
    FloatViewValidator,
    SchemaLoader,
    float_view_errors,
    float_view_validator,
    validate_float_view,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FloatViewValidator",
    # Functions
    "float_view_errors",
    "float_view_validator",
    "validate_float_view",
]
