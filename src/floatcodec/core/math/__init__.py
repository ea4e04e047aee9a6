"""
Core math modules для floatcodec

Точная рациональная арифметика произвольной точности.
"""

from floatcodec.core.math.rational import (
    HALF,
    ONE,
    TWO,
    ZERO,
    Rational,
    times_power_of_ten,
    times_power_of_two,
)

__all__ = [
    # Types
    "Rational",
    # Constants
    "ZERO",
    "ONE",
    "TWO",
    "HALF",
    # Functions
    "times_power_of_two",
    "times_power_of_ten",
]
