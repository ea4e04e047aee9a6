"""
Text — разбор и кратчайшая десятичная запись значений.
"""

from floatcodec.text.formatter import format_value, render_decimal, shortest_digits
from floatcodec.text.parser import parse, parse_bin, parse_decimal, parse_fraction, parse_hex

__all__ = [
    "parse",
    "parse_bin",
    "parse_hex",
    "parse_fraction",
    "parse_decimal",
    "format_value",
    "shortest_digits",
    "render_decimal",
]
