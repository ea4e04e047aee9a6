"""Arithmetic — сложение, вычитание, умножение, деление по правилам IEEE-754."""

from floatcodec.arithmetic.ops import add, div, mul, sub

__all__ = ["add", "sub", "mul", "div"]
