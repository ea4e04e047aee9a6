"""
Командная строка floatcodec

    floatcodec [-w {16,32,64,128}] [--json] [-v] VALUE [OP VALUE]

Каждый операнд разбирается и округляется до формата; с оператором
(+ - * / x) результат вычисляется точно и округляется ещё раз.
Значения, начинающиеся с "-" (например -inf), передаются после "--".
Код возврата 1: вывод --json не прошёл контракт float_view (ошибки в лог).
"""

import argparse
import json
import logging
import sys
from typing import Callable, Final, Sequence

from floatcodec.arithmetic import add, div, mul, sub
from floatcodec.codec import quantize
from floatcodec.core.contracts import float_view_errors
from floatcodec.core.domain import DEFAULT_BIT_WIDTH, SUPPORTED_BIT_WIDTHS, FloatValue, format_params
from floatcodec.text import parse
from floatcodec.view import FloatView, describe

logger = logging.getLogger(__name__)

OPERATORS: Final[dict[str, Callable[[FloatValue, FloatValue], FloatValue]]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "x": mul,
    "/": div,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floatcodec",
        description="Exact IEEE-754 conversions between decimal text and bit patterns.",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        choices=SUPPORTED_BIT_WIDTHS,
        default=DEFAULT_BIT_WIDTH,
        help="bit width of the format (default: %(default)s)",
    )
    parser.add_argument("--json", action="store_true", help="print the fields as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="VALUE",
        help="a value, or VALUE OP VALUE with OP one of + - * / x",
    )
    return parser


def render_text(view: FloatView) -> str:
    """Человекочитаемый блок полей."""
    lines = [
        f"value:       {view.text}",
        f"binary:      {view.binary}",
        f"hex:         {view.hexadecimal}",
        f"sign:        {view.sign_bit} ({view.sign_text or 'n/a'})",
        f"exponent:    {view.exponent_field} ({view.exponent_text or 'n/a'})",
        f"mantissa:    {view.hidden_bit}.{view.mantissa_field}",
        f"significand: {view.significand_text}",
    ]
    return "\n".join(lines)


def evaluate(inputs: Sequence[str], bits: int) -> FloatView:
    """
    Разбор операндов и (опционально) вычисление бинарной операции.

    Raises:
        ValueError: Если число аргументов или оператор некорректны
    """
    params = format_params(bits)
    if len(inputs) == 1:
        return describe(quantize(parse(inputs[0], params), params), params)
    if len(inputs) != 3:
        raise ValueError(f"expected VALUE or VALUE OP VALUE, got {len(inputs)} arguments")

    left, op, right = inputs
    if op not in OPERATORS:
        raise ValueError(f"unknown operator {op!r}, expected one of {' '.join(OPERATORS)}")
    a = quantize(parse(left, params), params)
    b = quantize(parse(right, params), params)
    result = OPERATORS[op](a, b)
    return describe(quantize(result, params), params)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        view = evaluate(args.inputs, args.width)
    except ValueError as e:
        parser.error(str(e))

    if args.json:
        data = view.model_dump()
        errors = float_view_errors(data)
        if errors:
            for message in errors:
                logger.error("float_view contract violation: %s", message)
            return 1
        print(json.dumps(data, indent=2))
    else:
        print(render_text(view))
    logger.debug("width=%d inputs=%s -> %s", args.width, args.inputs, view.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
