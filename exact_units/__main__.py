"""Command line entrypoint for evaluating quantities and checking dimensions."""

import argparse
import logging
import operator
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .errors import QuantityError
from .format import default_service
from .quantity import Quantity
from .units import Unit

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_OPERATORS: dict[str, Callable[[Quantity[Any], Quantity[Any]], Quantity[Any]]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "x": operator.mul,
    "/": operator.truediv,
}


def _evaluate(args: argparse.Namespace) -> int:
    """Evaluate a left-to-right chain of binary operations on quantities."""
    service = default_service()
    quantity_format = (
        service.get_quantity_format(args.format)
        if args.format
        else service.get_quantity_format()
    )
    if quantity_format is None:
        print(f"Unknown quantity format: {args.format}", file=sys.stderr)
        return 2

    terms: list[str] = args.terms
    operators = terms[1::2]
    if len(terms) % 2 == 0 or any(op not in _OPERATORS for op in operators):
        print(
            "Expected QUANTITY [OP QUANTITY]... with OP one of "
            + " ".join(_OPERATORS),
            file=sys.stderr,
        )
        return 2

    try:
        result = quantity_format.parse(terms[0])
        for op, text in zip(operators, terms[2::2]):
            result = _OPERATORS[op](result, quantity_format.parse(text))
        if args.to:
            result = result.to(Unit.from_string(args.to))
    except QuantityError as exc:
        print(f"Error [{exc.code}]: {exc.message}", file=sys.stderr)
        return 1

    print(quantity_format.format(result))
    return 0


def _check(args: argparse.Namespace) -> int:
    """Run the static dimension checker on the given files."""
    from .typecheck import DimensionTypeChecker

    checker = DimensionTypeChecker()
    checker.check(
        [path for path_str in args.files if (path := Path(path_str)).exists()]
    )

    print("Dimension checking completed.")
    for error in checker.errors:
        print(f"{error.path}:{error.lineno}: {error.code} {error.message}")
    print(f"Errors: {len(checker.errors)}")
    return 1 if checker.errors else 0


def run(argv: list[str] | None = None) -> int:
    """Parse the command line and run the requested command."""
    parser = argparse.ArgumentParser(
        prog="exact-units",
        description="Exact units: unit-aware arithmetic without rounding.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    eval_parser = subparsers.add_parser(
        "eval", help="Evaluate quantities, e.g. eval '1 Ω' + '1 mΩ'"
    )
    eval_parser.add_argument(
        "terms",
        metavar="TERM",
        nargs="+",
        help="Quantities such as '3 d' separated by one of + - * x /",
    )
    eval_parser.add_argument("-t", "--to", metavar="UNIT", help="Convert the result")
    eval_parser.add_argument(
        "-f", "--format", metavar="NAME", help="Name of the quantity format to use"
    )

    check_parser = subparsers.add_parser(
        "check", help="Statically check quantity kinds in Python files"
    )
    check_parser.add_argument(
        "files",
        metavar="file_or_directory",
        nargs="+",
        help="Python files or directories to check",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.command == "eval":
        return _evaluate(args)
    return _check(args)


if __name__ == "__main__":
    sys.exit(run())
