"""Command line driver: parse a formula, simplify it and optionally draw it."""

import argparse
import sys
from typing import List, Optional

import numpy as np

from .config import DrawerConfig, load_config
from .errors import ExpressionError
from .expression_tree import Expression
from .logging_system import LogLevel, configure_logging, log_critical, log_milestone
from .parsing import to_postfix, build_tree, TOKEN_DELIMITER
from .sampling import sample_function, draw_function


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="function-drawer",
        description="Parse, simplify and draw a single-variable function of X. "
                    "Example: \"X + 4 ^ 2 * 2 / (5 - 1)\" or \"abs(sin(X))\"")
    parser.add_argument("formula", nargs="?", help="Infix formula in X (prompted for when omitted)")
    parser.add_argument("--max-x", type=float, help="Half width of the X domain")
    parser.add_argument("--max-y", type=float, help="Half height of the Y range")
    parser.add_argument("--samples", type=int, help="Number of sample points")
    parser.add_argument("--no-simplify", action="store_true", help="Draw the tree as parsed")
    parser.add_argument("--plot", action="store_true", help="Draw the function with matplotlib")
    parser.add_argument("--output", help="Save the plot to this file instead of opening a window")
    parser.add_argument("--config", help="JSON configuration file")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only print results")
    return parser


def _prompt(text: str, convert=str):
    while True:
        answer = input(text).strip()
        try:
            return convert(answer)
        except ValueError:
            print(f"Invalid value: {answer!r}")


def _positive_float(text: str) -> float:
    value = float(text)
    if value <= 0:
        raise ValueError(text)
    return value


def resolve_config(args: argparse.Namespace) -> DrawerConfig:
    config = load_config(args.config) if args.config else DrawerConfig()
    overrides = {}
    if args.max_x is not None:
        overrides['max_x'] = args.max_x
    if args.max_y is not None:
        overrides['max_y'] = args.max_y
    if args.samples is not None:
        overrides['samples'] = args.samples
    if args.no_simplify:
        overrides['simplify'] = False
    if args.quiet:
        overrides['log_level'] = LogLevel.SILENT
    elif args.verbose:
        level = min(config.log_level.value + args.verbose, LogLevel.VERBOSE.value)
        overrides['log_level'] = LogLevel(level)
    settings = config.to_dict()
    settings.update(overrides)
    return DrawerConfig.from_dict(settings)


def run(formula: str, config: DrawerConfig) -> Expression:
    tokens = to_postfix(formula)
    print(f"Postfix:    {TOKEN_DELIMITER.join(tokens)}")
    expression = Expression(build_tree(tokens, max_depth=config.max_depth))
    print(f"Parsed:     {expression}")
    if config.simplify:
        expression = expression.simplify()
        print(f"Simplified: {expression}")
    return expression


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except ValueError as e:
        parser.error(str(e))
    configure_logging(log_level=config.log_level)

    if args.formula is None:
        # interactive mode: ask for the ranges and the formula
        if args.max_x is None:
            config.max_x = _prompt("Maximum on the X axis? ", _positive_float)
        if args.max_y is None:
            config.max_y = _prompt("Maximum on the Y axis? ", _positive_float)
        formula = _prompt("Function to draw? ")
    else:
        formula = args.formula

    try:
        expression = run(formula, config)
    except ExpressionError as e:
        log_critical(f"[{e.code}] {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    xs, ys = sample_function(expression, config.max_x, config.samples)
    finite = np.isfinite(ys)
    if finite.any():
        log_milestone(f"Sampled {config.samples} points on [-{config.max_x}, {config.max_x}], "
                      f"y in [{ys[finite].min():.4g}, {ys[finite].max():.4g}]")

    if args.plot or args.output:
        draw_function(expression, config.max_x, config.max_y, config.samples, output=args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
