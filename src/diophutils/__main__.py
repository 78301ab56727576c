"""The Command Line Interface for the solver, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface): any coefficient not given on the
command line is asked for interactively, unless non-interactive mode is active.

Typical usage example:

    diophutils 35 15 10
    OR
    python -m diophutils
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import sys
import typing

import diophutils
from diophutils.errors import InvalidInputError


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = int


help_dict: dict[str, HelpData] = {
    "a": HelpData("The coefficient of x. Integer in range (0, 1000) exclusive."),
    "b": HelpData("The coefficient of y. Integer in range (0, a) exclusive."),
    "n": HelpData("The right-hand side. Integer in range (0, 1000) exclusive."),
}

corep = argparse.ArgumentParser(prog="diophutils", description="Solve ax + by = n, showing every step.")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {diophutils.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
for _name, _data in help_dict.items():
    corep.add_argument(_name, nargs="?", help=_data.description)


def checkmodes(arg: str, non_interactive: bool) -> HelpData:
    if non_interactive:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return help_dict[arg]


def convert(arg: str, raw: str) -> int:
    """Convert a raw value to the argument's format, or fail the run."""
    cls = help_dict[arg].format
    try:
        return cls(raw)
    except ValueError as exc:
        raise InvalidInputError(f"{arg} must be an integer, got {raw!r}.") from exc


def check_value(arg: str, value: int, known: dict[str, int]) -> None:
    """Validate a single value as soon as it is known, mirroring the order it is asked for."""
    upper = known["a"] if arg == "b" else diophutils.BOUND
    if not 0 < value < upper:
        bound = "a" if arg == "b" else upper
        raise InvalidInputError(f"{arg} must be in range (0, {bound}) exclusive.")


def input_handler(arg: str, non_interactive: bool, prntr: typing.Callable = print) -> int:
    helper_data = checkmodes(arg, non_interactive)
    prntr(f"Please specify {arg}!")
    prntr("Description: " + helper_data.description)
    while True:
        ch = input(f"{arg}: ").strip()
        if ch == "":
            prntr("Please provide a value.")
            continue
        return convert(arg, ch)


def gather(args: argparse.Namespace, pspr: typing.Callable) -> dict[str, int]:
    known: dict[str, int] = {}
    for arg in help_dict:
        raw = getattr(args, arg)
        if raw is None:
            value = input_handler(arg, args.non_interactive, pspr)
        else:
            value = convert(arg, raw)
            pspr(f"{arg}: {value}")
        check_value(arg, value, known)
        known[arg] = value
    return known


def main(argv: list[str] | None = None) -> None:
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args(argv)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not args.non_interactive:
            print(text)

    pspr("Welcome to Diophantine Utils!\n")
    try:
        values = gather(args, pspr)
    except (InvalidInputError, IOError) as exc:
        print(f"Invalid input: {exc}")
        sys.exit(1)
    pspr("\nInput Complete! Solving...\n")
    der = diophutils.solve_equation(values["a"], values["b"], values["n"])
    if not der.solvable:
        sys.exit(1)
    pspr("\nThank you for using Diophantine Utils!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
