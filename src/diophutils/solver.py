"""End-to-end solving of a single linear Diophantine equation, with its full text derivation.

Validates the coefficients, runs the feasibility check and, where a solution exists, logs the Euclidean algorithm
and reverses it.

Typical usage example:

    der = solve_equation(35, 15, 10)
    print("\\n".join(der.lines))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

from diophutils import backsub
from diophutils import euclid
from diophutils.errors import InvalidInputError


class Derivation(typing.NamedTuple):
    a: int
    b: int
    n: int
    solvable: bool
    trace: euclid.Trace
    solution: backsub.Solution | None
    lines: tuple[str, ...]


def validate(a: int, b: int, n: int) -> None:
    """Checks the coefficients against the solver's domain.

    Args:
        a: The larger coefficient.
        b: The smaller coefficient.
        n: The right-hand side.

    Raises:
        InvalidInputError: If a value is not an integer, is outside (0, 1000), or `a <= b`.
    """
    for name, value in (("a", a), ("b", b), ("n", n)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidInputError(f"{name} must be an integer.")
        if not 0 < value < backsub.BOUND:
            raise InvalidInputError(f"{name} must be in range (0, {backsub.BOUND}) exclusive.")
    if a <= b:
        raise InvalidInputError("a must be greater than b.")


def solve_equation(a: int, b: int, n: int, prntr: typing.Callable = print) -> Derivation:
    """Solves `ax + by = n`, emitting the derivation line by line.

    Args:
        a: The larger coefficient.
        b: The smaller coefficient.
        n: The right-hand side.
        prntr: Callable receiving each output line. Defaults to print.

    Returns:
        The derivation, including every emitted line. `solution` is None if no integer solution exists.

    Raises:
        InvalidInputError: If the coefficients fail `validate`.
    """
    validate(a, b, n)
    lines: list[str] = []

    def emit(text: str = ""):
        lines.append(text)
        prntr(text)

    emit(f"SOLUTION FOR {a}x + {b}y = {n}")
    if not euclid.is_solvable(a, b, n):
        emit("No solution")
        return Derivation(a, b, n, False, (), None, tuple(lines))
    emit()
    emit("Using Euclidean algorithm")
    trace = euclid.compute_trace(a, b, emit)
    emit()
    emit("Reversing Euclidean algorithm")
    solution = backsub.solve(trace, n, emit)
    emit()
    emit("Answer")
    for line in solution.answer_lines():
        emit(line)
    return Derivation(a, b, n, True, trace, solution, tuple(lines))
