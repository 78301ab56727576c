"""The Euclidean half of the solver: division logging, gcd and the feasibility check.

Runs the Euclidean algorithm on a pair of coefficients, recording every division so that the steps can later be
reversed into Bezout coefficients.

Typical usage example:

    trace = compute_trace(35, 15)
    if is_solvable(35, 15, 10):
        ...
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

from diophutils.errors import MalformedTraceError


class Step(typing.NamedTuple):
    """One division of the Euclidean algorithm: dividend = quotient(divisor) + remainder."""
    dividend: int
    quotient: int
    divisor: int
    remainder: int

    def equation(self) -> str:
        """Render the step solved for its remainder."""
        return f"{self.remainder} = {self.dividend} - {self.quotient}({self.divisor})"

    def expansion(self) -> str:
        """Render the right-hand side of `equation`, as substituted during back-substitution."""
        return f"{self.dividend} - {self.quotient}({self.divisor})"


Trace = tuple[Step, ...]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers.

    Args:
        a: The first positive integer.
        b: The second positive integer.

    Returns:
        The greatest common divisor of `a` and `b`.

    Raises:
        ValueError: If either operand is not positive.
    """
    if a <= 0 or b <= 0:
        raise ValueError("gcd operands must be positive")
    while a % b != 0:
        a, b = b, a % b
    return b


def is_solvable(a: int, b: int, n: int) -> bool:
    """Whether ax + by = n has an integer solution, i.e. whether gcd(a, b) divides n."""
    g = gcd(a, b)
    return g == gcd(g, n)


def compute_trace(a: int, b: int, prntr: typing.Callable = print) -> Trace:
    """Runs the Euclidean algorithm on `(a, b)`, logging every division.

    The descent stops as soon as a remainder of 0 or 1 is reached. Each step is emitted through `prntr` in the form
    `remainder = dividend - quotient(divisor)`.

    Args:
        a: The larger coefficient.
        b: The smaller coefficient.
        prntr: Callable receiving one line per division. Defaults to print.

    Returns:
        The division steps, earliest first.

    Raises:
        ValueError: Unless `a > b > 0`.
    """
    if not a > b > 0:
        raise ValueError("Euclidean trace requires a > b > 0")
    steps: list[Step] = []
    while True:
        step = Step(a, a // b, b, a % b)
        steps.append(step)
        prntr(step.equation())
        if step.remainder in (0, 1):
            return tuple(steps)
        a, b = b, step.remainder


def trace_gcd(trace: Trace) -> int:
    """The gcd of the pair a trace was computed from.

    A trace ending in remainder 1 is coprime, otherwise the last divisor is the last non-zero remainder.
    """
    last = trace[-1]
    return 1 if last.remainder == 1 else last.divisor


def check_chain(trace: Trace) -> None:
    """Validates that `trace` is a genuine Euclidean descent.

    Args:
        trace: The steps to validate.

    Raises:
        MalformedTraceError: If the trace is empty, a step breaks its division identity, adjacent steps do not
            chain, or the trace does not end on remainder 0 or 1.
    """
    if not trace:
        raise MalformedTraceError("Trace is empty.")
    if trace[0].dividend <= trace[0].divisor:
        raise MalformedTraceError("Trace must start from a > b.")
    for i, step in enumerate(trace):
        if not 0 <= step.remainder < step.divisor:
            raise MalformedTraceError(f"Step {i} remainder is out of range: {step}")
        if step.dividend != step.quotient * step.divisor + step.remainder:
            raise MalformedTraceError(f"Step {i} is not a valid division: {step}")
        if i + 1 < len(trace):
            if step.remainder in (0, 1):
                raise MalformedTraceError(f"Trace continues past remainder {step.remainder} at step {i}.")
            nxt = trace[i + 1]
            if step.divisor != nxt.dividend or step.remainder != nxt.divisor:
                raise MalformedTraceError(f"Steps {i} and {i + 1} do not chain.")
    if trace[-1].remainder not in (0, 1):
        raise MalformedTraceError("Trace does not end on remainder 0 or 1.")
