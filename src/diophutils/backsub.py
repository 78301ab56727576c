"""Reverses a Euclidean trace into Bezout coefficients and scales them to the requested right-hand side.

Back-substitution keeps a running identity `g = A(Bterm) - C(Dterm)`, where g is the gcd of the traced pair. It
starts from the division that produced g and walks the trace backwards. Each earlier division is substituted into
whichever side of the identity mentions that division's remainder, until both bases are the original coefficients.

Typical usage example:

    trace = compute_trace(7, 5)
    sol = solve(trace, 3)
    assert 7 * sol.x + 5 * sol.y == 3
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import enum
import typing
import warnings

from diophutils.errors import MalformedTraceError
from diophutils.errors import NoSolutionError
from diophutils.euclid import check_chain
from diophutils.euclid import Step
from diophutils.euclid import Trace
from diophutils.euclid import trace_gcd

BOUND = 1000


class Substitution(enum.Enum):
    """Which side of the identity an earlier division is substituted into."""
    LEFT = "left"
    RIGHT = "right"


class CoefficientState:
    """The working identity `g = A(Bterm) - C(Dterm)`.

    Attributes:
        gcd: The constant g the identity evaluates to.
        left_coeff: A, the coefficient of the left base.
        left_base: Bterm.
        right_coeff: C, the (subtracted) coefficient of the right base.
        right_base: Dterm.
    """

    def __init__(self, gcd: int, left_coeff: int, left_base: int, right_coeff: int, right_base: int) -> None:
        self.gcd = gcd
        self.left_coeff = left_coeff
        self.left_base = left_base
        self.right_coeff = right_coeff
        self.right_base = right_base

    @classmethod
    def from_trace(cls, trace: Trace) -> tuple["CoefficientState", int]:
        """Builds the initial identity from the division that produced the gcd.

        A trace ending on remainder 1 starts from its last step. A trace ending on remainder 0 starts from the step
        before it, whose remainder is the gcd, or, when the very first division is exact, from `b = 1(b) - 0(a)`.

        Args:
            trace: A validated trace.

        Returns:
            The initial state and the index of the first step still to be substituted (-1 if none).
        """
        g = trace_gcd(trace)
        last = trace[-1]
        if last.remainder == 0:
            if len(trace) == 1:
                return cls(g, 1, last.divisor, 0, last.dividend), -1
            pivot_idx = len(trace) - 2
        else:
            pivot_idx = len(trace) - 1
        pivot = trace[pivot_idx]
        return cls(g, 1, pivot.dividend, pivot.quotient, pivot.divisor), pivot_idx - 1

    def value(self) -> int:
        return self.left_coeff * self.left_base - self.right_coeff * self.right_base

    def equation(self) -> str:
        return f"{self.gcd} = {self.left_coeff}({self.left_base}) - {self.right_coeff}({self.right_base})"

    def substituted(self, prev: Step, side: Substitution) -> str:
        """Render the identity with `prev` expanded in place of the base on `side`."""
        if side is Substitution.LEFT:
            return f"{self.gcd} = {self.left_coeff}[{prev.expansion()}] - {self.right_coeff}({self.right_base})"
        return f"{self.gcd} = {self.left_coeff}({self.left_base}) - {self.right_coeff}[{prev.expansion()}]"

    def as_tuple(self) -> tuple[int, int, int, int]:
        return self.left_coeff, self.left_base, self.right_coeff, self.right_base


def choose_substitution(state: CoefficientState, prev: Step) -> Substitution:
    """Picks the side of the identity whose base is `prev`'s remainder.

    Raises:
        MalformedTraceError: If neither base is `prev`'s remainder.
    """
    if prev.remainder == state.left_base:
        return Substitution.LEFT
    if prev.remainder == state.right_base:
        return Substitution.RIGHT
    raise MalformedTraceError(f"Neither side of '{state.equation()}' references the remainder of {prev}.")


def apply_substitution(state: CoefficientState, prev: Step, side: Substitution) -> None:
    """Rewrites one base of `state` using `prev.remainder = prev.dividend - prev.quotient(prev.divisor)`.

    A(r) - C(v) with r expanded becomes A(d) - (C + A.q)(v), while A(v) - C(r) becomes (A + C.q)(v) - C(d).
    """
    if side is Substitution.LEFT:
        state.left_base = prev.dividend
        state.right_coeff += state.left_coeff * prev.quotient
    else:
        state.left_coeff += state.right_coeff * prev.quotient
        state.right_base = prev.dividend


class Solution:
    """A particular solution of `a(x) + b(y) = n`, with the identity it was scaled from.

    Attributes:
        a: The larger coefficient.
        b: The smaller coefficient.
        n: The right-hand side.
        gcd: gcd(a, b).
        multiplier: The factor `n // gcd` the identity is scaled by.
        state: The final identity `gcd = A(Bterm) - C(Dterm)`, with {Bterm, Dterm} == {a, b}.
        x: The coefficient of a.
        y: The coefficient of b.
    """

    def __init__(self, n: int, state: CoefficientState) -> None:
        self.n = n
        self.state = state
        self.gcd = state.gcd
        self.multiplier = n // state.gcd
        self.a = max(state.left_base, state.right_base)
        self.b = min(state.left_base, state.right_base)
        left = state.left_coeff * self.multiplier
        right = -state.right_coeff * self.multiplier
        if state.left_base == self.a:
            self.x, self.y = left, right
        else:
            self.x, self.y = right, left

    def answer_lines(self) -> list[str]:
        """The (scaled) identity and the equation in the a, b order."""
        left_coeff, left_base, right_coeff, right_base = self.state.as_tuple()
        k = self.multiplier
        if k == 1:
            # Unscaled, the identity itself is the answer.
            lines = [f"{left_coeff}({left_base}) - {right_coeff}({right_base}) = {self.n}"]
        else:
            lines = [
                f"{left_base}({left_coeff})({k}) - {right_base}({right_coeff})({k}) = {self.n}",
                f"{left_base}({left_coeff * k}) - {right_base}({right_coeff * k}) = {self.n}",
            ]
        lines.append(f"{self.a}({self.x}) + {self.b}({self.y}) = {self.n}")
        return lines

    def __repr__(self) -> str:
        return f"Solution(a={self.a}, b={self.b}, n={self.n}, x={self.x}, y={self.y})"


def solve(trace: Trace, n: int, prntr: typing.Callable = print) -> Solution:
    """Reverses the Euclidean algorithm recorded in `trace` and solves for the right-hand side `n`.

    Emits the identity before every substitution, the substitution itself, and the final identity.

    Args:
        trace: The division steps for `(a, b)`, as produced by `compute_trace`.
        n: The right-hand side. Must be a multiple of gcd(a, b).
        prntr: Callable receiving one line per derivation step. Defaults to print.

    Returns:
        The particular solution.

    Raises:
        MalformedTraceError: If `trace` is not a valid Euclidean descent, or the final identity does not evaluate
            to gcd(a, b).
        NoSolutionError: If `n` is not a multiple of gcd(a, b).
    """
    check_chain(trace)
    if not 0 < n < BOUND:
        warnings.warn(f"Right-hand side {n} is outside the supported range (0, {BOUND}).", RuntimeWarning)
    state, start = CoefficientState.from_trace(trace)
    if n % state.gcd != 0:
        raise NoSolutionError(f"{n} is not a multiple of gcd {state.gcd}.")
    for idx in range(start, -1, -1):
        prev = trace[idx]
        prntr(state.equation())
        side = choose_substitution(state, prev)
        prntr(state.substituted(prev, side))
        apply_substitution(state, prev, side)
    prntr(state.equation())
    if state.value() != state.gcd:
        raise MalformedTraceError(f"Back-substitution broke the identity: '{state.equation()}'.")
    return Solution(n, state)
