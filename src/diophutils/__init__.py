"""Linear Diophantine Equation Utilities in an Academic Sense.

Solves `ax + by = n` for positive integers below 1000 (with a > b) using the Extended Euclidean Algorithm, and shows
the full derivation: the Euclidean divisions, then their reversal into Bezout coefficients.

Typical usage example:

    der = solve_equation(35, 15, 10)
    trace = compute_trace(7, 5)
    sol = solve(trace, 3)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from diophutils.backsub import apply_substitution
from diophutils.backsub import BOUND
from diophutils.backsub import choose_substitution
from diophutils.backsub import CoefficientState
from diophutils.backsub import Solution
from diophutils.backsub import solve
from diophutils.backsub import Substitution
from diophutils.errors import InvalidInputError
from diophutils.errors import MalformedTraceError
from diophutils.errors import NoSolutionError
from diophutils.euclid import check_chain
from diophutils.euclid import compute_trace
from diophutils.euclid import gcd
from diophutils.euclid import is_solvable
from diophutils.euclid import Step
from diophutils.solver import Derivation
from diophutils.solver import solve_equation
from diophutils.solver import validate

__version__ = "0.0.1"
__all__ = [
    "BOUND",
    "Step",
    "Substitution",
    "CoefficientState",
    "Solution",
    "Derivation",
    "InvalidInputError",
    "NoSolutionError",
    "MalformedTraceError",
    "gcd",
    "is_solvable",
    "compute_trace",
    "check_chain",
    "choose_substitution",
    "apply_substitution",
    "solve",
    "validate",
    "solve_equation",
]
