"""Exceptions raised by the solver.

All of them extend a built-in exception, so callers that only care about the broad category can keep catching
`ValueError` or `RuntimeError`.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class InvalidInputError(ValueError):
    """Coefficients are not integers, are out of bounds, or are not ordered `a > b`."""


class NoSolutionError(ValueError):
    """The right-hand side is not a multiple of gcd(a, b)."""


class MalformedTraceError(RuntimeError):
    """A trace that is empty or does not describe a valid Euclidean descent."""
