# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

import diophutils
from diophutils import solver
from diophutils.errors import InvalidInputError
from diophutils.euclid import Step


def quiet(_):
    pass


def test_derivation_7_5_3():
    der = solver.solve_equation(7, 5, 3, quiet)
    assert der.solvable
    assert der.lines == (
        "SOLUTION FOR 7x + 5y = 3",
        "",
        "Using Euclidean algorithm",
        "2 = 7 - 1(5)",
        "1 = 5 - 2(2)",
        "",
        "Reversing Euclidean algorithm",
        "1 = 1(5) - 2(2)",
        "1 = 1(5) - 2[7 - 1(5)]",
        "1 = 3(5) - 2(7)",
        "",
        "Answer",
        "5(3)(3) - 7(2)(3) = 3",
        "5(9) - 7(6) = 3",
        "7(-6) + 5(9) = 3",
    )
    assert 7 * der.solution.x + 5 * der.solution.y == 3


def test_derivation_35_15_10():
    der = solver.solve_equation(35, 15, 10, quiet)
    assert der.trace == (Step(35, 2, 15, 5), Step(15, 3, 5, 0))
    assert der.lines[-3:] == ("35(1)(2) - 15(2)(2) = 10", "35(2) - 15(4) = 10", "35(2) + 15(-4) = 10")
    assert 35 * der.solution.x + 15 * der.solution.y == 10


def test_derivation_boundary_2_1_1():
    der = solver.solve_equation(2, 1, 1, quiet)
    assert der.trace == (Step(2, 2, 1, 0),)
    assert (der.solution.x, der.solution.y) == (0, 1)


def test_no_solution_skips_euclid(mocker):
    trace_spy = mocker.spy(diophutils.euclid, "compute_trace")
    solve_spy = mocker.spy(diophutils.backsub, "solve")
    der = solver.solve_equation(4, 2, 3, quiet)
    assert not der.solvable
    assert der.solution is None
    assert der.trace == ()
    assert der.lines == ("SOLUTION FOR 4x + 2y = 3", "No solution")
    trace_spy.assert_not_called()
    solve_spy.assert_not_called()


def test_prints_by_default(capsys):
    der = solver.solve_equation(4, 2, 3)
    assert capsys.readouterr().out == "\n".join(der.lines) + "\n"


@pytest.mark.parametrize("a,b,n", [(35, 15, 10), (7, 5, 3), (610, 377, 999), (4, 2, 3)])
def test_idempotent(a, b, n):
    first = solver.solve_equation(a, b, n, quiet)
    second = solver.solve_equation(a, b, n, quiet)
    assert first.lines == second.lines
    assert first.trace == second.trace
    if first.solvable:
        assert (first.solution.x, first.solution.y) == (second.solution.x, second.solution.y)


@pytest.mark.parametrize(
    "a,b,n",
    [
        (0, 1, 1),
        (1000, 5, 1),
        (5, 0, 1),
        (5, 3, 0),
        (5, 3, 1000),
        (5, 5, 1),
        (3, 5, 1),
        (-7, 5, 1),
        (7.0, 5, 1),
        ("7", 5, 1),
        (7, True, 1),
    ],
)
def test_validate_errors(a, b, n):
    with pytest.raises(InvalidInputError):
        solver.solve_equation(a, b, n, quiet)


def test_validate_accepts_bounds():
    solver.validate(999, 998, 999)
    solver.validate(2, 1, 1)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        solver.validate(1, 2, 3)
