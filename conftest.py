"""Configures pytest further."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower grid tests")
    parser.addoption("--run-extreme",
                     action="store_true",
                     default=False,
                     help="run the exhaustive grid over every coefficient pair")


def pytest_collection_modifyitems(config, items):
    markers = {}
    if config.getoption("--skip-slow"):
        markers["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        markers["extreme"] = pytest.mark.skip(reason="Exhaustive test: needs --run-extreme option")
    for item in items:
        for keyword, marker in markers.items():
            if keyword in item.keywords:
                item.add_marker(marker)


@pytest.fixture
def emitted() -> list[str]:
    """Collects derivation output. Pass `emitted.append` wherever a `prntr` is expected."""
    return []
