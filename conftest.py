"""Configures pytest further, gating the slow and extreme block sweeps."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip exhaustive block sweeps")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run sweeps over wide moduli")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Exhaustive sweep: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Wide modulus sweep: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for marker, skip in skipdict.items():
            if marker in item.keywords:
                item.add_marker(skip)
