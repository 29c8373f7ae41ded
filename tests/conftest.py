"""
Shared test fixtures for the simple-results test suite.

Provides a small failure catalog, the way calling code is expected to
keep its predefined failures in one place.
"""

from __future__ import annotations

import pytest

from simple_results import Failure, FailureKind

WARNING_1 = Failure("001", FailureKind.WARNING, "Warning1")
WARNING_2 = Failure("002", FailureKind.WARNING, "Warning2")
ERROR_1 = Failure("003", FailureKind.ERROR, "Error1")
ERROR_2 = Failure("004", FailureKind.ERROR, "Error2", "Retry after the upstream service recovers")


@pytest.fixture()
def warning1() -> Failure:
    return WARNING_1


@pytest.fixture()
def warning2() -> Failure:
    return WARNING_2


@pytest.fixture()
def error1() -> Failure:
    return ERROR_1


@pytest.fixture()
def error2() -> Failure:
    return ERROR_2
