"""
End-to-end acceptance tests: nested operations aggregating diagnostics.

A small order-import flow built only on the public API: a failure
catalog, validators returning Result / ObjectResult, an orchestrator that
merges them, and reporting at the edge.

Each test follows Given/When/Then BDD structure in its docstring.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest
import structlog
from structlog.testing import capture_logs

from simple_results import Failure, FailureKind, ObjectResult, Result, ResultAssertions
from simple_results.config import ReportingSettings
from simple_results.reporting import log_failures

pytestmark = pytest.mark.acceptance


# ── Failure catalog ──────────────────────────────────────────────────────────


class OrderFailures:
    MISSING_CUSTOMER = Failure("ORD-001", FailureKind.ERROR, "Customer is required")
    EMPTY_ORDER = Failure("ORD-002", FailureKind.ERROR, "Order has no lines")
    LARGE_QUANTITY = Failure(
        "ORD-003",
        FailureKind.WARNING,
        "Unusually large quantity",
        "Quantities above 100 are flagged for manual review",
    )
    NO_DISCOUNT_CODE = Failure("ORD-004", FailureKind.WARNING, "Discount code ignored")


@dataclass(frozen=True, slots=True)
class Order:
    customer: str
    quantities: tuple[int, ...]


# ── Operations under test ────────────────────────────────────────────────────


def validate_customer(raw: dict) -> Result:
    if not raw.get("customer"):
        return Result.fail(OrderFailures.MISSING_CUSTOMER)
    return Result.success()


def validate_lines(raw: dict) -> ObjectResult[tuple[int, ...]]:
    quantities = tuple(raw.get("quantities", ()))
    if not quantities:
        return ObjectResult.fail(OrderFailures.EMPTY_ORDER)
    result = ObjectResult.success(quantities)
    if any(q > 100 for q in quantities):
        result.add_failure(OrderFailures.LARGE_QUANTITY)
    return result


def import_order(raw: dict) -> ObjectResult[Order]:
    checks = Result.empty().merge_in(validate_customer(raw))
    if raw.get("discount"):
        checks.add_failure(OrderFailures.NO_DISCOUNT_CODE)

    lines = validate_lines(raw)
    outcome: ObjectResult[Order] = ObjectResult.empty()
    outcome.add_failure(*checks.get_failures()).add_failure(*lines.get_failures())
    if not outcome.has_errors:
        outcome.value = Order(customer=raw["customer"], quantities=lines.value)
    return outcome


# ── Acceptance Tests ─────────────────────────────────────────────────────────


class TestOrderImport:
    def test_clean_order_succeeds(self) -> None:
        """
        GIVEN a complete order with ordinary quantities
        WHEN it is imported
        THEN the outcome is a success carrying the order.
        """
        outcome = import_order({"customer": "ACME", "quantities": [1, 2]})

        order = ResultAssertions.assert_success(outcome)
        assert order == Order("ACME", (1, 2))

    def test_warnings_keep_the_value(self) -> None:
        """
        GIVEN an order with a large quantity and a discount code
        WHEN it is imported
        THEN the order is built but the outcome carries two warnings.
        """
        outcome = import_order({"customer": "ACME", "quantities": [500], "discount": "X"})

        assert outcome.is_failure
        assert not outcome.has_errors
        ResultAssertions.assert_failure_count(outcome, errors=0, warnings=2)
        ResultAssertions.assert_has_warning(outcome, "ORD-003")
        ResultAssertions.assert_value(outcome, Order("ACME", (500,)))

    def test_errors_from_every_step_are_collected(self) -> None:
        """
        GIVEN an order with neither customer nor lines
        WHEN it is imported
        THEN both errors are reported and no order is built.
        """
        outcome = import_order({})

        assert outcome.get_failures() == (
            OrderFailures.MISSING_CUSTOMER,
            OrderFailures.EMPTY_ORDER,
        )
        assert outcome.value is None

    def test_failures_render_for_logs(self) -> None:
        """
        GIVEN a failed import
        WHEN its failures are rendered and reported
        THEN each renders in the fixed text form and yields one log event.
        """
        outcome = import_order({"quantities": [101]})

        assert [str(f) for f in outcome.get_failures()] == [
            "Error:ORD-001. Message: Customer is required.",
            "Warning:ORD-003. Message: Unusually large quantity. "
            "Description: Quantities above 100 are flagged for manual review.",
        ]

        structlog.reset_defaults()
        with capture_logs() as logs:
            log_failures(outcome, settings=ReportingSettings(_env_file=None), operation="import_order")
        assert [entry["code"] for entry in logs] == ["ORD-001", "ORD-003"]
        assert {entry["operation"] for entry in logs} == {"import_order"}
