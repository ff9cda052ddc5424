"""Tests for the market model.

Covers the pricing functions, the closed-form equilibrium, the ceiling
logic in compute_outcome and the welfare summary built on top of it.
"""

import itertools

import pytest

from pricelimit.config import SimulatorState
from pricelimit.engine import (
    MarketOutcome,
    ceiling_binds,
    compute_outcome,
    demand_price,
    equilibrium,
    quantity_demanded,
    quantity_supplied,
    summarize,
    supply_price,
)

SHIFTS = [-10.0, -4.5, 0.0, 3.0, 10.0]
QUANTITIES = [-50.0, 0.0, 7.3, 20.0, 100.0]


def test_pricing_functions() -> None:
    """Linear curves evaluated at a few points."""
    assert supply_price(0, 0) == 5.0
    assert supply_price(10, 0) == 10.0
    assert supply_price(10, 2.5) == 12.5
    assert demand_price(0, 0) == 15.0
    assert demand_price(10, 0) == 10.0
    assert demand_price(10, -3) == 7.0


def test_demand_floor_at_zero() -> None:
    """Demand evaporates instead of going negative at large quantities."""
    assert demand_price(30, 0) == 0.0
    assert demand_price(40, 0) == 0.0


@pytest.mark.parametrize("q,shift", itertools.product(QUANTITIES, SHIFTS))
def test_prices_never_negative(q, shift) -> None:
    assert supply_price(q, shift) >= 0.0
    assert demand_price(q, shift) >= 0.0


def test_inverse_curves() -> None:
    assert quantity_supplied(10, 0) == 10.0
    assert quantity_supplied(3, 0) == 0.0
    assert quantity_demanded(10, 0) == 10.0
    assert quantity_demanded(5, 0) == 20.0
    assert quantity_demanded(16, 0) == 0.0


def test_default_outcome() -> None:
    """Default parameters: ceiling sits exactly at equilibrium and does not bind."""
    assert equilibrium(0, 0) == (10.0, 10.0)
    outcome = compute_outcome(10, 0, 0)
    assert outcome == MarketOutcome(
        consumer_surplus=25.0,
        producer_surplus=25.0,
        actual_quantity=10.0,
        actual_price=10.0,
    )


def test_binding_ceiling_at_supply_intercept() -> None:
    """A limit equal to the supply intercept drives quantity to zero."""
    outcome = compute_outcome(5, 0, 0)
    assert outcome.actual_price == 5.0
    assert outcome.actual_quantity == 0.0
    assert outcome.consumer_surplus == 0.0
    assert outcome.producer_surplus == 0.0


def test_binding_ceiling_interior() -> None:
    outcome = compute_outcome(8, 0, 0)
    assert outcome.actual_price == 8.0
    assert outcome.actual_quantity == pytest.approx(6.0)
    assert outcome.consumer_surplus == pytest.approx(0.5 * 6 * 7)
    assert outcome.producer_surplus == pytest.approx(0.5 * 6 * 3)


def test_ceiling_below_supply_intercept_floors_quantity() -> None:
    outcome = compute_outcome(2, 0, 0)
    assert outcome.actual_price == 2.0
    assert outcome.actual_quantity == 0.0


@pytest.mark.parametrize("supply_shift,demand_shift", itertools.product(SHIFTS, SHIFTS))
def test_non_binding_outcome_ignores_limit(supply_shift, demand_shift) -> None:
    """Above the equilibrium price the exact limit makes no difference."""
    eq_qty, eq_price = equilibrium(supply_shift, demand_shift)
    for limit in (eq_price, eq_price + 0.5, eq_price + 100.0):
        outcome = compute_outcome(limit, supply_shift, demand_shift)
        assert outcome.actual_price == eq_price
        assert outcome.actual_quantity == eq_qty


def test_monotone_in_price_limit() -> None:
    """Lowering a binding limit lowers both traded quantity and price."""
    limits = [9.5, 9.0, 8.0, 7.0, 6.0, 5.5]
    outcomes = [compute_outcome(p, 0, 0) for p in limits]
    for prev, nxt in zip(outcomes, outcomes[1:]):
        assert nxt.actual_quantity < prev.actual_quantity
        assert nxt.actual_price < prev.actual_price
    for limit, outcome in zip(limits, outcomes):
        assert outcome.actual_price == limit
    assert compute_outcome(4.0, 0, 0).actual_quantity == 0.0


def test_collapsed_market_uses_supply_price() -> None:
    """Curves that never cross at Q >= 0 give zero quantity priced off supply."""
    eq_qty, eq_price = equilibrium(6, -6)
    assert eq_qty == 0.0
    assert eq_price == 11.0
    assert demand_price(0, -6) == 9.0

    outcome = compute_outcome(20, 6, -6)
    assert outcome.actual_quantity == 0.0
    assert outcome.consumer_surplus == 0.0


def test_negative_surplus_is_not_clamped() -> None:
    """A supply price floored at zero can leave the consumer triangle negative."""
    # Supply intercept -15, demand intercept -5: eq_qty = 10, eq_price = 0
    outcome = compute_outcome(20, -20, -20)
    assert outcome.actual_quantity == 10.0
    assert outcome.actual_price == 0.0
    assert outcome.consumer_surplus == pytest.approx(-25.0)
    assert outcome.producer_surplus == pytest.approx(75.0)

    # Binding at a price below the (shifted) supply intercept
    outcome = compute_outcome(0.0, -2, 0)
    assert outcome.actual_price == 0.0
    assert outcome.actual_quantity == 0.0


def test_outcome_is_repeatable() -> None:
    first = compute_outcome(7.3, 1.7, -2.9)
    second = compute_outcome(7.3, 1.7, -2.9)
    assert first == second


def test_ceiling_binds() -> None:
    assert ceiling_binds(9.99, 0, 0)
    assert not ceiling_binds(10, 0, 0)
    assert not ceiling_binds(15, 0, 0)


def test_summary_without_binding() -> None:
    summary = summarize(SimulatorState())
    assert summary.equilibrium_quantity == 10.0
    assert summary.equilibrium_price == 10.0
    assert summary.total_surplus == pytest.approx(50.0)
    assert summary.deadweight_loss == pytest.approx(0.0)
    assert summary.shortage == 0.0
    assert not summary.binding


def test_summary_with_binding_ceiling() -> None:
    summary = summarize(SimulatorState(price_limit=8.0))
    assert summary.binding
    # Traded 6, demanded 14 at P = 8
    assert summary.shortage == pytest.approx(8.0)
    assert summary.total_surplus == pytest.approx(21.0 + 9.0)
    assert summary.deadweight_loss == pytest.approx(20.0)
