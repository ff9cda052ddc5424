"""
Market model for the Price Limit Simulator.

A single linear market with a parallel-shiftable supply and demand curve:

    supply:  P = max(0,  0.5 * Q + 5  + supply_shift)
    demand:  P = max(0, -0.5 * Q + 15 + demand_shift)

The unconstrained equilibrium has a closed form (the +/-0.5 slopes cancel).
When a price ceiling sits below the equilibrium price it binds: the price
drops to the ceiling and the traded quantity falls to whatever producers
are willing to supply at that price. Consumer and producer surplus are the
triangles between each curve's intercept and the actual price over the
traded quantity.

Every function here is pure. Nothing is cached; the dashboard re-derives
the outcome from the three parameters on every rerun.
"""

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from .config import (
    DEMAND_INTERCEPT,
    DEMAND_SLOPE,
    SUPPLY_INTERCEPT,
    SUPPLY_SLOPE,
    SimulatorState,
)

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarketOutcome:
    """Surplus and traded quantity/price under the current price limit."""

    consumer_surplus: float
    producer_surplus: float
    actual_quantity: float
    actual_price: float


@dataclass(frozen=True)
class WelfareSummary:
    """Secondary metrics shown next to the surplus labels."""

    equilibrium_quantity: float
    equilibrium_price: float
    total_surplus: float
    deadweight_loss: float
    shortage: float  # demanded minus traded quantity at the ceiling
    binding: bool


def supply_price(quantity: float, supply_shift: float) -> float:
    return max(0.0, SUPPLY_SLOPE * quantity + SUPPLY_INTERCEPT + supply_shift)


def demand_price(quantity: float, demand_shift: float) -> float:
    # Floor at zero: demand evaporates rather than going negative
    return max(0.0, DEMAND_SLOPE * quantity + DEMAND_INTERCEPT + demand_shift)


def quantity_supplied(price: float, supply_shift: float) -> float:
    """Inverse supply curve, floored at zero quantity."""
    return max(0.0, (price - (SUPPLY_INTERCEPT + supply_shift)) / SUPPLY_SLOPE)


def quantity_demanded(price: float, demand_shift: float) -> float:
    """Inverse demand curve, floored at zero quantity."""
    return max(0.0, (price - (DEMAND_INTERCEPT + demand_shift)) / DEMAND_SLOPE)


def equilibrium(supply_shift: float, demand_shift: float) -> Tuple[float, float]:
    """Unconstrained (quantity, price) where the two curves meet.

    A negative intersection is treated as zero traded quantity. The price
    is always read off the supply curve, so when the quantity is clamped
    it need not match the demand curve's value at zero.
    """
    eq_qty = max(
        0.0,
        (DEMAND_INTERCEPT + demand_shift) - (SUPPLY_INTERCEPT + supply_shift),
    )
    return eq_qty, supply_price(eq_qty, supply_shift)


def ceiling_binds(price_limit: float, supply_shift: float, demand_shift: float) -> bool:
    _, eq_price = equilibrium(supply_shift, demand_shift)
    return price_limit < eq_price


def compute_outcome(
    price_limit: float, supply_shift: float, demand_shift: float
) -> MarketOutcome:
    """Derive surplus and traded quantity/price from the three parameters.

    Under a binding ceiling the quantity comes from the supply curve alone;
    demand-side quantity is not compared. Surpluses are returned as
    computed and may be negative for extreme shifts.
    """
    actual_qty, actual_price = equilibrium(supply_shift, demand_shift)

    if price_limit < actual_price:
        _LOG.debug(
            "Ceiling %.2f binds below equilibrium price %.2f",
            price_limit, actual_price,
        )
        actual_price = price_limit
        actual_qty = quantity_supplied(price_limit, supply_shift)

    consumer_surplus = 0.5 * actual_qty * (
        (DEMAND_INTERCEPT + demand_shift) - actual_price
    )
    producer_surplus = 0.5 * actual_qty * (
        actual_price - (SUPPLY_INTERCEPT + supply_shift)
    )

    return MarketOutcome(
        consumer_surplus=consumer_surplus,
        producer_surplus=producer_surplus,
        actual_quantity=actual_qty,
        actual_price=actual_price,
    )


def outcome_for(state: SimulatorState) -> MarketOutcome:
    return compute_outcome(*state.as_tuple())


def summarize(state: SimulatorState) -> WelfareSummary:
    """Equilibrium reference point, deadweight loss and shortage."""
    eq_qty, eq_price = equilibrium(state.supply_shift, state.demand_shift)
    outcome = outcome_for(state)
    # No ceiling at all: the welfare benchmark
    free = compute_outcome(math.inf, state.supply_shift, state.demand_shift)

    total = outcome.consumer_surplus + outcome.producer_surplus
    free_total = free.consumer_surplus + free.producer_surplus
    binding = state.price_limit < eq_price

    shortage = 0.0
    if binding:
        shortage = max(
            0.0,
            quantity_demanded(state.price_limit, state.demand_shift)
            - outcome.actual_quantity,
        )

    return WelfareSummary(
        equilibrium_quantity=eq_qty,
        equilibrium_price=eq_price,
        total_surplus=total,
        deadweight_loss=free_total - total,
        shortage=shortage,
        binding=binding,
    )
