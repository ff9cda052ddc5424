"""
Curve sampling for the Price Limit Simulator.

Turns the market model into point arrays the plotting layer can draw:
supply/demand line series, the horizontal price-limit line, and the two
quadrilaterals bounding consumer and producer surplus. All arrays are
``(n, 2)`` with ``(quantity, price)`` rows.
"""

from typing import Callable

import numpy as np
import pandas as pd

from .config import MAX_QUANTITY, N_SAMPLES, PRICE_LIMIT_RANGE, SimulatorState
from .engine import MarketOutcome, compute_outcome, demand_price, supply_price

PriceFn = Callable[[float, float], float]


def sample_curve(
    fn: PriceFn,
    shift: float,
    n_samples: int = N_SAMPLES,
    max_quantity: float = MAX_QUANTITY,
) -> np.ndarray:
    """Evaluate ``fn(q, shift)`` on ``n_samples`` evenly spaced quantities.

    Quantities start at zero and step by ``max_quantity / n_samples``, so
    ``max_quantity`` itself is never sampled.
    """
    if n_samples <= 0:
        return np.zeros((0, 2))
    step = max_quantity / n_samples
    curve = np.zeros((n_samples, 2))
    for i in range(n_samples):
        q = i * step
        curve[i] = (q, fn(q, shift))
    return curve


def price_limit_line(price_limit: float) -> np.ndarray:
    return np.array([[0.0, price_limit], [MAX_QUANTITY, price_limit]])


def consumer_surplus_polygon(outcome: MarketOutcome, demand_shift: float) -> np.ndarray:
    q, p = outcome.actual_quantity, outcome.actual_price
    return np.array([
        [0.0, demand_price(0.0, demand_shift)],
        [q, demand_price(q, demand_shift)],
        [q, p],
        [0.0, p],
    ])


def producer_surplus_polygon(outcome: MarketOutcome, supply_shift: float) -> np.ndarray:
    q, p = outcome.actual_quantity, outcome.actual_price
    return np.array([
        [0.0, p],
        [q, p],
        [q, supply_price(q, supply_shift)],
        [0.0, supply_price(0.0, supply_shift)],
    ])


def market_table(state: SimulatorState, n_samples: int = N_SAMPLES) -> pd.DataFrame:
    """Sampled supply and demand prices side by side."""
    supply = sample_curve(supply_price, state.supply_shift, n_samples)
    demand = sample_curve(demand_price, state.demand_shift, n_samples)
    return pd.DataFrame({
        "quantity": supply[:, 0],
        "supply_price": supply[:, 1],
        "demand_price": demand[:, 1],
    })


def price_limit_sweep(
    supply_shift: float, demand_shift: float, n_points: int = 81
) -> pd.DataFrame:
    """Outcome across the whole price-limit slider range, shifts held fixed."""
    lo, hi = PRICE_LIMIT_RANGE
    rows = []
    for limit in np.linspace(lo, hi, n_points):
        o = compute_outcome(float(limit), supply_shift, demand_shift)
        rows.append({
            "price_limit": float(limit),
            "consumer_surplus": o.consumer_surplus,
            "producer_surplus": o.producer_surplus,
            "total_surplus": o.consumer_surplus + o.producer_surplus,
            "actual_quantity": o.actual_quantity,
        })
    return pd.DataFrame(rows)
