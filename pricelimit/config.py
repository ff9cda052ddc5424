"""
Configuration for the Price Limit Simulator.

Defines the linear market used throughout the model, the slider ranges
exposed by the dashboard, and a handful of named scenario presets.
"""

from dataclasses import dataclass, replace
from typing import Dict, Tuple

# --- Linear market ---
# Supply:  P = 0.5 * Q + 5  + supply_shift
# Demand:  P = -0.5 * Q + 15 + demand_shift
SUPPLY_INTERCEPT = 5.0
SUPPLY_SLOPE = 0.5
DEMAND_INTERCEPT = 15.0
DEMAND_SLOPE = -0.5

# --- Slider ranges ---
PRICE_LIMIT_RANGE: Tuple[float, float] = (0.0, 20.0)
SHIFT_RANGE: Tuple[float, float] = (-10.0, 10.0)

# --- Plot sampling ---
N_SAMPLES = 100
MAX_QUANTITY = 20.0


def _clamp(value: float, bounds: Tuple[float, float]) -> float:
    lo, hi = bounds
    return max(lo, min(hi, value))


@dataclass
class SimulatorState:
    """The three user-controlled parameters of the simulator."""

    price_limit: float = 10.0
    supply_shift: float = 0.0  # vertical shift of the supply curve
    demand_shift: float = 0.0  # vertical shift of the demand curve

    def clamped(self) -> "SimulatorState":
        """Copy with every field pulled back into its slider range."""
        return replace(
            self,
            price_limit=_clamp(self.price_limit, PRICE_LIMIT_RANGE),
            supply_shift=_clamp(self.supply_shift, SHIFT_RANGE),
            demand_shift=_clamp(self.demand_shift, SHIFT_RANGE),
        )

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.price_limit, self.supply_shift, self.demand_shift)


# Named scenario presets
SCENARIO_PRESETS: Dict[str, SimulatorState] = {
    "Default Market": SimulatorState(),
    "Binding Ceiling": SimulatorState(price_limit=7.5),
    "Supply Shock": SimulatorState(price_limit=10.0, supply_shift=3.0),
    "Demand Boom": SimulatorState(price_limit=12.0, demand_shift=4.0),
    # Curves no longer cross at a non-negative quantity
    "Collapsed Market": SimulatorState(
        price_limit=10.0, supply_shift=6.0, demand_shift=-6.0,
    ),
}
