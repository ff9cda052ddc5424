"""
Price Limit Simulator - Interactive Dashboard

Shows how a price ceiling changes the traded quantity, the transaction
price and the split of surplus in a linear supply-and-demand market.

Run with: streamlit run app.py
"""

import logging
import os

import streamlit as st
import plotly.graph_objects as go
import pandas as pd

from pricelimit.config import (
    PRICE_LIMIT_RANGE,
    SHIFT_RANGE,
    SCENARIO_PRESETS,
    SimulatorState,
)
from pricelimit.curves import (
    consumer_surplus_polygon,
    market_table,
    price_limit_line,
    price_limit_sweep,
    producer_surplus_polygon,
    sample_curve,
)
from pricelimit.engine import demand_price, outcome_for, summarize, supply_price

logging.basicConfig(
    level=os.environ.get("LOGLEVEL", "INFO").upper(),
    format="%(levelname)s %(message)s",
)
_LOG = logging.getLogger(__name__)

# ── Page config ──────────────────────────────────────────────────────
st.set_page_config(
    page_title="Price Limit Simulator",
    layout="wide",
    initial_sidebar_state="expanded",
)

CONSUMER_FILL = "rgba(173,216,230,0.6)"  # light blue
PRODUCER_FILL = "rgba(255,128,128,0.6)"  # light red

CHART_THEME = dict(
    template="simple_white",
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(color="#262730"),
)


# ── Helper: build market chart ───────────────────────────────────────
def _polygon_trace(vertices, name, fillcolor):
    # Repeat the first vertex so the outline closes
    xs = list(vertices[:, 0]) + [vertices[0, 0]]
    ys = list(vertices[:, 1]) + [vertices[0, 1]]
    return go.Scatter(
        x=xs, y=ys, name=name, mode="lines", fill="toself",
        fillcolor=fillcolor, line=dict(width=0),
        hoverinfo="skip",
    )


def market_chart(state, outcome, equilibrium_point=None):
    supply = sample_curve(supply_price, state.supply_shift)
    demand = sample_curve(demand_price, state.demand_shift)
    limit = price_limit_line(state.price_limit)

    fig = go.Figure()
    fig.add_trace(_polygon_trace(
        consumer_surplus_polygon(outcome, state.demand_shift),
        "Consumer Surplus", CONSUMER_FILL,
    ))
    fig.add_trace(_polygon_trace(
        producer_surplus_polygon(outcome, state.supply_shift),
        "Producer Surplus", PRODUCER_FILL,
    ))
    for curve, name, color in [
        (supply, "Supply Curve", "#1f77b4"),
        (demand, "Demand Curve", "#ff7f0e"),
        (limit, "Price Limit", "#2ca02c"),
    ]:
        fig.add_trace(
            go.Scatter(
                x=curve[:, 0], y=curve[:, 1], name=name, mode="lines",
                line=dict(color=color, width=2.5),
            )
        )
    if equilibrium_point is not None:
        fig.add_trace(
            go.Scatter(
                x=[equilibrium_point[0]], y=[equilibrium_point[1]],
                mode="markers", name="Equilibrium",
                marker=dict(size=9, color="red", symbol="diamond",
                            line=dict(width=1, color="#333")),
            )
        )
    fig.update_layout(
        **CHART_THEME,
        title=dict(text="Price vs Quantity", font=dict(size=14)),
        xaxis_title="Quantity", yaxis_title="Price", height=480,
        margin=dict(l=50, r=20, t=35, b=30),
        legend=dict(orientation="h", yanchor="bottom", y=-0.25),
    )
    return fig


def sweep_chart(df, price_limit):
    fig = go.Figure()
    for col, name, color in [
        ("consumer_surplus", "Consumer Surplus", "#4e79a7"),
        ("producer_surplus", "Producer Surplus", "#e15759"),
        ("total_surplus", "Total Surplus", "#59a14f"),
    ]:
        fig.add_trace(
            go.Scatter(
                x=df["price_limit"], y=df[col], name=name, mode="lines",
                line=dict(color=color, width=2),
            )
        )
    fig.add_vline(x=price_limit, line_dash="dot", line_color="#666")
    fig.update_layout(
        **CHART_THEME,
        title=dict(text="Surplus vs Price Limit", font=dict(size=14)),
        xaxis_title="Price Limit", yaxis_title="Surplus", height=380,
        margin=dict(l=50, r=20, t=35, b=30),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=-0.3),
    )
    return fig


@st.cache_data
def cached_sweep(supply_shift, demand_shift):
    return price_limit_sweep(supply_shift, demand_shift)


# ── Sidebar ──────────────────────────────────────────────────────────
st.sidebar.title("Price Limit Simulator")

preset_name = st.sidebar.selectbox(
    "Scenario Preset",
    ["Custom"] + list(SCENARIO_PRESETS.keys()),
    index=1,  # default to Default Market
)

if preset_name != "Custom":
    preset = SCENARIO_PRESETS[preset_name].clamped()
else:
    preset = SimulatorState()

price_limit = st.sidebar.slider(
    "Price Limit", *PRICE_LIMIT_RANGE, float(preset.price_limit), step=0.1,
    help="Maximum legal price; binds when set below the equilibrium price",
)
supply_shift = st.sidebar.slider(
    "Supply Shift", *SHIFT_RANGE, float(preset.supply_shift), step=0.1,
)
demand_shift = st.sidebar.slider(
    "Demand Shift", *SHIFT_RANGE, float(preset.demand_shift), step=0.1,
)

state = SimulatorState(
    price_limit=price_limit,
    supply_shift=supply_shift,
    demand_shift=demand_shift,
)
_LOG.debug("Rerun with state %s", state)

# ── Derive outcome ───────────────────────────────────────────────────
outcome = outcome_for(state)
summary = summarize(state)

# ── Header ───────────────────────────────────────────────────────────
st.title("Price Limit Simulator")

c1, c2 = st.columns(2)
c1.markdown(f"**Consumer Surplus: {outcome.consumer_surplus:.2f}**")
c2.markdown(f"**Producer Surplus: {outcome.producer_surplus:.2f}**")

m1, m2, m3, m4, m5 = st.columns(5)
m1.metric("Traded Quantity", f"{outcome.actual_quantity:.2f}",
          f"{outcome.actual_quantity - summary.equilibrium_quantity:+.2f}")
m2.metric("Transaction Price", f"{outcome.actual_price:.2f}",
          f"{outcome.actual_price - summary.equilibrium_price:+.2f}")
m3.metric("Total Surplus", f"{summary.total_surplus:.2f}")
m4.metric("Deadweight Loss", f"{summary.deadweight_loss:.2f}", delta_color="inverse")
m5.metric("Shortage", f"{summary.shortage:.2f}")
st.caption(
    "Deadweight loss is the gap between total surplus with no ceiling and "
    "total surplus now, using this model's triangle surplus measured from "
    "each curve's intercept. It is not the textbook Harberger triangle."
)

if summary.binding:
    st.info(
        f"The price limit binds: equilibrium price would be "
        f"{summary.equilibrium_price:.2f}."
    )

# ── Tabs ─────────────────────────────────────────────────────────────
tab_market, tab_sweep, tab_method = st.tabs(
    ["Market", "Price Limit Sweep", "Methodology"]
)

with tab_market:
    st.plotly_chart(
        market_chart(
            state, outcome,
            (summary.equilibrium_quantity, summary.equilibrium_price),
        ),
        use_container_width=True,
    )
    with st.expander("Sampled curves", expanded=False):
        st.dataframe(market_table(state), hide_index=True, use_container_width=True)

with tab_sweep:
    st.markdown(
        "Each point re-runs the model with a different price limit while "
        "holding the current supply and demand shifts fixed."
    )
    st.plotly_chart(
        sweep_chart(cached_sweep(supply_shift, demand_shift), price_limit),
        use_container_width=True,
    )

with tab_method:
    st.header("Model Structure")
    st.markdown("""
- **Supply**: P = max(0, 0.5·Q + 5 + supply shift)
- **Demand**: P = max(0, −0.5·Q + 15 + demand shift)
- **Equilibrium**: Q* = max(0, (15 + demand shift) − (5 + supply shift)), P* read off the supply curve
- **Binding ceiling**: when the limit is below P*, price falls to the limit and quantity falls to what producers supply at that price
- **Surplus**: triangles between each curve's intercept and the transaction price over the traded quantity
""")

    st.header("Known Limitations")
    limits_data = {
        "Case": [
            "Curves do not cross at Q ≥ 0",
            "Binding ceiling",
            "Extreme shifts",
        ],
        "Behavior": [
            "Equilibrium quantity is zero and the price comes from the supply curve alone",
            "Traded quantity follows the supply curve; demand-side quantity is only used for the shortage metric",
            "Surplus triangles can turn negative and are shown as computed",
        ],
    }
    st.dataframe(pd.DataFrame(limits_data), hide_index=True, use_container_width=True)

# ── Footer ───────────────────────────────────────────────────────────
st.divider()
st.caption(
    "A single-good linear market for exploring price ceilings. "
    "Adjust the sliders in the sidebar to shift the curves or move the limit."
)
