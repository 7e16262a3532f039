"""NPV Sweep Calculator — input form, sensitivity chart, and results table."""

import streamlit as st
import api_client
from components import npv_chart, sweep_table
from validation import validate_form

DEFAULT_CASH_FLOWS = [15000.0, 20000.0, 25000.0]


def _cash_flow_editor() -> list[float]:
    """Editable list of per-year cash flows kept in session state."""
    if "cash_flows" not in st.session_state:
        st.session_state["cash_flows"] = list(DEFAULT_CASH_FLOWS)
    cash_flows = st.session_state["cash_flows"]

    header, add = st.columns([3, 1])
    header.markdown("**Cash Flows ($)**")
    if add.button("Add Year", key="cf_add"):
        cash_flows.append(0.0)
        st.rerun()

    for i, value in enumerate(cash_flows):
        c1, c2 = st.columns([4, 1])
        cash_flows[i] = c1.number_input(
            f"Year {i + 1}", value=float(value), step=100.0, format="%.2f", key=f"cf_{i}_{len(cash_flows)}"
        )
        # At least one row must stay
        if len(cash_flows) > 1 and c2.button("Remove", key=f"cf_rm_{i}_{len(cash_flows)}"):
            cash_flows.pop(i)
            st.rerun()

    return list(cash_flows)


def _single_rate_check(initial_investment: float, cash_flows: list[float]):
    """NPV at one discount rate, straight from the engine endpoint."""
    with st.expander("Single-rate check"):
        rate = st.number_input("Discount Rate", min_value=0.0, max_value=1.0, value=0.10,
                               step=0.005, format="%.3f", key="single_rate")
        if st.button("Calculate at this rate", key="single_rate_go"):
            if not cash_flows:
                st.error("At least one cash flow is required")
                return
            try:
                npv = api_client.api.calculate_npv(initial_investment, rate, cash_flows)
            except Exception as e:
                st.error(f"NPV failed: {e}")
                return
            st.metric(f"NPV at {rate:.2%}", f"${npv:,.2f}")


def render():
    st.header("NPV Sensitivity Sweep")
    st.caption("Net present value across a range of discount rates.")

    col_form, col_results = st.columns([1, 2])

    with col_form:
        st.subheader("Input Parameters")
        c1, c2 = st.columns(2)
        lower = c1.number_input("Lower Bound", min_value=0.0, max_value=1.0, value=0.05,
                                step=0.01, format="%.3f", key="lower_bound")
        upper = c2.number_input("Upper Bound", min_value=0.0, max_value=1.0, value=0.15,
                                step=0.01, format="%.3f", key="upper_bound")
        increment = st.number_input("Increment", min_value=0.0, max_value=0.1, value=0.01,
                                    step=0.001, format="%.3f", key="increment")
        initial_investment = st.number_input("Initial Investment ($)", min_value=0.0, value=50000.0,
                                             step=1000.0, format="%.2f", key="initial_investment")
        cash_flows = _cash_flow_editor()

        form = {
            "lower_bound_discount_rate": lower,
            "upper_bound_discount_rate": upper,
            "discount_rate_increment": increment,
            "initial_investment": initial_investment,
            "cash_flows": cash_flows,
        }

        if st.button("Calculate NPV", type="primary", use_container_width=True):
            errors = validate_form(form)
            if errors:
                for message in errors.values():
                    st.error(message)
            else:
                with st.spinner("Calculating..."):
                    try:
                        st.session_state["sweep_points"] = api_client.api.sweep(
                            lower, upper, increment, cash_flows, initial_investment
                        )
                    except Exception as e:
                        st.error(f"Sweep failed: {e}")

        _single_rate_check(initial_investment, cash_flows)

    with col_results:
        points = st.session_state.get("sweep_points", [])
        if not points:
            st.info("Ready for analysis. Enter your parameters and click "
                    "\"Calculate NPV\" to see results and visualization.")
            return

        st.plotly_chart(npv_chart(points), use_container_width=True)

        best = max(points, key=lambda p: p["npv"])
        m1, m2, m3 = st.columns(3)
        m1.metric("Points", str(len(points)))
        m2.metric("Highest NPV", f"${best['npv']:,.2f}")
        m3.metric("at Rate", f"{best['discountRate']:.2%}")

        st.dataframe(sweep_table(points), hide_index=True, use_container_width=True)
