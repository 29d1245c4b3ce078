# app.py
# Concrete Mix Design Tool — Streamlit UI
# Run:
#   pip install -e .
#   streamlit run app.py

from __future__ import annotations

import json

import pandas as pd
import streamlit as st

from mixdesign.config import CSV_FILENAME, CURVE_FCK_RANGE, CURVE_POINTS
from mixdesign.design import design_curve_table
from mixdesign.errors import InvalidStrength
from mixdesign.export import export_csv, runs_dataframe
from mixdesign.exposure import EXPOSURE_CLASSES
from mixdesign.runs import MixDesignService

# =============================================================================
# Page configuration
# =============================================================================
st.set_page_config(
    page_title="Concrete Mix Design Tool",
    page_icon="🏗️",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.title("Concrete Mix Design Tool")
st.write(
    "Estimates water-cement ratio and material quantities per m³ from the characteristic strength (fck), "
    "and checks the mix against the durability limits of the selected exposure condition."
)

with st.expander("Method and limitations (read first)", expanded=False):
    st.markdown(
        """
**Method summary**
- Six fitted quadratic curves in fck give target mean strength, w/c, water, cement, fine and coarse aggregate.
- Durability checks compare the unrounded w/c and cement content with the exposure limits, and fck with the minimum grade.
- Results are rounded for display: w/c to 3 decimals, everything else to 2.

**Limitations**
- Outputs are indicative and do not replace trial mixes.
- Unknown exposure keys are treated as **Mild**.
"""
    )

st.divider()

# =============================================================================
# Session state (one run log per browser session)
# =============================================================================
if "service" not in st.session_state:
    st.session_state["service"] = MixDesignService()
service: MixDesignService = st.session_state["service"]

# =============================================================================
# Sidebar
# =============================================================================
with st.sidebar:
    st.header("Inputs")

    fck = st.number_input("fck (MPa)", min_value=0.0, max_value=100.0, value=25.0, step=1.0)
    cement_grade = st.text_input("Cement grade", value="OPC 53")

    st.subheader("Exposure condition")
    exp_keys = list(EXPOSURE_CLASSES.keys())
    exposure = st.selectbox(
        "Select exposure",
        exp_keys,
        index=exp_keys.index("moderate"),
        format_func=lambda k: EXPOSURE_CLASSES[k].label,
    )

    st.divider()
    st.subheader("Project")
    project_name = st.text_input("Project name")
    project_site = st.text_input("Project site")
    mix_id = st.text_input("Mix ID", placeholder="auto (MIX-001)")
    casting_date = st.date_input("Casting date", value=None)

    st.divider()
    run_btn = st.button("Run mix design", type="primary", use_container_width=True)

# =============================================================================
# Utility tables
# =============================================================================
def exposure_table() -> pd.DataFrame:
    rows = [
        (e.label, e.max_water_cement_ratio, e.min_cement_content, e.min_grade_fck)
        for e in EXPOSURE_CLASSES.values()
    ]
    return pd.DataFrame(rows, columns=["Exposure", "Max w/c", "Min cement (kg/m³)", "Min fck (MPa)"])


def quantities_table(result) -> pd.DataFrame:
    rows = [
        ("Target mean strength", "MPa", f"{result.target_mean_strength:.2f}"),
        ("Water-cement ratio", "-", f"{result.water_cement_ratio:.3f}"),
        ("Water", "kg/m³", f"{result.water_content:.2f}"),
        ("Cement", "kg/m³", f"{result.cement_content:.2f}"),
        ("Fine aggregate", "kg/m³", f"{result.fine_aggregate:.2f}"),
        ("Coarse aggregate", "kg/m³", f"{result.coarse_aggregate:.2f}"),
    ]
    return pd.DataFrame(rows, columns=["Quantity", "Unit", "Value"])


def checks_table(run) -> pd.DataFrame:
    r, c = run.result, run.result.checks
    e = c.exposure
    rows = [
        ("Water-cement ratio", f"{r.water_cement_ratio:.3f}", f"≤ {e.max_water_cement_ratio:.2f}", c.water_cement_ratio_ok),
        ("Cement content (kg/m³)", f"{r.cement_content:.2f}", f"≥ {e.min_cement_content:.0f}", c.cement_content_ok),
        ("Grade fck (MPa)", f"{run.input.fck:g}", f"≥ {e.min_grade_fck:.0f}", c.grade_ok),
    ]
    df = pd.DataFrame(rows, columns=["Check", "Value", "Limit", "OK"])
    df["OK"] = df["OK"].map(lambda ok: "✅" if ok else "❌")
    return df

# =============================================================================
# Main content
# =============================================================================
left, right = st.columns([1.05, 0.95])

with left:
    st.subheader("Exposure conditions")
    st.dataframe(exposure_table(), use_container_width=True, hide_index=True)

with right:
    st.subheader("How to use")
    st.markdown(
        """
1. Enter fck and select the exposure condition.
2. Fill in project details (optional; mix ID and casting date default automatically).
3. Run mix design. Each run is added to the history below and to the CSV export.
"""
    )

st.divider()

# =============================================================================
# Run + render results
# =============================================================================
if run_btn:
    try:
        run = service.create_run(
            fck,
            cement_grade=cement_grade,
            exposure=exposure,
            project_name=project_name,
            project_site=project_site,
            mix_id=mix_id,
            casting_date=casting_date.isoformat() if casting_date else None,
        )
    except InvalidStrength as e:
        st.error(e.message)
        run = None

    if run is not None:
        res = run.result

        st.subheader(f"Results — {run.project.mix_id}")
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Target mean strength (MPa)", f"{res.target_mean_strength:.2f}")
        c2.metric("w/c ratio", f"{res.water_cement_ratio:.3f}")
        c3.metric("Water (kg/m³)", f"{res.water_content:.2f}")
        c4.metric("Cement (kg/m³)", f"{res.cement_content:.2f}")

        tab1, tab2 = st.tabs(["Quantities", "Durability checks"])
        with tab1:
            st.write("All quantities are reported per **1 m³** of concrete.")
            st.dataframe(quantities_table(res), use_container_width=True, hide_index=True)
        with tab2:
            st.dataframe(checks_table(run), use_container_width=True, hide_index=True)
            if res.checks.all_ok:
                st.success(f"Mix satisfies all {res.checks.exposure.label} limits.")
            else:
                st.warning(f"Mix does not satisfy all {res.checks.exposure.label} limits.")

        with st.expander("Run record (JSON)", expanded=False):
            st.code(json.dumps(run.to_dict(), indent=2), language="json")

# -----------------------------------------------------------------------------
# Design curves
# -----------------------------------------------------------------------------
st.subheader("Design curves")
curve = design_curve_table(CURVE_FCK_RANGE[0], CURVE_FCK_RANGE[1], CURVE_POINTS, exposure)
col_wc, col_mass = st.columns(2)
with col_wc:
    st.caption("Water-cement ratio vs fck")
    st.line_chart(curve.set_index("fck")[["water_cement_ratio"]])
with col_mass:
    st.caption("Quantities (kg/m³) vs fck")
    st.line_chart(curve.set_index("fck")[["water_content", "cement_content", "fine_aggregate", "coarse_aggregate"]])

st.divider()

# -----------------------------------------------------------------------------
# History + download
# -----------------------------------------------------------------------------
st.subheader("Run history")
history = service.list_runs()
if history:
    st.dataframe(runs_dataframe(history), use_container_width=True, hide_index=True)
    st.download_button(
        label="Download all runs (CSV)",
        data=export_csv(service.all_runs()).encode("utf-8"),
        file_name=CSV_FILENAME,
        mime="text/csv",
    )
else:
    st.info("No runs yet. Use the sidebar to run a mix design.")

st.caption(
    "Prototype tool. Verify assumptions and results against project specifications and standards "
    "before use in procurement or approvals."
)
