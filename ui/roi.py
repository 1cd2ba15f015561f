import pandas as pd
import streamlit as st

from core.analysis import roi_analysis_data, roi_prompt
from core.calculators import (
    investment_results,
    set_asset_insurance,
    set_asset_prop_mgmt,
    set_asset_tax,
)
from core.config import config
from core.formatters import format_currency, format_percent
from core.state import load_scenario, navigate, reset_scenario, widget_key
from core.validation import validate_investment
from export.pdf_export import build_summary_pdf
from export.summary import roi_summary, summary_rows
from ui.components import (
    derived_field,
    mode_field,
    push_widgets,
    render_analysis,
    term_field,
    text_field,
)

VIEW = "roi"
TAX_MODE_LABELS = {"percent": "% Price", "dollar": "$/Year"}


def breakdown_frame(r) -> pd.DataFrame:
    """Monthly waterfall from effective income down to cash flow."""
    rows = [
        ("Effective Monthly Income", r.effective_income),
        ("- Total OpEx", r.operating_expenses),
        ("= Monthly NOI", r.noi_monthly),
        ("- Mortgage", r.mortgage_payment),
        ("= Monthly Cash Flow", r.cash_flow_monthly),
        ("Annual Cash Flow", r.cash_flow_annual),
    ]
    df = pd.DataFrame(rows, columns=["Line", "Amount"])
    df["Amount"] = df["Amount"].map(format_currency)
    return df


def render_asset_test(s, asset, errors):
    with st.expander("Asset Performance Test", expanded=True):
        text_field(VIEW, "property_address", "Property Address (Optional)", errors)
        st.markdown("**Monthly Income**")
        text_field(VIEW, "monthly_rent", "Gross Rent ($)", errors)
        st.markdown("**Monthly Expenses**")
        text_field(VIEW, "repairs_maintenance", "Repairs & Maintenance ($)", errors)
        derived_field(VIEW, "asset_tax", "Property Taxes ($/Month)", asset.monthly_tax, set_asset_tax)
        derived_field(VIEW, "asset_insurance", "Insurance ($/Month)", asset.monthly_insurance, set_asset_insurance)
        derived_field(VIEW, "asset_prop_mgmt", "Property Management Fee ($/Month)", asset.prop_mgmt_fee, set_asset_prop_mgmt)
        text_field(VIEW, "hoa", "HOA ($/Month)", errors)
        st.markdown("**Performance Metrics**")
        c1, c2 = st.columns(2)
        c1.metric("Asset Monthly NOI", format_currency(asset.noi))
        c2.metric("Asset Cap Rate", format_percent(asset.cap_rate))


def render_roi_view(analyst=None):
    """Investment ROI calculator with the asset performance sub-view."""
    s = load_scenario(VIEW)
    errors = validate_investment(s)
    r = investment_results(s)
    push_widgets(VIEW, s)

    head, back = st.columns([4, 1])
    head.header("Investment ROI Calculator")
    back.button("Back", key=widget_key(VIEW, "back"), on_click=navigate, args=("home",))

    left, right = st.columns([2, 1])
    with left:
        st.subheader("Purchase & Financing")
        c1, c2 = st.columns(2)
        with c1:
            text_field(VIEW, "purchase_price", "Purchase Price ($)", errors)
            text_field(VIEW, "interest_rate", "Interest Rate (APR %)", errors)
            text_field(VIEW, "rehab", "Rehab / Initial Repairs ($)", errors)
        with c2:
            text_field(VIEW, "down_payment_percent", "Down Payment (%)", errors)
            term_field(VIEW)
            mode_field(VIEW, "cc_mode", "cc_value", "Closing Costs", errors)

        render_asset_test(s, r.asset, errors)

        st.subheader("Income")
        text_field(VIEW, "other_income", "Other Monthly Income ($)", errors)

        st.subheader("Operating Expenses")
        c1, c2 = st.columns(2)
        with c1:
            text_field(VIEW, "vacancy_rate", "Vacancy Rate (%)", errors)
            text_field(VIEW, "prop_mgmt", "Property Management (%)", errors)
            text_field(VIEW, "capex", "CapEx / Reserves (%)", errors)
        with c2:
            text_field(VIEW, "utilities", "Utilities ($/Month)", errors)
            text_field(VIEW, "insurance", "Insurance ($/Year)", errors, help_key="roi_insurance")
            mode_field(VIEW, "tax_mode", "tax_value", "Property Tax", errors, TAX_MODE_LABELS)

    with right:
        st.subheader("Key Return Metrics")
        st.metric("Cash on Cash Return", format_percent(r.cash_on_cash_return))
        st.metric("Cap Rate", format_percent(r.cap_rate))
        st.metric("Monthly Cash Flow", format_currency(r.cash_flow_monthly))
        with st.expander("View Detailed Breakdown"):
            st.caption(f"Total Cash Invested: {format_currency(r.total_cash_invested)}")
            st.dataframe(breakdown_frame(r), use_container_width=True, hide_index=True)
        summary = roi_summary(s, r)
        st.button("Reset", key=widget_key(VIEW, "reset"), on_click=reset_scenario, args=(VIEW,))
        with st.expander("Copy Summary"):
            st.code(summary, language=None)
        pdf_slot = st.empty()

    session = render_analysis(
        VIEW,
        "Investment Analysis",
        disabled=bool(errors),
        prompt_fn=lambda: roi_prompt(roi_analysis_data(s, r), config.MARKET),
        analyst=analyst,
    )
    pdf_slot.download_button(
        "Download PDF",
        data=build_summary_pdf("Investment ROI Summary", summary_rows(summary), session.text),
        file_name="investment_roi_summary.pdf",
        mime="application/pdf",
        key=widget_key(VIEW, "pdf"),
    )
    return r
