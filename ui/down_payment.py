import streamlit as st

from core.analysis import down_payment_analysis_data, down_payment_prompt
from core.calculators import (
    amortization_schedule,
    apply_loan_type,
    down_payment_results,
    yearly_schedule,
)
from core.config import config
from core.formatters import format_currency, parse_number
from core.models import LoanType
from core.presets import LOAN_TYPE_NOTES
from core.state import load_scenario, navigate, reset_scenario, widget_key
from core.validation import validate_down_payment
from export.pdf_export import build_summary_pdf
from export.summary import down_payment_summary, summary_rows
from ui.components import (
    commit,
    mode_field,
    push_widgets,
    render_analysis,
    term_field,
    text_field,
)

VIEW = "down_payment"
TAX_MODE_LABELS = {"percent": "% Price", "dollar": "$/Year"}


def render_down_payment_view(analyst=None):
    """Down payment estimator: inputs on the left, costs on the right."""
    s = load_scenario(VIEW)
    errors = validate_down_payment(s)
    r = down_payment_results(s)
    push_widgets(VIEW, s)

    head, back = st.columns([4, 1])
    head.header("Down Payment Estimator")
    back.button("Back", key=widget_key(VIEW, "back"), on_click=navigate, args=("home",))

    left, right = st.columns(2)
    with left:
        text_field(VIEW, "home_price", "Home Price ($)", errors)
        mode_field(VIEW, "dp_mode", "dp_value", "Down Payment", errors)
        st.selectbox(
            "Loan Type",
            [t.value for t in LoanType],
            key=widget_key(VIEW, "loan_type"),
            on_change=commit,
            args=(VIEW, "loan_type", apply_loan_type),
        )
        note = LOAN_TYPE_NOTES.get(s.loan_type.value)
        if note:
            st.info(note)
        mode_field(VIEW, "cc_mode", "cc_value", "Closing Costs", errors)
        st.divider()
        st.checkbox(
            "Estimate Monthly Payment",
            key=widget_key(VIEW, "estimate_monthly"),
            on_change=commit,
            args=(VIEW, "estimate_monthly"),
        )
        if s.estimate_monthly:
            text_field(VIEW, "interest_rate", "Interest Rate (APR %)", errors)
            term_field(VIEW)
            mode_field(VIEW, "tax_mode", "tax_value", "Property Tax", errors, TAX_MODE_LABELS)
            text_field(VIEW, "insurance", "Homeowners Insurance ($/Month)", errors)
            text_field(VIEW, "hoa", "HOA Dues ($/Month)", errors)

    with right:
        st.subheader("Estimated Costs")
        c1, c2 = st.columns(2)
        c1.metric("Down Payment", format_currency(r.down_payment))
        c2.metric("Loan Amount", format_currency(r.loan_amount))
        c1.metric("Closing Costs", format_currency(r.closing_costs))
        c2.metric("Cash to Close", format_currency(r.cash_to_close))
        if s.estimate_monthly:
            st.subheader("Estimated Monthly Payment")
            c1, c2 = st.columns(2)
            c1.metric("Principal & Interest", format_currency(r.p_and_i))
            c2.metric("Taxes", format_currency(r.monthly_tax))
            c1.metric("Insurance", format_currency(r.insurance))
            c2.metric("HOA", format_currency(r.hoa))
            st.metric("Total Monthly", format_currency(r.total_monthly))
            schedule = amortization_schedule(r.loan_amount, parse_number(s.interest_rate), int(s.loan_term))
            if not schedule.empty:
                with st.expander("Amortization Schedule"):
                    st.dataframe(yearly_schedule(schedule).round(2), use_container_width=True, hide_index=True)

        summary = down_payment_summary(s, r)
        st.divider()
        b1, b2 = st.columns(2)
        b1.button("Reset", key=widget_key(VIEW, "reset"), on_click=reset_scenario, args=(VIEW,))
        with st.expander("Copy Summary"):
            st.code(summary, language=None)

    session = render_analysis(
        VIEW,
        "Purchase Analysis",
        disabled=bool(errors),
        prompt_fn=lambda: down_payment_prompt(down_payment_analysis_data(s, r), config.MARKET),
        analyst=analyst,
    )
    b2.download_button(
        "Download PDF",
        data=build_summary_pdf("Down Payment Estimate", summary_rows(summary), session.text),
        file_name="down_payment_estimate.pdf",
        mime="application/pdf",
        key=widget_key(VIEW, "pdf"),
    )
    return r
