"""Plain-text summaries for the copy button."""
from __future__ import annotations

from core.formatters import format_currency, format_percent, parse_number
from core.models import DownPaymentResult, DownPaymentScenario, InvestmentResult, InvestmentScenario


def down_payment_summary(s: DownPaymentScenario, r: DownPaymentResult) -> str:
    lines = [
        "Down Payment Estimator Summary:",
        f"Home Price: {format_currency(parse_number(s.home_price))}",
        f"Down Payment: {format_currency(r.down_payment)}",
        f"Loan Amount: {format_currency(r.loan_amount)}",
        f"Closing Costs: {format_currency(r.closing_costs)}",
        f"Cash to Close: {format_currency(r.cash_to_close)}",
    ]
    if s.estimate_monthly:
        lines += [
            "",
            "--- Monthly ---",
            f"P&I: {format_currency(r.p_and_i)}",
            f"Taxes: {format_currency(r.monthly_tax)}",
            f"Insurance: {format_currency(r.insurance)}",
            f"HOA: {format_currency(r.hoa)}",
            f"Total Monthly: {format_currency(r.total_monthly)}",
        ]
    return "\n".join(lines)


def roi_summary(s: InvestmentScenario, r: InvestmentResult) -> str:
    label = s.property_address.strip() or "property"
    return "\n".join(
        [
            f"Investment ROI Summary for {label}:",
            f"Purchase Price: {format_currency(parse_number(s.purchase_price))}",
            f"Total Cash Invested: {format_currency(r.total_cash_invested)}",
            "---",
            f"Monthly Cash Flow: {format_currency(r.cash_flow_monthly)}",
            f"Annual Cash Flow: {format_currency(r.cash_flow_annual)}",
            "---",
            f"Cash on Cash Return: {format_percent(r.cash_on_cash_return)}",
            f"Cap Rate: {format_percent(r.cap_rate)}",
        ]
    )


def summary_rows(text: str) -> list[list[str]]:
    """Split a summary into ``[label, value]`` rows, skipping headers and rules."""
    rows = []
    for line in text.splitlines()[1:]:
        if ": " not in line:
            continue
        label, value = line.split(": ", 1)
        rows.append([label, value])
    return rows
