from __future__ import annotations

import pandas as pd

from core.formatters import parse_number, number_to_field
from core.models import (
    AssetTestResult,
    DownPaymentResult,
    DownPaymentScenario,
    InputMode,
    InvestmentResult,
    InvestmentScenario,
    LoanType,
    ModeValue,
)
from core.presets import FHA_MIN_DOWN_PCT


def effective(mode, value, base):
    """Return the dollar amount for a percent-or-dollar field.

    ``value`` may be the raw typed text or a number.  In percent mode it is a
    share of ``base`` (home or purchase price); in dollar mode it is taken as
    is.  Out-of-range percentages are not clamped here, validation flags them.
    """

    return ModeValue(mode=mode, value=value).effective(base)


def monthly_payment(principal, annual_rate_pct, term_years):
    """Calculate the fully amortizing monthly payment for a loan.

    ``principal`` is the starting loan amount, ``annual_rate_pct`` is the
    nominal yearly interest rate (e.g. ``6.5`` for 6.5%), and ``term_years`` is
    the amortization period in years.  A zero or negative loan, a zero rate or
    an empty term all give ``0`` rather than a division error.
    """

    L = float(principal or 0.0)
    r = float(annual_rate_pct or 0.0) / 100 / 12
    n = int(float(term_years or 0) * 12)
    if L <= 0 or r <= 0 or n <= 0:
        return 0.0
    growth = (1 + r) ** n
    return L * (r * growth) / (growth - 1)


def amortization_schedule(principal, annual_rate_pct, term_years) -> pd.DataFrame:
    """Month-by-month split of each payment into principal and interest.

    The last row absorbs the rounding drift so the balance ends at exactly
    zero.  An empty frame is returned whenever ``monthly_payment`` is ``0``.
    """

    cols = ["month", "payment", "principal", "interest", "balance"]
    pmt = monthly_payment(principal, annual_rate_pct, term_years)
    if pmt <= 0:
        return pd.DataFrame(columns=cols)
    r = float(annual_rate_pct) / 100 / 12
    n = int(float(term_years) * 12)
    balance = float(principal)
    rows = []
    for month in range(1, n + 1):
        interest = balance * r
        princ = pmt - interest
        if month == n:
            princ = balance
        balance = balance - princ
        rows.append(
            {
                "month": month,
                "payment": princ + interest,
                "principal": princ,
                "interest": interest,
                "balance": max(balance, 0.0),
            }
        )
    return pd.DataFrame(rows, columns=cols)


def yearly_schedule(schedule: pd.DataFrame) -> pd.DataFrame:
    """Roll a monthly schedule up to loan years."""
    cols = ["year", "payment", "principal", "interest", "balance"]
    if schedule is None or schedule.empty:
        return pd.DataFrame(columns=cols)
    df = schedule.copy()
    df["year"] = (df["month"] - 1) // 12 + 1
    agg = (
        df.groupby("year")
        .agg(
            payment=("payment", "sum"),
            principal=("principal", "sum"),
            interest=("interest", "sum"),
            balance=("balance", "last"),
        )
        .reset_index()
    )
    return agg[cols]


# ---------------------------------------------------------------------------
# Down payment estimator
# ---------------------------------------------------------------------------


def down_payment_results(s: DownPaymentScenario) -> DownPaymentResult:
    """Cash needed at closing plus an optional monthly payment estimate."""

    home_price = parse_number(s.home_price)
    down_payment = s.down_payment.effective(home_price)
    loan_amount = home_price - down_payment
    closing_costs = s.closing_costs.effective(home_price)
    cash_to_close = down_payment + closing_costs

    p_and_i = monthly_tax = insurance = hoa = total_monthly = 0.0
    if s.estimate_monthly:
        p_and_i = monthly_payment(loan_amount, parse_number(s.interest_rate), int(s.loan_term))
        # dollar-mode tax is an annual figure, same as percent-of-price
        monthly_tax = s.property_tax.effective(home_price) / 12
        insurance = parse_number(s.insurance)
        hoa = parse_number(s.hoa)
        total_monthly = p_and_i + monthly_tax + insurance + hoa

    return DownPaymentResult(
        down_payment=down_payment,
        loan_amount=loan_amount,
        closing_costs=closing_costs,
        cash_to_close=cash_to_close,
        p_and_i=p_and_i,
        monthly_tax=monthly_tax,
        insurance=insurance,
        hoa=hoa,
        total_monthly=total_monthly,
    )


def down_payment_percent(s: DownPaymentScenario, result: DownPaymentResult | None = None) -> float:
    """Down payment as a share of price, whichever mode it was entered in."""
    if s.dp_mode == InputMode.PERCENT:
        return parse_number(s.dp_value)
    result = result or down_payment_results(s)
    home_price = parse_number(s.home_price)
    if home_price <= 0:
        return 0.0
    return result.down_payment / home_price * 100


def apply_loan_type(s: DownPaymentScenario, loan_type) -> DownPaymentScenario:
    """Switch loan type, seeding the FHA minimum when no down payment was typed."""
    s.loan_type = LoanType(loan_type)
    if s.loan_type == LoanType.FHA and s.dp_value == "":
        s.dp_mode = InputMode.PERCENT
        s.dp_value = FHA_MIN_DOWN_PCT
    return s


# ---------------------------------------------------------------------------
# Investment ROI
# ---------------------------------------------------------------------------


def asset_test(s: InvestmentScenario) -> AssetTestResult:
    """Monthly asset performance test on rent alone.

    Tax and insurance are shown as monthly equivalents of the annual inputs
    and property management as a dollar fee, so the sub-view can be edited
    in the same units it is displayed in.
    """

    purchase_price = parse_number(s.purchase_price)
    gross_rent = parse_number(s.monthly_rent)

    monthly_tax = s.property_tax.effective(purchase_price) / 12
    monthly_insurance = parse_number(s.insurance) / 12
    prop_mgmt_fee = gross_rent * parse_number(s.prop_mgmt) / 100

    total_expenses = (
        parse_number(s.repairs_maintenance)
        + monthly_tax
        + monthly_insurance
        + prop_mgmt_fee
        + parse_number(s.hoa)
    )
    noi = gross_rent - total_expenses
    cap_rate = noi * 12 / purchase_price * 100 if purchase_price > 0 else 0.0

    return AssetTestResult(
        monthly_tax=monthly_tax,
        monthly_insurance=monthly_insurance,
        prop_mgmt_fee=prop_mgmt_fee,
        total_income=gross_rent,
        total_expenses=total_expenses,
        noi=noi,
        cap_rate=cap_rate,
    )


def investment_results(s: InvestmentScenario) -> InvestmentResult:
    """Full return analysis: financing, NOI, cash flow, CoC and cap rate.

    Operating expenses start from the asset test subtotal and add the CapEx
    reserve and utilities.  Vacancy reduces income; it is not an expense.
    """

    asset = asset_test(s)
    purchase_price = parse_number(s.purchase_price)

    down_payment_amount = purchase_price * parse_number(s.down_payment_percent) / 100
    loan_amount = purchase_price - down_payment_amount
    closing_costs = s.closing_costs.effective(purchase_price)
    total_cash_invested = down_payment_amount + closing_costs + parse_number(s.rehab)

    mortgage = monthly_payment(loan_amount, parse_number(s.interest_rate), int(s.loan_term))

    gross_monthly_income = parse_number(s.monthly_rent) + parse_number(s.other_income)
    vacancy_loss = gross_monthly_income * parse_number(s.vacancy_rate) / 100
    effective_income = gross_monthly_income - vacancy_loss
    capex_reserve = gross_monthly_income * parse_number(s.capex) / 100

    operating_expenses = asset.total_expenses + capex_reserve + parse_number(s.utilities)
    noi_monthly = effective_income - operating_expenses
    noi_annual = noi_monthly * 12
    cash_flow_monthly = noi_monthly - mortgage
    cash_flow_annual = cash_flow_monthly * 12

    coc = cash_flow_annual / total_cash_invested * 100 if total_cash_invested > 0 else 0.0
    cap_rate = noi_annual / purchase_price * 100 if purchase_price > 0 else 0.0

    return InvestmentResult(
        down_payment_amount=down_payment_amount,
        loan_amount=loan_amount,
        closing_costs=closing_costs,
        total_cash_invested=total_cash_invested,
        mortgage_payment=mortgage,
        gross_monthly_income=gross_monthly_income,
        vacancy_loss=vacancy_loss,
        effective_income=effective_income,
        capex_reserve=capex_reserve,
        operating_expenses=operating_expenses,
        noi_monthly=noi_monthly,
        noi_annual=noi_annual,
        cash_flow_monthly=cash_flow_monthly,
        cash_flow_annual=cash_flow_annual,
        cash_on_cash_return=coc,
        cap_rate=cap_rate,
        asset=asset,
    )


def set_asset_tax(s: InvestmentScenario, monthly) -> InvestmentScenario:
    """Write a monthly tax projection back as an annual dollar amount."""
    s.tax_value = number_to_field(parse_number(monthly) * 12)
    s.tax_mode = InputMode.DOLLAR
    return s


def set_asset_insurance(s: InvestmentScenario, monthly) -> InvestmentScenario:
    s.insurance = number_to_field(parse_number(monthly) * 12)
    return s


def set_asset_prop_mgmt(s: InvestmentScenario, monthly_fee) -> InvestmentScenario:
    """Turn a monthly management fee back into a percent of gross rent."""
    gross_rent = parse_number(s.monthly_rent)
    pct = parse_number(monthly_fee) / gross_rent * 100 if gross_rent > 0 else 0.0
    s.prop_mgmt = number_to_field(pct)
    return s
