DISCLAIMER = (
    "These calculators implement standard amortization and rental-property math "
    "for planning purposes only. Figures are estimates; lender quotes, appraisals, "
    "tax assessments and insurance premiums prevail. This is not financial, tax or legal advice."
)

FHA_MIN_DOWN_PCT = "3.5"

LOAN_TYPE_NOTES = {
    "VA": "VA loans may not require a down payment for eligible veterans. Check with your lender.",
}

# Help text shown under inputs.  The investment estimates mirror common
# rule-of-thumb figures used by local investors.
FIELD_HINTS = {
    "home_price": "Contract or list price of the home.",
    "tax_value": "Percent of price per year, or annual dollars.",
    "insurance": "Monthly homeowners insurance premium.",
    "hoa": "Monthly HOA / condo dues.",
    "repairs_maintenance": "Actual or estimate (e.g., 1% of home value annually, divided by 12)",
    "asset_tax": "Actual or estimate = FMV × 0.004",
    "asset_insurance": "Actual or estimate",
    "asset_prop_mgmt": "Based on % of Gross Rent",
    "roi_insurance": "Annual insurance premium.",
    "capex": "Reserve as % of gross monthly income.",
    "vacancy_rate": "Share of gross income lost to vacancy.",
}

NO_KEY_MESSAGE = (
    "No API key configured. Set HOMECALC_OPENAI_API_KEY to enable narrative analysis."
)

SYSTEM_INSTRUCTION = (
    "You are a helpful financial assistant specializing in {market} real estate. "
    "Analyze the provided data and give clear, concise, and actionable insights for a "
    "homebuyer or investor. Use markdown for formatting, such as bolding key terms and "
    "using bullet points for lists."
)

DOWN_PAYMENT_PROMPT = """
Analyze the following home purchase scenario in {market}:

- **Home Price:** {home_price}
- **Down Payment:** {down_payment} ({down_payment_percent})
- **Loan Amount:** {loan_amount}
- **Loan Type:** {loan_type}
- **Estimated Closing Costs:** {closing_costs}
- **Total Cash to Close:** {cash_to_close}
{monthly_block}
Provide a brief analysis covering:
1.  The feasibility of the cash to close amount.
2.  Comments on the estimated monthly payment relative to the loan amount.
3.  Any specific considerations for the chosen loan type in the {market} market.
"""

DOWN_PAYMENT_MONTHLY_BLOCK = """- **Estimated Total Monthly Payment:** {total_monthly}
  - Principal & Interest: {p_and_i}
  - Taxes: {monthly_tax}
  - Insurance: {insurance}
  - HOA: {hoa}
"""

ROI_PROMPT = """
Analyze the following real estate investment scenario in {market}:

- **Purchase Price:** {purchase_price}
- **Total Cash Invested:** {total_cash_invested}
- **Loan Amount:** {loan_amount}
- **Gross Monthly Income:** {gross_monthly_income}
- **Total Monthly Operating Expenses (ex-mortgage):** {operating_expenses}
- **Monthly Net Operating Income (NOI):** {noi_monthly}
- **Monthly Cash Flow:** {cash_flow_monthly}
- **Annual Cash Flow:** {cash_flow_annual}
- **Cash on Cash Return:** {cash_on_cash_return}
- **Cap Rate:** {cap_rate}

Provide a brief analysis covering:
1.  The strength of the key return metrics (Cash on Cash Return and Cap Rate) for the {market} market.
2.  An evaluation of the property's cash flow.
3.  Potential risks or areas for improvement based on the provided numbers (e.g., if OpEx seems high, etc.).
"""
