"""Field-level checks for the calculator forms.

Validation never blocks a calculation.  Any message in the returned map only
disables the narrative analysis button.  When a field breaks both rules the
percentage message replaces the negative one.
"""
from __future__ import annotations

from typing import Dict, Iterable, Union

from core.formatters import parse_number
from core.models import DownPaymentScenario, InputMode, InvestmentScenario

NEGATIVE_MSG = "Value cannot be negative."
PERCENT_MSG = "Percentage cannot exceed 100."

# Fields that are always percentages regardless of any mode selector
DOWN_PAYMENT_PERCENT_FIELDS = ("interest_rate",)
INVESTMENT_PERCENT_FIELDS = (
    "down_payment_percent",
    "interest_rate",
    "vacancy_rate",
    "prop_mgmt",
    "capex",
)

# value field -> mode field
DOWN_PAYMENT_MODE_FIELDS = {"dp_value": "dp_mode", "cc_value": "cc_mode", "tax_value": "tax_mode"}
INVESTMENT_MODE_FIELDS = {"cc_value": "cc_mode", "tax_value": "tax_mode"}


def _check(scenario, numeric: Iterable[str], percent: Iterable[str], moded: Dict[str, str]) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for name in numeric:
        if parse_number(getattr(scenario, name)) < 0:
            errors[name] = NEGATIVE_MSG
    for name in percent:
        if parse_number(getattr(scenario, name)) > 100:
            errors[name] = PERCENT_MSG
    for name, mode_name in moded.items():
        if getattr(scenario, mode_name) == InputMode.PERCENT and parse_number(getattr(scenario, name)) > 100:
            errors[name] = PERCENT_MSG
    return errors


def validate_down_payment(s: DownPaymentScenario) -> Dict[str, str]:
    return _check(s, s.NUMERIC_FIELDS, DOWN_PAYMENT_PERCENT_FIELDS, DOWN_PAYMENT_MODE_FIELDS)


def validate_investment(s: InvestmentScenario) -> Dict[str, str]:
    return _check(s, s.NUMERIC_FIELDS, INVESTMENT_PERCENT_FIELDS, INVESTMENT_MODE_FIELDS)


def validate(scenario: Union[DownPaymentScenario, InvestmentScenario]) -> Dict[str, str]:
    """Return ``{field: message}`` for whichever calculator ``scenario`` belongs to."""
    if isinstance(scenario, InvestmentScenario):
        return validate_investment(scenario)
    if isinstance(scenario, DownPaymentScenario):
        return validate_down_payment(scenario)
    raise TypeError(f"unsupported scenario type: {type(scenario).__name__}")


def is_valid(errors: Dict[str, str]) -> bool:
    return not errors
