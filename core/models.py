from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.formatters import number_to_field, parse_number


class InputMode(str, Enum):
    PERCENT = "percent"
    DOLLAR = "dollar"


class LoanTerm(int, Enum):
    THIRTY = 30
    FIFTEEN = 15


class LoanType(str, Enum):
    CONVENTIONAL = "Conventional"
    FHA = "FHA"
    VA = "VA"
    USDA = "USDA"
    OTHER = "Other"


def _as_text(v: Any) -> Any:
    # number widgets and tests hand us floats; fields stay strings as typed
    if v is None:
        return ""
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    if isinstance(v, float):
        return number_to_field(v)
    return v


class ModeValue(BaseModel):
    """A typed value read as a percent of some base or as a flat amount."""

    mode: InputMode = InputMode.PERCENT
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _text(cls, v: Any) -> Any:
        return _as_text(v)

    def effective(self, base: float) -> float:
        v = parse_number(self.value)
        if self.mode == InputMode.PERCENT:
            return base * v / 100
        return v


class DownPaymentScenario(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    home_price: str = ""
    dp_mode: InputMode = InputMode.PERCENT
    dp_value: str = ""
    loan_type: LoanType = LoanType.CONVENTIONAL
    cc_mode: InputMode = InputMode.PERCENT
    cc_value: str = ""
    estimate_monthly: bool = False
    interest_rate: str = ""
    loan_term: LoanTerm = LoanTerm.THIRTY
    tax_mode: InputMode = InputMode.PERCENT
    tax_value: str = Field("", description="Percent of price, or annual dollars")
    insurance: str = Field("", description="Monthly homeowners insurance")
    hoa: str = Field("", description="Monthly HOA dues")

    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = (
        "home_price",
        "dp_value",
        "cc_value",
        "interest_rate",
        "tax_value",
        "insurance",
        "hoa",
    )

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _text(cls, v: Any) -> Any:
        return _as_text(v)

    @property
    def down_payment(self) -> ModeValue:
        return ModeValue(mode=self.dp_mode, value=self.dp_value)

    @property
    def closing_costs(self) -> ModeValue:
        return ModeValue(mode=self.cc_mode, value=self.cc_value)

    @property
    def property_tax(self) -> ModeValue:
        return ModeValue(mode=self.tax_mode, value=self.tax_value)


class InvestmentScenario(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    purchase_price: str = ""
    property_address: str = ""
    down_payment_percent: str = ""
    interest_rate: str = ""
    loan_term: LoanTerm = LoanTerm.THIRTY
    cc_mode: InputMode = InputMode.PERCENT
    cc_value: str = ""
    rehab: str = ""
    monthly_rent: str = ""
    other_income: str = ""
    vacancy_rate: str = ""
    prop_mgmt: str = Field("", description="Percent of gross rent")
    repairs_maintenance: str = Field("", description="Monthly dollars")
    capex: str = Field("", description="Percent of gross income")
    tax_mode: InputMode = InputMode.PERCENT
    tax_value: str = Field("", description="Percent of price, or annual dollars")
    insurance: str = Field("", description="Annual insurance premium")
    hoa: str = ""
    utilities: str = ""

    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = (
        "purchase_price",
        "down_payment_percent",
        "interest_rate",
        "cc_value",
        "rehab",
        "monthly_rent",
        "other_income",
        "vacancy_rate",
        "prop_mgmt",
        "repairs_maintenance",
        "capex",
        "tax_value",
        "insurance",
        "hoa",
        "utilities",
    )

    @field_validator(*NUMERIC_FIELDS, mode="before")
    @classmethod
    def _text(cls, v: Any) -> Any:
        return _as_text(v)

    @property
    def closing_costs(self) -> ModeValue:
        return ModeValue(mode=self.cc_mode, value=self.cc_value)

    @property
    def property_tax(self) -> ModeValue:
        return ModeValue(mode=self.tax_mode, value=self.tax_value)


class DownPaymentResult(BaseModel):
    down_payment: float = 0.0
    loan_amount: float = 0.0
    closing_costs: float = 0.0
    cash_to_close: float = 0.0
    p_and_i: float = 0.0
    monthly_tax: float = 0.0
    insurance: float = 0.0
    hoa: float = 0.0
    total_monthly: float = 0.0


class AssetTestResult(BaseModel):
    monthly_tax: float = 0.0
    monthly_insurance: float = 0.0
    prop_mgmt_fee: float = 0.0
    total_income: float = 0.0
    total_expenses: float = 0.0
    noi: float = 0.0
    cap_rate: float = 0.0


class InvestmentResult(BaseModel):
    down_payment_amount: float = 0.0
    loan_amount: float = 0.0
    closing_costs: float = 0.0
    total_cash_invested: float = 0.0
    mortgage_payment: float = 0.0
    gross_monthly_income: float = 0.0
    vacancy_loss: float = 0.0
    effective_income: float = 0.0
    capex_reserve: float = 0.0
    operating_expenses: float = 0.0
    noi_monthly: float = 0.0
    noi_annual: float = 0.0
    cash_flow_monthly: float = 0.0
    cash_flow_annual: float = 0.0
    cash_on_cash_return: float = 0.0
    cap_rate: float = 0.0
    asset: Optional[AssetTestResult] = None
