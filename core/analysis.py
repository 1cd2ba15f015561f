"""Narrative commentary for calculator results.

The analyst only ever sees formatted strings, the same ones the UI displays,
never raw floats.  It never raises: a missing key gives a fixed message and a
failed request gives a short error description.
"""
from __future__ import annotations

import itertools
from typing import Dict, Optional

from openai import OpenAI

from core.calculators import down_payment_percent
from core.formatters import format_currency, format_percent, parse_number
from core.logging_utils import get_logger
from core.models import (
    DownPaymentResult,
    DownPaymentScenario,
    InvestmentResult,
    InvestmentScenario,
)
from core.presets import (
    DOWN_PAYMENT_MONTHLY_BLOCK,
    DOWN_PAYMENT_PROMPT,
    NO_KEY_MESSAGE,
    ROI_PROMPT,
    SYSTEM_INSTRUCTION,
)

MODEL = "gpt-4o-mini"

log = get_logger(__name__)


def down_payment_analysis_data(s: DownPaymentScenario, r: DownPaymentResult) -> Dict[str, str]:
    data = {
        "home_price": format_currency(parse_number(s.home_price)),
        "down_payment": format_currency(r.down_payment),
        "down_payment_percent": format_percent(down_payment_percent(s, r)),
        "loan_amount": format_currency(r.loan_amount),
        "loan_type": s.loan_type.value,
        "closing_costs": format_currency(r.closing_costs),
        "cash_to_close": format_currency(r.cash_to_close),
    }
    if s.estimate_monthly:
        data.update(
            {
                "total_monthly": format_currency(r.total_monthly),
                "p_and_i": format_currency(r.p_and_i),
                "monthly_tax": format_currency(r.monthly_tax),
                "insurance": format_currency(r.insurance),
                "hoa": format_currency(r.hoa),
            }
        )
    return data


def roi_analysis_data(s: InvestmentScenario, r: InvestmentResult) -> Dict[str, str]:
    return {
        "purchase_price": format_currency(parse_number(s.purchase_price)),
        "total_cash_invested": format_currency(r.total_cash_invested),
        "loan_amount": format_currency(r.loan_amount),
        "gross_monthly_income": format_currency(r.gross_monthly_income),
        "operating_expenses": format_currency(r.operating_expenses),
        "noi_monthly": format_currency(r.noi_monthly),
        "cash_flow_monthly": format_currency(r.cash_flow_monthly),
        "cash_flow_annual": format_currency(r.cash_flow_annual),
        "cash_on_cash_return": format_percent(r.cash_on_cash_return),
        "cap_rate": format_percent(r.cap_rate),
    }


def down_payment_prompt(data: Dict[str, str], market: str = "Dallas") -> str:
    monthly = ""
    if "total_monthly" in data:
        monthly = DOWN_PAYMENT_MONTHLY_BLOCK.format(**data)
    return DOWN_PAYMENT_PROMPT.format(market=market, monthly_block=monthly, **data)


def roi_prompt(data: Dict[str, str], market: str = "Dallas") -> str:
    return ROI_PROMPT.format(market=market, **data)


class NarrativeAnalyst:
    """Thin wrapper over a chat-completions client.

    The API key is handed in by the caller.  If a client is passed it is used
    directly (useful for tests); otherwise one is built lazily from the key.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = MODEL,
        market: str = "Dallas",
        timeout: float = 60.0,
        client: Optional[OpenAI] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.market = market
        self.timeout = timeout
        self._client = client

    @property
    def configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def _get_client(self):
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    def analyze(self, prompt: str) -> str:
        if not self.configured:
            return NO_KEY_MESSAGE
        log.info("analysis requested", extra={"context": {"model": self.model, "market": self.market}})
        try:
            response = self._get_client().chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_INSTRUCTION.format(market=self.market)},
                    {"role": "user", "content": prompt},
                ],
            )
            text = response.choices[0].message.content
        except Exception as e:
            log.warning("analysis request failed", extra={"context": {"error": str(e), "model": self.model}})
            return f"An error occurred while fetching analysis: {e}"
        if not text:
            return "An unknown error occurred while fetching analysis."
        return text

    def analyze_down_payment(self, s: DownPaymentScenario, r: DownPaymentResult) -> str:
        return self.analyze(down_payment_prompt(down_payment_analysis_data(s, r), self.market))

    def analyze_roi(self, s: InvestmentScenario, r: InvestmentResult) -> str:
        return self.analyze(roi_prompt(roi_analysis_data(s, r), self.market))


class AnalysisSession:
    """Keeps the latest analysis for one calculator.

    Every request takes a new ticket; a response is stored only if its ticket
    is still the newest, so a slow earlier request can never overwrite a
    later one.
    """

    def __init__(self) -> None:
        self._tickets = itertools.count(1)
        self.current = 0
        self.text = ""

    def begin(self) -> int:
        self.current = next(self._tickets)
        self.text = ""
        return self.current

    def finish(self, ticket: int, text: str) -> bool:
        if ticket != self.current:
            log.debug("discarding superseded analysis", extra={"context": {"ticket": ticket}})
            return False
        self.text = text
        return True

    def clear(self) -> None:
        self.begin()

    def run(self, analyst: NarrativeAnalyst, prompt: str) -> str:
        ticket = self.begin()
        self.finish(ticket, analyst.analyze(prompt))
        return self.text
