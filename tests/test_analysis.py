from unittest.mock import Mock

from core import analysis
from core.analysis import (
    AnalysisSession,
    NarrativeAnalyst,
    down_payment_analysis_data,
    down_payment_prompt,
    roi_analysis_data,
    roi_prompt,
)
from core.calculators import down_payment_results, investment_results
from core.models import DownPaymentScenario, InputMode, InvestmentScenario
from core.presets import NO_KEY_MESSAGE


def _fake_client(content="Sample analysis"):
    fake_client = Mock()
    fake_message = Mock()
    fake_message.content = content
    fake_client.chat.completions.create.return_value = Mock(choices=[Mock(message=fake_message)])
    return fake_client


def test_analyze_uses_client_and_returns_content():
    client = _fake_client()
    analyst = NarrativeAnalyst(client=client, market="Dallas")
    out = analyst.analyze("prompt text")
    assert out == "Sample analysis"
    client.chat.completions.create.assert_called_once()
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["messages"][1]["content"] == "prompt text"
    assert "Dallas" in kwargs["messages"][0]["content"]


def test_analyze_without_key_returns_fallback():
    assert NarrativeAnalyst(api_key=None).analyze("anything") == NO_KEY_MESSAGE
    assert NarrativeAnalyst(api_key="").analyze("anything") == NO_KEY_MESSAGE


def test_analyze_failure_returns_message():
    client = Mock()
    client.chat.completions.create.side_effect = RuntimeError("boom")
    out = NarrativeAnalyst(client=client).analyze("x")
    assert out == "An error occurred while fetching analysis: boom"


def test_analyze_builds_client_from_key(monkeypatch):
    class DummyClient:
        def __init__(self, api_key=None, timeout=None):
            self.api_key = api_key
            self.chat = Mock()
            self.chat.completions.create = Mock(return_value=Mock(choices=[Mock(message=Mock(content="ok"))]))

    monkeypatch.setattr(analysis, "OpenAI", DummyClient)
    analyst = NarrativeAnalyst(api_key="test-key")
    assert analyst.analyze("x") == "ok"
    assert analyst._client.api_key == "test-key"


def test_down_payment_payload_is_all_strings():
    s = DownPaymentScenario(home_price="300000", dp_value="20", cc_value="3")
    data = down_payment_analysis_data(s, down_payment_results(s))
    assert all(isinstance(v, str) for v in data.values())
    assert data["home_price"] == "$300,000.00"
    assert data["down_payment_percent"] == "20.00%"
    assert data["loan_type"] == "Conventional"
    assert "total_monthly" not in data
    prompt = down_payment_prompt(data, "Dallas")
    assert "**Cash to Close:** $69,000.00" in prompt
    assert "Monthly Payment" not in prompt


def test_down_payment_payload_with_monthly_block():
    s = DownPaymentScenario(
        home_price="300000",
        dp_mode=InputMode.DOLLAR,
        dp_value="30000",
        estimate_monthly=True,
        insurance="150",
    )
    data = down_payment_analysis_data(s, down_payment_results(s))
    assert data["down_payment_percent"] == "10.00%"
    assert data["insurance"] == "$150.00"
    assert "Estimated Total Monthly Payment" in down_payment_prompt(data)


def test_roi_payload_uses_display_formats():
    s = InvestmentScenario(purchase_price="200000", down_payment_percent="25", cc_mode=InputMode.DOLLAR, cc_value="5000", monthly_rent="2000")
    data = roi_analysis_data(s, investment_results(s))
    assert all(isinstance(v, str) for v in data.values())
    assert data["total_cash_invested"] == "$55,000.00"
    assert data["cap_rate"].endswith("%")
    prompt = roi_prompt(data, "Austin")
    assert "Austin" in prompt
    assert f"**Cap Rate:** {data['cap_rate']}" in prompt


def test_analyst_scenario_helpers():
    client = _fake_client("fine")
    analyst = NarrativeAnalyst(client=client)
    s = InvestmentScenario(purchase_price="100000")
    assert analyst.analyze_roi(s, investment_results(s)) == "fine"
    d = DownPaymentScenario(home_price="100000")
    assert analyst.analyze_down_payment(d, down_payment_results(d)) == "fine"
    assert client.chat.completions.create.call_count == 2


def test_session_keeps_only_latest_request():
    session = AnalysisSession()
    first = session.begin()
    second = session.begin()
    assert session.finish(first, "stale") is False
    assert session.text == ""
    assert session.finish(second, "fresh") is True
    assert session.text == "fresh"


def test_session_run_and_clear():
    session = AnalysisSession()
    assert session.run(NarrativeAnalyst(client=_fake_client("text")), "p") == "text"
    session.clear()
    assert session.text == ""
