import pytest
from streamlit.testing.v1 import AppTest

from core.calculators import monthly_payment
from core.config import config
from core.presets import NO_KEY_MESSAGE
from core.validation import PERCENT_MSG


def full_app():
    import app

    app.render_app()


def down_payment_app():
    from core.state import init_state
    from ui.down_payment import render_down_payment_view

    init_state()
    render_down_payment_view()


def roi_app():
    from core.state import init_state
    from ui.roi import render_roi_view

    init_state()
    render_roi_view()


def metric(at, label):
    return next(m.value for m in at.metric if m.label == label)


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    monkeypatch.setattr(config, "OPENAI_API_KEY", None)


def test_home_navigation_round_trip():
    at = AppTest.from_function(full_app, default_timeout=30)
    at.run()
    assert at.session_state["view"] == "home"
    at.button(key="open_roi").click().run()
    assert at.session_state["view"] == "roi"
    assert any(h.value == "Investment ROI Calculator" for h in at.header)
    at.button(key="roi__back").click().run()
    assert at.session_state["view"] == "home"


def test_down_payment_metrics_follow_inputs():
    at = AppTest.from_function(down_payment_app, default_timeout=30)
    at.run()
    at.text_input(key="down_payment__home_price").input("300000")
    at.text_input(key="down_payment__dp_value").input("20")
    at.text_input(key="down_payment__cc_value").input("3")
    at.run()
    assert metric(at, "Down Payment") == "$60,000.00"
    assert metric(at, "Loan Amount") == "$240,000.00"
    assert metric(at, "Closing Costs") == "$9,000.00"
    assert metric(at, "Cash to Close") == "$69,000.00"
    assert not any(m.label == "Total Monthly" for m in at.metric)


def test_down_payment_monthly_estimate():
    at = AppTest.from_function(down_payment_app, default_timeout=30)
    at.session_state["down_payment"] = {
        "home_price": "300000",
        "dp_value": "20",
        "interest_rate": "6.5",
    }
    at.run()
    at.checkbox(key="down_payment__estimate_monthly").check().run()
    expected = monthly_payment(240000, 6.5, 30)
    assert metric(at, "Principal & Interest") == f"${expected:,.2f}"
    assert metric(at, "Total Monthly") == f"${expected:,.2f}"


def test_fha_seeds_minimum_down_payment():
    at = AppTest.from_function(down_payment_app, default_timeout=30)
    at.run()
    at.selectbox(key="down_payment__loan_type").select("FHA").run()
    assert at.text_input(key="down_payment__dp_value").value == "3.5"
    assert at.session_state["down_payment"]["loan_type"] == "FHA"


def test_va_shows_note():
    at = AppTest.from_function(down_payment_app, default_timeout=30)
    at.run()
    at.selectbox(key="down_payment__loan_type").select("VA").run()
    assert any("VA loans" in i.value for i in at.info)


def test_percent_error_disables_analysis():
    at = AppTest.from_function(down_payment_app, default_timeout=30)
    at.run()
    at.text_input(key="down_payment__dp_value").input("150").run()
    assert any(e.value == PERCENT_MSG for e in at.error)
    assert at.button(key="down_payment__analyze").disabled


def test_analysis_without_key_shows_fallback():
    at = AppTest.from_function(down_payment_app, default_timeout=30)
    at.run()
    at.button(key="down_payment__analyze").click().run()
    assert any(NO_KEY_MESSAGE in m.value for m in at.markdown)


def test_reset_clears_inputs():
    at = AppTest.from_function(down_payment_app, default_timeout=30)
    at.run()
    at.text_input(key="down_payment__home_price").input("500000").run()
    at.button(key="down_payment__reset").click().run()
    assert at.text_input(key="down_payment__home_price").value == ""
    assert metric(at, "Cash to Close") == "$0.00"


def test_roi_asset_tax_writes_back_annual_dollars():
    at = AppTest.from_function(roi_app, default_timeout=30)
    at.session_state["roi"] = {"purchase_price": "200000", "tax_value": "2"}
    at.run()
    assert at.text_input(key="roi__asset_tax").value == "333.33"
    at.text_input(key="roi__asset_tax").input("250").run()
    assert at.session_state["roi"]["tax_value"] == "3000"
    assert at.session_state["roi"]["tax_mode"] == "dollar"
    assert at.text_input(key="roi__asset_tax").value == "250.00"


def test_roi_prop_mgmt_fee_writes_back_percent():
    at = AppTest.from_function(roi_app, default_timeout=30)
    at.session_state["roi"] = {"purchase_price": "200000", "monthly_rent": "2000"}
    at.run()
    at.text_input(key="roi__asset_prop_mgmt").input("200").run()
    assert at.session_state["roi"]["prop_mgmt"] == "10"
    assert at.text_input(key="roi__prop_mgmt").value == "10"


def test_roi_metrics():
    at = AppTest.from_function(roi_app, default_timeout=30)
    at.session_state["roi"] = {
        "purchase_price": "200000",
        "down_payment_percent": "25",
        "cc_mode": "dollar",
        "cc_value": "5000",
        "monthly_rent": "2000",
    }
    at.run()
    assert metric(at, "Cap Rate") == "12.00%"
    assert metric(at, "Asset Cap Rate") == "12.00%"
    assert metric(at, "Monthly Cash Flow") == "$2,000.00"
