from core.calculators import down_payment_results, investment_results
from core.models import DownPaymentScenario, InputMode, InvestmentScenario
from export.pdf_export import build_summary_pdf
from export.summary import down_payment_summary, roi_summary, summary_rows


def test_down_payment_summary_without_monthly():
    s = DownPaymentScenario(home_price="300000", dp_value="20", cc_value="3")
    text = down_payment_summary(s, down_payment_results(s))
    assert text == (
        "Down Payment Estimator Summary:\n"
        "Home Price: $300,000.00\n"
        "Down Payment: $60,000.00\n"
        "Loan Amount: $240,000.00\n"
        "Closing Costs: $9,000.00\n"
        "Cash to Close: $69,000.00"
    )


def test_down_payment_summary_with_monthly():
    s = DownPaymentScenario(home_price="300000", dp_value="20", estimate_monthly=True, insurance="150", hoa="25")
    text = down_payment_summary(s, down_payment_results(s))
    assert "\n\n--- Monthly ---\n" in text
    assert "Insurance: $150.00" in text
    assert "HOA: $25.00" in text
    assert text.splitlines()[-1].startswith("Total Monthly: ")


def test_roi_summary_uses_address_or_placeholder():
    s = InvestmentScenario(purchase_price="200000", down_payment_percent="25", cc_mode=InputMode.DOLLAR, cc_value="5000")
    r = investment_results(s)
    assert roi_summary(s, r).splitlines()[0] == "Investment ROI Summary for property:"
    s.property_address = "123 Main St"
    text = roi_summary(s, r)
    assert text.splitlines()[0] == "Investment ROI Summary for 123 Main St:"
    assert "Total Cash Invested: $55,000.00" in text


def test_summary_rows_skip_headers():
    s = DownPaymentScenario(home_price="300000", estimate_monthly=True)
    rows = summary_rows(down_payment_summary(s, down_payment_results(s)))
    labels = [r[0] for r in rows]
    assert labels[0] == "Home Price"
    assert "--- Monthly ---" not in labels
    assert all(len(r) == 2 for r in rows)


def test_build_summary_pdf_returns_pdf_bytes():
    rows = [["Home Price", "$300,000.00"], ["Cash to Close", "$69,000.00"]]
    out = build_summary_pdf("Down Payment Estimate", rows, analysis="**Good** deal & <fine>\n\nSecond paragraph")
    assert out.startswith(b"%PDF")
    assert len(out) > 500


def test_build_summary_pdf_without_rows():
    assert build_summary_pdf("Empty", []).startswith(b"%PDF")
