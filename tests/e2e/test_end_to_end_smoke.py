from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parents[2] / "app" / "main.py"


def _started_app() -> AppTest:
    app = AppTest.from_file(str(APP_PATH), default_timeout=30)
    app.run()
    return app


def _click(app: AppTest, label: str) -> None:
    button = next(item for item in app.button if item.label == label)
    button.click().run()


@pytest.mark.e2e
def test_streamlit_app_renders_all_tabs() -> None:
    app = _started_app()

    assert not app.exception
    assert app.title[0].value == "Strategy Suite"
    assert [tab.label for tab in app.tabs] == [
        "Payments",
        "Batch Payments",
        "Build a Pizza",
        "Notifications",
        "Accounts",
    ]


@pytest.mark.e2e
def test_payment_with_valid_method_issues_receipt() -> None:
    app = _started_app()
    app.text_input(key="payment_method").set_value("DEBIT")
    _click(app, "Pay")

    assert not app.exception
    assert not app.error
    assert app.success[0].value.startswith("Receipt ")


@pytest.mark.e2e
@pytest.mark.parametrize(
    ("amount", "method", "expected"),
    [
        ("100", "creidt", "creidt"),
        ("1e26", "cash", "below"),
        ("abc", "cash", "numeric"),
    ],
)
def test_rejected_payment_shows_error_without_crashing(
    amount: str, method: str, expected: str
) -> None:
    app = _started_app()
    app.text_input(key="payment_amount").set_value(amount)
    app.text_input(key="payment_method").set_value(method)
    _click(app, "Pay")

    assert not app.exception
    assert len(app.error) == 1
    assert expected in app.error[0].value
    assert not app.success


@pytest.mark.e2e
def test_malformed_batch_shows_error_without_crashing() -> None:
    app = _started_app()
    app.text_area(key="batch_text").set_value("100,cash\n100 cash\n")
    _click(app, "Run Batch")

    assert not app.exception
    assert len(app.error) == 1
    assert "Line 2" in app.error[0].value


@pytest.mark.e2e
def test_batch_with_bad_entries_still_reports() -> None:
    app = _started_app()
    app.text_area(key="batch_text").set_value("100,cash\n1e26,cash\n40,creidt\n")
    _click(app, "Run Batch")

    assert not app.exception
    assert not app.error
    metrics = {metric.label: metric.value for metric in app.metric}
    assert metrics["Success"] == "1"
    assert metrics["Error"] == "2"


@pytest.mark.e2e
def test_overdraft_is_reported_as_warning() -> None:
    app = _started_app()
    app.text_input(key="account_amount").set_value("-500")
    _click(app, "Make Transaction")

    assert not app.exception
    assert app.warning[0].value.startswith("OVERDRAFT")
