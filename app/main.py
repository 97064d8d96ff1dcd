from __future__ import annotations

from decimal import Decimal

import streamlit as st

from strategy_suite.domain.errors import StrategySuiteError
from strategy_suite.domain.models import Account, BatchOperationResult, Result, TransactionKind
from strategy_suite.infrastructure.config import AppConfig
from strategy_suite.infrastructure.logging_setup import setup_logging
from strategy_suite.services.account_service import AccountService
from strategy_suite.services.batch_service import BatchService
from strategy_suite.services.composition import CompositionContainer, build_topping_registry
from strategy_suite.services.key_utils import format_money
from strategy_suite.services.notification_service import (
    SAMPLE_RECIPIENTS,
    NotificationService,
    build_channel_registry,
)
from strategy_suite.services.payment_service import PaymentService

SAMPLE_BATCH = "# amount,method\n100,cash\n100,DEBIT\n250.50, Cash \n40,creidt\n"


def _init_services() -> tuple[AppConfig, PaymentService, BatchService, AccountService]:
    config = AppConfig()
    payment_service = PaymentService(config=config)
    batch_service = BatchService(payment_service, config)
    account_service = AccountService()
    return config, payment_service, batch_service, account_service


def _new_account() -> Account:
    return Account(name="Fatima", email_address="fatima@example.com", balance=Decimal("400"))


def _init_state() -> None:
    st.session_state.setdefault("pizza", CompositionContainer())
    st.session_state.setdefault("receipts", [])
    st.session_state.setdefault("account", _new_account())


def _remember_receipt(receipts: list[Result], receipt: Result, limit: int) -> list[Result]:
    return [*receipts, receipt][-limit:]


def _render_batch_summary(result: BatchOperationResult) -> None:
    metric_col_1, metric_col_2, metric_col_3 = st.columns(3)
    metric_col_1.metric("Success", result.success_count)
    metric_col_2.metric("Error", result.error_count)
    metric_col_3.metric("Total charged", format_money(result.total_value))

    rows = []
    for item in result.items:
        rows.append(
            {
                "Payment": item.source_name,
                "Status": item.status.value.title(),
                "Value": item.metrics.get("value", ""),
                "Details": " | ".join(message.text for message in item.messages),
            }
        )

    st.dataframe(rows, use_container_width=True)


def _payment_tab(config: AppConfig, payment_service: PaymentService) -> None:
    st.subheader("Pay", anchor=False)
    st.caption(
        "Supported payment methods: " + ", ".join(payment_service.supported_methods())
    )

    with st.form(key="payment_form"):
        amount = st.text_input("Amount", value="100", key="payment_amount")
        method = st.text_input("Payment Method", value="cash", key="payment_method")
        submit = st.form_submit_button("Pay", type="primary")

    if submit:
        try:
            result = payment_service.process(amount, method)
            st.session_state.receipts = _remember_receipt(
                st.session_state.receipts, result, config.max_session_receipts
            )
            st.success(f"Receipt {result.id}")
            stat_col_1, stat_col_2 = st.columns(2)
            stat_col_1.metric("Amount", format_money(result.value))
            stat_col_2.metric("Payment method", result.discriminator)
        except StrategySuiteError as exc:
            st.error(str(exc))

    receipts = st.session_state.receipts
    if receipts:
        st.markdown(f"**Last {len(receipts)} receipts this session**")
        st.dataframe(
            [
                {
                    "Id": receipt.id,
                    "Amount": format_money(receipt.value),
                    "Payment method": receipt.discriminator,
                }
                for receipt in receipts
            ],
            use_container_width=True,
        )


def _batch_tab(config: AppConfig, batch_service: BatchService) -> None:
    st.subheader("Batch Payments", anchor=False)
    st.caption(f"One 'amount,method' pair per line (max {config.max_batch_items} payments).")

    text = st.text_area("Payments", value=SAMPLE_BATCH, height=180, key="batch_text")
    if st.button("Run Batch", type="primary"):
        try:
            entries = batch_service.parse_payment_lines(text)
            if not entries:
                st.warning("Enter at least one payment.")
                return
            batch_result = batch_service.run_payment_batch(entries)
            _render_batch_summary(batch_result)

            csv_name, csv_bytes = batch_service.build_csv(batch_result)
            txt_name, txt_summary = batch_service.build_text_summary(batch_result)
            st.download_button(
                "Download Batch CSV",
                data=csv_bytes,
                file_name=csv_name,
                mime="text/csv",
            )
            st.download_button(
                "Download Batch TXT",
                data=txt_summary,
                file_name=txt_name,
                mime="text/plain",
            )
        except StrategySuiteError as exc:
            st.error(str(exc))


def _pizza_tab() -> None:
    st.subheader("Build a Pizza", anchor=False)
    pizza: CompositionContainer = st.session_state.pizza

    toppings = build_topping_registry()

    choice = st.selectbox(
        "Topping",
        options=toppings.keys(),
        format_func=lambda key: (
            f"{toppings.resolve(key).name} ({toppings.resolve(key).unit_price})"
        ),
        key="topping_choice",
    )

    col_add, col_reset = st.columns([1, 1])
    with col_add:
        if st.button("Add Topping", type="primary", use_container_width=True):
            try:
                pizza.add_component(toppings.resolve(choice))
            except StrategySuiteError as exc:
                st.error(str(exc))
    with col_reset:
        if st.button("New Pizza", use_container_width=True):
            st.session_state.pizza = CompositionContainer()
            st.rerun()

    st.metric("Total Price", format_money(pizza.total_price()))
    st.code(pizza.describe(), language="text")


def _notification_tab() -> None:
    st.subheader("Notifications", anchor=False)
    registry = build_channel_registry()

    recipient = st.selectbox(
        "Recipient",
        options=SAMPLE_RECIPIENTS,
        format_func=lambda item: item.name,
        key="notify_recipient",
    )
    modes = st.multiselect(
        "Channels",
        options=registry.keys(),
        default=["email", "sms"],
        key="notify_modes",
    )

    if st.button("Notify", type="primary"):
        if not modes:
            st.warning("Select at least one channel.")
            return
        try:
            service = NotificationService.for_recipient(recipient, modes, registry)
            for notification in service.notify():
                st.write(f"[{notification.channel}] {notification.text}")
        except StrategySuiteError as exc:
            st.error(str(exc))


def _account_tab(account_service: AccountService) -> None:
    st.subheader("Account Transactions", anchor=False)
    account: Account = st.session_state.account
    st.caption("Positive amounts deposit, negative amounts withdraw.")
    st.metric(f"{account.name} balance", format_money(account.balance))

    with st.form(key="account_form"):
        amount = st.text_input("Transaction amount", value="-100", key="account_amount")
        submit = st.form_submit_button("Make Transaction", type="primary")

    if submit:
        try:
            outcome = account_service.make_transaction(account, amount)
            if outcome.kind == TransactionKind.OVERDRAFT:
                st.warning(outcome.message)
            else:
                st.success(outcome.message)
            st.caption(f"[{outcome.notification.channel}] {outcome.notification.text}")
        except StrategySuiteError as exc:
            st.error(str(exc))

    if st.button("Reset Account"):
        st.session_state.account = _new_account()
        st.rerun()


def main() -> None:
    st.set_page_config(page_title="Strategy Suite", layout="wide")
    st.title("Strategy Suite", anchor=False)

    config, payment_service, batch_service, account_service = _init_services()
    setup_logging(config.log_level, config.log_format)
    _init_state()

    tab_pay, tab_batch, tab_pizza, tab_notify, tab_account = st.tabs(
        ["Payments", "Batch Payments", "Build a Pizza", "Notifications", "Accounts"]
    )

    with tab_pay:
        _payment_tab(config, payment_service)

    with tab_batch:
        _batch_tab(config, batch_service)

    with tab_pizza:
        _pizza_tab()

    with tab_notify:
        _notification_tab()

    with tab_account:
        _account_tab(account_service)


if __name__ == "__main__":
    main()
