import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import streamlit as st
import pandas as pd
import plotly.express as px

from bank.config import settings
from bank.domain import NO_DEPOSIT
from bank.logging_config import setup_logging
from bank.rates import DepositCategory, RateTable
from bank.registry import Registry
from bank.reports import clients_frame, interest_by_category
from bank.validation import parse_client_name

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Bank Deposits", layout="wide")

if "registry" not in st.session_state:
    setup_logging(settings.log_level)
    st.session_state.registry = Registry(RateTable.from_settings(settings))
    logger.info("Dashboard session started")

registry: Registry = st.session_state.registry

st.sidebar.markdown("### 📈 Rates")
st.sidebar.caption(f"Savings: {registry.rates.savings:.2%}")
st.sidebar.caption(f"Fixed: {registry.rates.fixed:.2%}")

menu = st.sidebar.radio(
    "Menu",
    ["👥 Clients", "💰 Deposits", "📊 Interest"]
)


def show_status(result, success_message: str) -> None:
    if result.is_left():
        st.error(f"❌ {result.get_error()['message']}")
    else:
        st.success(f"✅ {success_message}")


if menu == "👥 Clients":
    st.title("👥 Clients")

    with st.form("add_client_form", clear_on_submit=True):
        c1, c2 = st.columns(2)
        with c1:
            client_id = st.number_input("Client ID", step=1, value=1, format="%d")
        with c2:
            name = st.text_input("Client Name")
        submitted = st.form_submit_button("Add Client")

    if submitted:
        parsed = parse_client_name(name)
        if parsed.is_left():
            st.error(f"❌ {parsed.get_error()['message'].rstrip(': ')}")
        else:
            if registry.find_by_id(int(client_id)).is_some():
                st.warning(f"⚠️ Client ID {int(client_id)} already exists; lookups use the first one.")
            registry.add_client(int(client_id), parsed.get_or_else(""))
            st.success("✅ Client added successfully.")

    listing = registry.list_clients()
    if listing.is_left():
        st.info(listing.get_error()["message"])
    else:
        df = clients_frame(listing.get_or_else(()))
        disp = df.copy()
        disp["amount"] = disp["amount"].map(lambda x: NO_DEPOSIT if pd.isna(x) else f"{x:,.2f}")
        disp["interest"] = disp["interest"].map(lambda x: f"{x:,.2f}")
        st.table(disp)
        st.download_button("⬇ Download CSV", df.to_csv(index=False), file_name="clients.csv")

elif menu == "💰 Deposits":
    st.title("💰 Deposits")

    st.header("Add Deposit to Client")
    with st.form("attach_deposit_form", clear_on_submit=True):
        c1, c2, c3 = st.columns(3)
        with c1:
            attach_id = st.number_input("Client ID", step=1, value=1, format="%d", key="attach_id")
        with c2:
            attach_amount = st.number_input("Deposit Amount", min_value=0.0, step=100.0, format="%.2f")
        with c3:
            category = st.selectbox("Deposit Type", list(DepositCategory), format_func=lambda c: c.value)
        attach = st.form_submit_button("Add Deposit")

    if attach:
        result = registry.attach_deposit(int(attach_id), attach_amount, category)
        show_status(result, f"Deposit added to client ID {int(attach_id)}")
        if result.is_right() and result.get_or_else(None).replaced is not None:
            st.warning(f"⚠️ Previous deposit of {result.get_or_else(None).replaced.amount:,.2f} was replaced.")

    st.header("Replenish Deposit")
    with st.form("replenish_form", clear_on_submit=True):
        c1, c2 = st.columns(2)
        with c1:
            replenish_id = st.number_input("Client ID", step=1, value=1, format="%d", key="replenish_id")
        with c2:
            replenish_amount = st.number_input("Amount to Replenish", step=100.0, format="%.2f")
        replenish = st.form_submit_button("Replenish")

    if replenish:
        result = registry.deposit_to_client(int(replenish_id), replenish_amount)
        show_status(result, f"Deposit added to client ID {int(replenish_id)}")

elif menu == "📊 Interest":
    st.title("📊 Interest")

    total = registry.total_interest()
    k1, k2, k3 = st.columns(3)
    with k1:
        st.metric("Clients", len(registry))
    with k2:
        st.metric("With deposit", sum(1 for c in registry if c.deposit is not None))
    with k3:
        st.metric("Total Interest", f"{total.get_or_else(0.0):,.2f}")

    if total.is_left():
        st.info(total.get_error()["message"])
    else:
        records = registry.list_clients().get_or_else(())
        df = clients_frame(records)
        df = df[df["category"] != NO_DEPOSIT]
        if df.empty:
            st.info("No deposits yet.")
        else:
            fig = px.bar(
                df,
                x="name",
                y="interest",
                color="category",
                labels={"name": "Client", "interest": "Interest"},
                title="Interest per Client",
                template="plotly_dark"
            )
            st.plotly_chart(fig, use_container_width=True)

            by_cat = interest_by_category(records)
            fig_cat = px.pie(by_cat, values="amount", names="category", title="Deposits by Type")
            fig_cat.update_layout(height=300)
            st.plotly_chart(fig_cat, use_container_width=True)
            st.table(by_cat)
