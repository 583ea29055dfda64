"""
Streamlit Dashboard for BetTrack Ledger.

Single page for tracking betting results per player:
- Adding players
- Recording wins and losses as tickets
- Cumulative earnings per player and side by side

All state lives in st.session_state for the current browser session.
Widgets only call PlayerLedger; no numbers are computed here.
"""

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from config.ledger_config import LedgerConfig
from src.ledger import PlayerLedger, Severity, ValidationError, ViewMode
from src.ledger.amounts import format_currency, format_number, format_signed
from src.ledger.charts import (
    comparison_frame,
    empty_state_message,
    plot_comparison,
    plot_single_player,
    single_player_frame,
)
from src.logging import configure_logger

TOAST_ICONS = {
    Severity.SUCCESS: "✅",
    Severity.INFO: "📉",
    Severity.DESTRUCTIVE: "❌",
}

# Page config
st.set_page_config(
    page_title="BetTrack Buddy",
    page_icon="💰",
    layout="wide",
)


# ─── Session state ──────────────────────────────────────────────────

if "ledger" not in st.session_state:
    config = LedgerConfig.from_file()
    st.session_state.ledger = PlayerLedger(config)
    st.session_state.notifications = []
    configure_logger(config).session_start()

ledger: PlayerLedger = st.session_state.ledger
config = ledger.config


def notify(notification):
    st.session_state.notifications.append(notification)


def handle_add_player():
    try:
        notify(ledger.add_player(st.session_state.new_player_name))
        st.session_state.new_player_name = ""
    except ValidationError as e:
        notify(e.to_notification())


def handle_add_earning():
    try:
        notify(ledger.add_earning(st.session_state.new_earning))
        st.session_state.new_earning = ""
    except ValidationError as e:
        notify(e.to_notification())


def handle_select_player(name: str):
    try:
        ledger.select_player(name)
    except ValidationError as e:
        notify(e.to_notification())


# Toasts queued by callbacks during this run
for notification in st.session_state.notifications:
    st.toast(f"**{notification.title}**  \n{notification.description}", icon=TOAST_ICONS[notification.severity])
st.session_state.notifications = []


# ─── Header ─────────────────────────────────────────────────────────

st.title("💰 BetTrack Buddy")
st.markdown("*Betting performance tracking with cumulative earnings charts*")


# ─── Stats ──────────────────────────────────────────────────────────

stats = ledger.aggregate_stats()

col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Total Players", stats.total_players)
with col2:
    st.metric("Total Earnings", format_currency(stats.total_winnings, config.currency_symbol))
    st.button("📈 Show all players", on_click=ledger.show_all_players, use_container_width=True)
with col3:
    st.metric("Profitable Players", stats.profitable_players)
with col4:
    st.metric("Win Rate", f"{stats.win_rate}%")

st.markdown("---")


# ─── Main grid ──────────────────────────────────────────────────────

left, right = st.columns([1, 2])

with left:
    st.subheader("👥 Player Management")

    with st.form("add_player_form"):
        st.text_input("Player Name", key="new_player_name", placeholder="Enter player name")
        st.form_submit_button("➕ Add Player", on_click=handle_add_player)

    if not ledger.players:
        st.info("No players yet. Add your first player above!")
    else:
        selected = ledger.selected_player
        for idx, player in enumerate(ledger.players):
            arrow = "📈" if player.total_earnings >= 0 else "📉"
            label = f"{arrow} {player.name} · {format_currency(player.total_earnings, config.currency_symbol)}"
            st.button(
                label,
                key=f"player_{idx}",
                type="primary" if selected and selected.name == player.name else "secondary",
                on_click=handle_select_player,
                args=(player.name,),
                use_container_width=True,
            )

with right:
    st.subheader(f"📊 {ledger.title()}")

    if ledger.view_mode == ViewMode.ALL_PLAYERS:
        if ledger.has_players_with_earnings():
            frame = comparison_frame(ledger.all_players_series(), [p.name for p in ledger.players])
            fig = plot_comparison(frame, config)
            st.pyplot(fig)
            plt.close(fig)
        else:
            st.info(empty_state_message(ledger.view))

    elif ledger.selected_player is not None:
        player = ledger.selected_player

        with st.form("add_earning_form"):
            st.text_input(
                "Amount",
                key="new_earning",
                placeholder="Enter earning amount (negative for losses)",
            )
            st.form_submit_button("Add Earning", on_click=handle_add_earning)

        if player.earnings:
            fig = plot_single_player(single_player_frame(ledger.single_player_series()), config)
            st.pyplot(fig)
            plt.close(fig)

            st.markdown("**Recent Earnings**")
            history = pd.DataFrame([
                {
                    "Ticket": e.match,
                    "Date": e.date,
                    "Amount": format_signed(e.amount, config.currency_symbol, plus_on_zero=True),
                    "Total": f"{config.currency_symbol}{format_number(e.total)}",
                }
                for e in player.recent_earnings()
            ])
            st.dataframe(history, hide_index=True, use_container_width=True)
        else:
            st.info(empty_state_message(ledger.view))

    else:
        st.info(empty_state_message(ledger.view))

# Footer
st.markdown("---")
st.caption("Built with Streamlit • Data lives only in this browser session")
