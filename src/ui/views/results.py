"""Results page — victory screen and score against the optimum."""

from __future__ import annotations

import streamlit as st

from src.ui.components.tower_board import render_tower_board
from src.ui.session import GameSession


def render_results_page() -> None:
    """Render the results / victory page."""
    ss = st.session_state
    session = GameSession(ss)
    game = session.game

    if game is None:
        session.page = "home"
        st.rerun()
        return

    report = game.score_report()

    st.title("Congratulations! You won!")
    if not ss.get("_victory_shown"):
        st.balloons()
        ss["_victory_shown"] = True

    render_tower_board(game)

    col1, col2 = st.columns(2)
    col1.metric("Your moves", report.moves)
    col2.metric("Minimum moves", report.minimum_moves)

    if report.is_perfect:
        st.success("PERFECT! You matched the minimum number of moves!")
    else:
        st.info(f"Difference: {report.extra_moves} extra moves")

    st.divider()

    col1, col2 = st.columns(2)

    with col1:
        if st.button("Play Again", type="primary", use_container_width=True):
            ss.pop("_victory_shown", None)
            session.restart()
            st.rerun()

    with col2:
        if st.button("Return Home", use_container_width=True):
            ss.pop("_victory_shown", None)
            session.return_home()
            st.rerun()
