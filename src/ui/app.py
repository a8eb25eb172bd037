"""Tower of Hanoi — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from src.config import configure_logging
from src.ui.components.instructions import build_instructions
from src.ui.session import GameSession


def _render_sidebar_rules(disk_count: int) -> None:
    """Show the instructions for the running game in the sidebar."""
    with st.sidebar:
        st.markdown("### Instructions")
        st.markdown(build_instructions(disk_count))


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Tower of Hanoi",
        page_icon="🗼",
        layout="centered",
        initial_sidebar_state="collapsed",
    )
    configure_logging()

    session = GameSession(st.session_state)

    # Page routing (lazy imports to avoid circular deps)
    page = session.page

    if page == "home":
        from src.ui.views.home import render_home_page
        render_home_page()
    elif page == "game":
        from src.ui.views.game import render_game_page
        render_game_page()
    elif page == "results":
        from src.ui.views.results import render_results_page
        render_results_page()
    else:
        session.page = "home"
        st.rerun()

    game = session.game
    if page == "game" and game is not None:
        _render_sidebar_rules(game.disk_count)


if __name__ == "__main__":
    main()
