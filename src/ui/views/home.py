"""Home page — title, difficulty menu and rules."""

from __future__ import annotations

import streamlit as st

from src.config import get_settings
from src.engine import Difficulty, minimum_moves
from src.ui.components.instructions import build_instructions
from src.ui.session import GameSession


def _difficulty_label(difficulty: Difficulty) -> str:
    if difficulty is Difficulty.CUSTOM:
        settings = get_settings()
        return f"Custom ({settings.min_disk_count}-{settings.max_disk_count} disks)"
    return (
        f"{difficulty.title} ({difficulty.value} disks) - "
        f"{minimum_moves(difficulty.value)} minimum moves"
    )


def render_home_page() -> None:
    """Render the home / difficulty selection page."""
    session = GameSession(st.session_state)
    settings = get_settings()

    st.title("Tower of Hanoi")
    st.caption("Move the tower, one disk at a time")

    st.subheader("Choose the number of disks")
    difficulty = st.radio(
        "Difficulty",
        session.available_difficulties(),
        format_func=_difficulty_label,
        label_visibility="collapsed",
    )

    custom_count = None
    if difficulty is Difficulty.CUSTOM:
        custom_count = int(
            st.number_input(
                "How many disks?",
                min_value=0,
                max_value=settings.peg_capacity,
                value=settings.default_disk_count,
                step=1,
            )
        )

    disk_count = session.disk_count_for(difficulty, custom_count)
    if difficulty is Difficulty.CUSTOM and disk_count != custom_count:
        st.warning(f"Invalid disk count! Using {disk_count} disks.")

    if st.button("Start Game", type="primary", use_container_width=True):
        session.start_game(disk_count)
        st.rerun()

    st.divider()

    with st.expander("How to play", expanded=True):
        st.markdown(build_instructions(disk_count))
