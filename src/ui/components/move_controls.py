"""Move controls — peg pickers, typed command, hint and restart buttons."""

from __future__ import annotations

import streamlit as st

from src.engine import PegId

_PEG_LABELS = [peg.label for peg in PegId]


def render_move_controls(move_key: int) -> tuple[str, object] | None:
    """Render the move input widgets.

    Args:
        move_key: Current move count, used to reset widgets after each move.

    Returns:
        One of ``("move", (source, destination))``, ``("command", text)``,
        ``("hint", None)``, ``("restart", None)``, ``("quit", None)``,
        or ``None`` if no action was taken.
    """
    cols = st.columns([1, 1, 1])
    with cols[0]:
        source = st.selectbox("From", _PEG_LABELS, index=0, key=f"src_{move_key}")
    with cols[1]:
        destination = st.selectbox("To", _PEG_LABELS, index=2, key=f"dst_{move_key}")
    with cols[2]:
        st.write("")
        if st.button("Move", key=f"btn_move_{move_key}", type="primary", use_container_width=True):
            return "move", (source, destination)

    with st.form(key=f"command_form_{move_key}", clear_on_submit=True):
        command = st.text_input("Or type a move (e.g. A C)", key=f"cmd_{move_key}")
        if st.form_submit_button("Submit") and command.strip():
            return "command", command

    cols = st.columns(3)
    with cols[0]:
        if st.button("Hint", key="btn_hint", use_container_width=True):
            return "hint", None
    with cols[1]:
        if st.button("Restart", key="btn_restart", use_container_width=True):
            return "restart", None
    with cols[2]:
        if st.button("Quit", key="btn_quit", use_container_width=True):
            return "quit", None

    return None
