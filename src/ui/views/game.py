"""Game page — the tower board, move controls and feedback."""

from __future__ import annotations

import streamlit as st

from src.ui.components.move_controls import render_move_controls
from src.ui.components.tower_board import render_tower_board
from src.ui.session import GameSession


def _show_feedback(message: str | None) -> None:
    if not message:
        return
    if message.startswith("[OK]"):
        st.success(message)
    else:
        st.error(message)


def render_game_page() -> None:
    """Render the main game page."""
    session = GameSession(st.session_state)
    game = session.game

    if game is None:
        session.page = "home"
        st.rerun()
        return

    if game.is_won():
        session.page = "results"
        st.rerun()
        return

    st.title("Tower of Hanoi")
    render_tower_board(game)
    _show_feedback(session.last_message)

    action = render_move_controls(game.move_count)
    if action is None:
        return

    kind, payload = action
    if kind == "move":
        source, destination = payload
        session.move(source, destination)
        st.rerun()
    elif kind == "command":
        session.move_from_command(payload)
        st.rerun()
    elif kind == "hint":
        hint = session.hint()
        if hint is not None:
            source, destination = hint
            st.info(f"Hint: move the top disk from {source.label} to {destination.label}.")
    elif kind == "restart":
        session.restart()
        st.rerun()
    elif kind == "quit":
        session.return_home()
        st.rerun()
