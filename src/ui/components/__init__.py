"""UI components for Tower of Hanoi."""

from src.ui.components.instructions import build_instructions
from src.ui.components.move_controls import render_move_controls
from src.ui.components.tower_board import (
    render_status_text,
    render_tower_board,
    render_towers_text,
)

__all__ = [
    "build_instructions",
    "render_move_controls",
    "render_status_text",
    "render_tower_board",
    "render_towers_text",
]
