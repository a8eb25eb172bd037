"""
Tower board component.

Draws the three pegs as ASCII art with a status panel underneath.
"""

from __future__ import annotations

from typing import Mapping, Sequence

import streamlit as st

from src.engine import HanoiGame, PegId

MIN_COLUMN_WIDTH = 9


def _column_width(disk_count: int) -> int:
    return max(MIN_COLUMN_WIDTH, 2 * disk_count - 1)


def _draw_slot(disk: int | None, width: int) -> str:
    if disk is None:
        return "|".center(width)
    return ("#" * (2 * disk - 1)).center(width)


def render_towers_text(
    pegs: Mapping[PegId, Sequence[int]],
    disk_count: int,
) -> str:
    """
    Build the ASCII drawing of the pegs.

    Disks are drawn top to bottom; a disk of size d is 2d - 1 '#' wide,
    centered in its column. Empty slots show the bare peg.

    Args:
        pegs: Contents of each peg, bottom to top
        disk_count: Disks in play (sets the column width)

    Returns:
        Multi-line drawing with the base and A/B/C labels
    """
    width = _column_width(disk_count)
    height = max((len(disks) for disks in pegs.values()), default=0)
    gap = "  "

    lines = []
    for row in range(height - 1, -1, -1):
        cells = []
        for peg in PegId:
            disks = pegs.get(peg, ())
            disk = disks[row] if row < len(disks) else None
            cells.append(_draw_slot(disk, width))
        lines.append(gap + gap.join(cells))

    lines.append(gap + gap.join("-" * width for _ in PegId))
    lines.append(gap + gap.join(peg.label.center(width) for peg in PegId))
    return "\n".join(line.rstrip() for line in lines)


def render_status_text(game: HanoiGame) -> str:
    """One-line summary: disks, moves and per-peg counts."""
    counts = " | ".join(
        f"Peg {peg.label}: {len(disks)} disk(s)" for peg, disks in game.snapshot().items()
    )
    return f"Disks: {game.disk_count} | Moves: {game.move_count} | {counts}"


def render_tower_board(game: HanoiGame) -> None:
    """Render the pegs and the status line."""
    st.code(render_towers_text(game.snapshot(), game.disk_count), language=None)
    st.caption(render_status_text(game))
