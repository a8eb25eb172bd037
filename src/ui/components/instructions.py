"""Instructions text — objective, rules and how to enter moves."""

from __future__ import annotations

from src.engine import minimum_moves


def build_instructions(disk_count: int) -> str:
    """Markdown instructions for a game with ``disk_count`` disks."""
    return f"""\
**Goal:** Move all {disk_count} disk(s) from peg **A** to peg **C**.

**Rules:**
1. Only one disk can be moved at a time
2. Never place a larger disk on top of a smaller one
3. Use peg **B** as an intermediate whenever needed

**How to play:**
- Pick a source and destination peg and press **Move**
- Or type a command: `<SOURCE> <DESTINATION>`, e.g. `A C`
- Press **Hint** to see the best next move

**Minimum number of moves:** {minimum_moves(disk_count)}
"""
