"""
Tower of Hanoi - Solver

Optimal move sequences and next-move hints.
"""

from typing import Iterator, Mapping, Sequence

from src.engine.base import PegId


def solve(
    disk_count: int,
    source: PegId = PegId.A,
    auxiliary: PegId = PegId.B,
    target: PegId = PegId.C,
) -> Iterator[tuple[PegId, PegId]]:
    """
    Yield the 2^n - 1 moves that carry a tower from source to target.

    Moves are generated lazily, so memory stays O(n) for large towers.
    """
    if disk_count <= 0:
        return
    yield from solve(disk_count - 1, source, target, auxiliary)
    yield (source, target)
    yield from solve(disk_count - 1, auxiliary, source, target)


def _locate_disks(pegs: Mapping[PegId, Sequence[int]]) -> dict[int, PegId]:
    return {disk: peg for peg, disks in pegs.items() for disk in disks}


def next_move(
    pegs: Mapping[PegId, Sequence[int]],
    target: PegId = PegId.C,
) -> tuple[PegId, PegId] | None:
    """
    Best next move from any legal position.

    Args:
        pegs: Contents of each peg, bottom to top (as from HanoiGame.snapshot)
        target: Peg the whole tower should end on

    Returns:
        (source, destination) of the first move on a shortest path to the
        solved position, or None if the puzzle is already solved
    """
    location = _locate_disks(pegs)
    goal = target
    move = None

    # Walk from the largest disk down. The largest disk not yet on its goal
    # decides the move; every smaller disk must first clear out of its way.
    for disk in sorted(location, reverse=True):
        current = location[disk]
        if current is goal:
            continue
        move = (current, goal)
        goal = current.other(goal)

    return move
