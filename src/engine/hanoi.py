"""
Tower of Hanoi - Game Engine

Game Rules:
- Three pegs (A, B, C); all disks start on A, largest at the bottom
- Move one disk at a time, always the top disk of a peg
- A disk may never be placed on top of a smaller disk
- The game is won when every disk sits on C

The engine performs no I/O. Every move attempt returns a MoveResult, so
callers can report why a move was refused without catching exceptions.
"""

import threading
from typing import ClassVar

from src.engine.base import (
    GameStatus,
    MoveError,
    MoveResult,
    PegId,
    ScoreReport,
    minimum_moves,
)
from src.engine.peg import Peg
from src.engine.validators import MAX_DISKS, MIN_DISKS, resolve_peg, validate_disk_count


class HanoiGame:
    """
    Mutable state of a single Tower of Hanoi session.

    Owns the three pegs, the disk count and the move counter. Mutations
    (initialize, attempt_move) and queries share one re-entrant lock per
    instance, so a query never observes a half-applied move.
    """

    NUM_PEGS: ClassVar[int] = 3

    def __init__(
        self,
        disk_count: int,
        *,
        min_disks: int = MIN_DISKS,
        max_disks: int = MAX_DISKS,
        peg_capacity: int = Peg.DEFAULT_CAPACITY,
    ) -> None:
        if min_disks < 1:
            raise ValueError(f"min_disks must be at least 1, got {min_disks}.")
        if max_disks > peg_capacity:
            raise ValueError(
                f"max_disks ({max_disks}) cannot exceed peg capacity ({peg_capacity})."
            )
        self._min_disks = min_disks
        self._max_disks = max_disks
        self._pegs = tuple(Peg(peg_capacity) for _ in range(self.NUM_PEGS))
        self._disk_count = 0
        self._move_count = 0
        self._lock = threading.RLock()
        self.initialize(disk_count)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def initialize(self, disk_count: int) -> None:
        """
        Start a new game with all disks on peg A.

        Args:
            disk_count: Number of disks

        Raises:
            InvalidConfigurationError: If disk_count is outside the allowed range
        """
        validate_disk_count(disk_count, self._min_disks, self._max_disks)

        with self._lock:
            for peg in self._pegs:
                peg.clear()

            source = self._pegs[PegId.source().value]
            for disk in range(disk_count, 0, -1):
                source.push(disk)

            self._disk_count = disk_count
            self._move_count = 0

    def attempt_move(
        self,
        source: PegId | str | int,
        destination: PegId | str | int,
    ) -> MoveResult:
        """
        Move the top disk of source onto destination if the rules allow it.

        Checks run in order and stop at the first failure: peg identifiers,
        distinct pegs, non-empty source, size order. Nothing is mutated
        unless every check passes.

        Args:
            source: Peg to take the disk from
            destination: Peg to place the disk on

        Returns:
            MoveResult describing the outcome
        """
        with self._lock:
            src = resolve_peg(source)
            dst = resolve_peg(destination)

            if src is None or dst is None:
                return self._rejected(MoveError.INVALID_PEG, src, dst)

            if src is dst:
                return self._rejected(MoveError.SAME_SOURCE_AND_DESTINATION, src, dst)

            if self._is_won():
                return self._rejected(MoveError.GAME_OVER, src, dst)

            src_peg = self._pegs[src.value]
            dst_peg = self._pegs[dst.value]

            disk = src_peg.peek()
            if disk is None:
                return self._rejected(MoveError.EMPTY_SOURCE, src, dst)

            top = dst_peg.peek()
            if top is not None and top < disk:
                return self._rejected(
                    MoveError.ILLEGAL_SIZE_ORDER, src, dst, disk=disk, blocking_disk=top
                )

            dst_peg.push(src_peg.pop())
            self._move_count += 1

            return MoveResult(
                error=None,
                source=src,
                destination=dst,
                disk=disk,
                move_count=self._move_count,
            )

    def _rejected(
        self,
        error: MoveError,
        source: PegId | None,
        destination: PegId | None,
        disk: int | None = None,
        blocking_disk: int | None = None,
    ) -> MoveResult:
        return MoveResult(
            error=error,
            source=source,
            destination=destination,
            disk=disk,
            blocking_disk=blocking_disk,
            move_count=self._move_count,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_won(self) -> bool:
        """True iff every disk is on peg C."""
        with self._lock:
            return self._is_won()

    def _is_won(self) -> bool:
        target = self._pegs[PegId.target().value]
        return (
            target.size() == self._disk_count
            and all(
                self._pegs[peg.value].is_empty()
                for peg in PegId
                if peg is not PegId.target()
            )
        )

    @property
    def status(self) -> GameStatus:
        return GameStatus.WON if self.is_won() else GameStatus.IN_PROGRESS

    @property
    def disk_count(self) -> int:
        return self._disk_count

    @property
    def move_count(self) -> int:
        return self._move_count

    def peg_contents(self, peg_id: PegId | str | int) -> tuple[int, ...]:
        """
        Disks on a peg, bottom to top.

        Raises:
            ValueError: If peg_id names no peg
        """
        peg = resolve_peg(peg_id)
        if peg is None:
            raise ValueError(f"Unknown peg {peg_id!r}. Use A, B or C.")
        with self._lock:
            return self._pegs[peg.value].contents()

    def snapshot(self) -> dict[PegId, tuple[int, ...]]:
        """Contents of all three pegs, taken under one lock."""
        with self._lock:
            return {peg: self._pegs[peg.value].contents() for peg in PegId}

    @staticmethod
    def minimum_moves(disk_count: int) -> int:
        """Optimal move count for disk_count disks (2^n - 1)."""
        return minimum_moves(disk_count)

    def score_report(self) -> ScoreReport:
        with self._lock:
            return ScoreReport(
                disk_count=self._disk_count,
                moves=self._move_count,
                minimum_moves=minimum_moves(self._disk_count),
            )

    def __repr__(self) -> str:
        pegs = ", ".join(f"{p.label}={list(c)}" for p, c in self.snapshot().items())
        return f"HanoiGame(disks={self._disk_count}, moves={self._move_count}, {pegs})"
