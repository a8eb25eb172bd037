"""
Tower of Hanoi - Game Engine Base Classes

This module defines the foundational enums, result types and exceptions used
throughout the game engine. Result classes are immutable (frozen dataclasses)
so they can be handed to the UI layer without defensive copies.
"""

from dataclasses import dataclass
from enum import Enum, auto


class PegId(Enum):
    """The three pegs, by position."""
    A = 0  # Source
    B = 1  # Auxiliary
    C = 2  # Target

    @property
    def label(self) -> str:
        return self.name

    @classmethod
    def source(cls) -> "PegId":
        return cls.A

    @classmethod
    def target(cls) -> "PegId":
        return cls.C

    def other(self, peg: "PegId") -> "PegId":
        """Return the third peg, given this one and another distinct peg."""
        if peg is self:
            raise ValueError(f"Peg {peg.label} has no single 'other' peg against itself.")
        return PegId(3 - self.value - peg.value)


class GameStatus(Enum):
    """High-level game states. WON is terminal."""
    IN_PROGRESS = "in_progress"
    WON = "won"


class MoveError(Enum):
    """Reasons a move attempt can be rejected."""
    INVALID_PEG = auto()
    SAME_SOURCE_AND_DESTINATION = auto()
    EMPTY_SOURCE = auto()
    ILLEGAL_SIZE_ORDER = auto()
    GAME_OVER = auto()


class Difficulty(Enum):
    """Difficulty presets offered by the menu (value = disk count)."""
    EASY = 3
    MEDIUM = 4
    HARD = 5
    EXTREME = 6
    CUSTOM = 0

    @property
    def title(self) -> str:
        return self.name.capitalize()


# =============================================================================
# EXCEPTIONS
# =============================================================================

class HanoiError(Exception):
    """Base class for all engine errors."""


class InvalidConfigurationError(HanoiError, ValueError):
    """Disk count outside the supported range."""

    def __init__(self, disk_count: int, minimum: int, maximum: int | None = None) -> None:
        self.disk_count = disk_count
        self.minimum = minimum
        self.maximum = maximum
        if maximum is None:
            message = f"Disk count must be at least {minimum}, got {disk_count}."
        else:
            message = f"Disk count must be between {minimum} and {maximum}, got {disk_count}."
        super().__init__(message)


class InvalidMoveCommandError(HanoiError, ValueError):
    """A textual move command could not be parsed."""


class PegError(HanoiError):
    """Misuse of a single peg (push onto full, pop from empty)."""


class CapacityError(PegError):
    """Push onto a peg that is already at capacity."""


class EmptyPegError(PegError):
    """Pop from a peg with no disks."""


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a single move attempt.

    Attributes:
        error: Why the move failed, or None when it succeeded
        source: Source peg (None when it could not be resolved)
        destination: Destination peg (None when it could not be resolved)
        disk: Disk that was (or would have been) moved
        blocking_disk: Smaller disk on the destination that blocked the move
        move_count: Move counter after the attempt
    """
    error: MoveError | None
    source: PegId | None = None
    destination: PegId | None = None
    disk: int | None = None
    blocking_disk: int | None = None
    move_count: int = 0

    @property
    def ok(self) -> bool:
        """Returns True if the move was applied."""
        return self.error is None

    def __str__(self) -> str:
        src = self.source.label if self.source else "?"
        dst = self.destination.label if self.destination else "?"
        if self.error is None:
            return f"[OK] Moved disk {self.disk} from {src} to {dst}"
        if self.error is MoveError.INVALID_PEG:
            return "[ERROR] Invalid peg! Use A, B or C."
        if self.error is MoveError.SAME_SOURCE_AND_DESTINATION:
            return "[ERROR] Source and destination must be different!"
        if self.error is MoveError.EMPTY_SOURCE:
            return f"[ERROR] Peg {src} is empty!"
        if self.error is MoveError.ILLEGAL_SIZE_ORDER:
            return (
                "[ERROR] Illegal move! Larger disk on top of a smaller one. "
                f"You tried to move disk {self.disk} onto disk {self.blocking_disk}."
            )
        return "[ERROR] The game is already won."


@dataclass(frozen=True)
class ScoreReport:
    """
    How a finished (or running) game compares with the optimum.

    Attributes:
        disk_count: Number of disks in play
        moves: Moves made so far
        minimum_moves: Theoretical optimum, 2^n - 1
    """
    disk_count: int
    moves: int
    minimum_moves: int

    @property
    def extra_moves(self) -> int:
        """Moves beyond the optimum (never negative)."""
        return max(0, self.moves - self.minimum_moves)

    @property
    def is_perfect(self) -> bool:
        return self.moves == self.minimum_moves

    def __str__(self) -> str:
        lines = [
            f"You finished in {self.moves} moves!",
            f"The minimum possible was {self.minimum_moves} moves.",
        ]
        if self.is_perfect:
            lines.append("PERFECT! You matched the minimum!")
        else:
            lines.append(f"Difference: {self.extra_moves} extra moves")
        return "\n".join(lines)


def minimum_moves(disk_count: int) -> int:
    """
    Optimal number of moves to solve an n-disk puzzle.

    Args:
        disk_count: Number of disks (0 or more)

    Returns:
        2^n - 1

    Raises:
        InvalidConfigurationError: If disk_count is negative
    """
    if disk_count < 0:
        raise InvalidConfigurationError(disk_count, 0)
    return (1 << disk_count) - 1
