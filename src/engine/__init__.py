"""
Tower of Hanoi Game Engine.

Pure Python game logic with zero UI dependencies.
Handles peg stacks, move legality, win detection and move scoring.
"""

from src.engine.base import (
    CapacityError,
    Difficulty,
    EmptyPegError,
    GameStatus,
    HanoiError,
    InvalidConfigurationError,
    InvalidMoveCommandError,
    MoveError,
    MoveResult,
    PegError,
    PegId,
    ScoreReport,
    minimum_moves,
)
from src.engine.hanoi import HanoiGame
from src.engine.peg import Peg
from src.engine.solver import next_move, solve

__all__ = [
    # Data Classes
    "MoveResult",
    "ScoreReport",
    # Enums
    "Difficulty",
    "GameStatus",
    "MoveError",
    "PegId",
    # Errors
    "HanoiError",
    "InvalidConfigurationError",
    "InvalidMoveCommandError",
    "PegError",
    "CapacityError",
    "EmptyPegError",
    # Engine
    "Peg",
    "HanoiGame",
    "minimum_moves",
    "solve",
    "next_move",
]
