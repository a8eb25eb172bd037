"""
Tower of Hanoi - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from collections import Counter

import pytest

from src.config.settings import Settings
from src.engine.base import PegId
from src.engine.hanoi import HanoiGame


# =============================================================================
# MOVE SEQUENCES
# =============================================================================

@pytest.fixture
def three_disk_solution() -> list[tuple[str, str]]:
    """The optimal 7-move solution for three disks, A to C."""
    return [
        ("A", "C"),
        ("A", "B"),
        ("C", "B"),
        ("A", "C"),
        ("B", "A"),
        ("B", "C"),
        ("A", "C"),
    ]


@pytest.fixture
def mixed_moves() -> list[tuple[str, str]]:
    """A run of legal and illegal moves for invariant checks."""
    return [
        ("A", "B"),
        ("A", "B"),  # 2 onto 1: illegal
        ("A", "C"),
        ("C", "C"),  # same peg
        ("B", "C"),
        ("B", "A"),  # empty source
        ("X", "A"),  # invalid peg
        ("A", "B"),
        ("C", "A"),  # onto empty peg
        ("C", "B"),
        ("A", "B"),
        ("A", "C"),  # empty source
    ]


# =============================================================================
# GAME FIXTURES
# =============================================================================

@pytest.fixture
def game() -> HanoiGame:
    """Fresh three-disk game."""
    return HanoiGame(3)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        default_disk_count=3,
        min_disk_count=1,
        max_disk_count=10,
        peg_capacity=100,
    )


# =============================================================================
# INVARIANT HELPERS
# =============================================================================

def _assert_partition(game: HanoiGame) -> None:
    """Every disk 1..n sits on exactly one peg, exactly once."""
    all_disks = Counter(
        disk for peg in PegId for disk in game.peg_contents(peg)
    )
    assert all_disks == Counter(range(1, game.disk_count + 1))


def _assert_strictly_decreasing(game: HanoiGame) -> None:
    """Bottom to top, every peg holds strictly smaller disks."""
    for peg in PegId:
        disks = game.peg_contents(peg)
        assert all(lower > upper for lower, upper in zip(disks, disks[1:])), (
            f"Peg {peg.label} out of order: {disks}"
        )


@pytest.fixture
def check_invariants():
    """Callable asserting the partition and ordering invariants on a game."""
    def _check(game: HanoiGame) -> None:
        _assert_partition(game)
        _assert_strictly_decreasing(game)
    return _check
