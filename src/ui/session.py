"""
Tower of Hanoi - Session Manager

Keeps one HanoiGame per Streamlit session and funnels every UI action
through the engine's public interface. This is the only UI module that
mutates game state.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

from src.config import Settings, get_settings
from src.engine import (
    Difficulty,
    HanoiGame,
    InvalidMoveCommandError,
    MoveResult,
    PegId,
)
from src.engine.solver import next_move
from src.engine.validators import parse_move_command, resolve_difficulty

logger = logging.getLogger(__name__)

GAME_KEY = "game"
MESSAGE_KEY = "last_message"
PAGE_KEY = "page"


class GameSession:
    """Wraps a session-state mapping (``st.session_state`` in the app).

    Taking the mapping as an argument keeps the class usable from tests
    with a plain dict.
    """

    def __init__(
        self,
        state: MutableMapping[str, Any],
        settings: Settings | None = None,
    ) -> None:
        self._state = state
        self._settings = settings or get_settings()

    @property
    def game(self) -> HanoiGame | None:
        return self._state.get(GAME_KEY)

    @property
    def page(self) -> str:
        return self._state.get(PAGE_KEY, "home")

    @page.setter
    def page(self, value: str) -> None:
        self._state[PAGE_KEY] = value

    @property
    def last_message(self) -> str | None:
        return self._state.get(MESSAGE_KEY)

    def disk_count_for(self, difficulty: Difficulty, custom_count: int | None = None) -> int:
        """Resolve a menu choice, falling back to the default disk count."""
        settings = self._settings
        count = resolve_difficulty(
            difficulty,
            custom_count,
            minimum=settings.min_disk_count,
            maximum=settings.max_disk_count,
            default=settings.default_disk_count,
        )
        requested = custom_count if difficulty is Difficulty.CUSTOM else difficulty.value
        if count != requested:
            logger.warning(
                "Disk count %r out of range %d-%d; using %d",
                requested, settings.min_disk_count, settings.max_disk_count, count,
            )
        return count

    def available_difficulties(self) -> list[Difficulty]:
        """Menu choices whose preset fits the configured disk range."""
        settings = self._settings
        return [
            d for d in Difficulty
            if d is Difficulty.CUSTOM
            or settings.min_disk_count <= d.value <= settings.max_disk_count
        ]

    def start_game(self, disk_count: int) -> HanoiGame:
        """Create (or reset) the session's game and switch to the game page.

        Raises:
            InvalidConfigurationError: If disk_count is outside the configured range
        """
        settings = self._settings
        game = self.game
        if game is None:
            game = HanoiGame(
                disk_count,
                min_disks=settings.min_disk_count,
                max_disks=settings.max_disk_count,
                peg_capacity=settings.peg_capacity,
            )
            self._state[GAME_KEY] = game
        else:
            game.initialize(disk_count)

        self._state.pop(MESSAGE_KEY, None)
        self.page = "game"
        logger.info(
            "Started game with %d disks (minimum %d moves)",
            disk_count, game.minimum_moves(disk_count),
        )
        return game

    def restart(self) -> HanoiGame | None:
        """Restart the current game with the same disk count."""
        if self.game is None:
            return None
        return self.start_game(self.game.disk_count)

    def move(self, source: PegId | str | int, destination: PegId | str | int) -> MoveResult | None:
        """Attempt a move and remember its feedback line."""
        game = self.game
        if game is None:
            logger.warning("Move requested with no active game")
            return None

        result = game.attempt_move(source, destination)
        self._state[MESSAGE_KEY] = str(result)

        if result.ok:
            logger.debug(
                "Moved disk %d from %s to %s (move %d)",
                result.disk, result.source.label, result.destination.label, result.move_count,
            )
            if game.is_won():
                report = game.score_report()
                logger.info(
                    "Game won in %d moves (minimum %d)", report.moves, report.minimum_moves
                )
                self.page = "results"
        else:
            logger.info("Rejected move %r -> %r: %s", source, destination, result.error.name)

        return result

    def move_from_command(self, command: str) -> MoveResult | None:
        """Parse a command such as ``"A C"`` and attempt it."""
        try:
            source, destination = parse_move_command(command)
        except InvalidMoveCommandError as exc:
            logger.info("Unparseable move command %r", command)
            self._state[MESSAGE_KEY] = f"[ERROR] {exc}"
            return None
        return self.move(source, destination)

    def hint(self) -> tuple[PegId, PegId] | None:
        """Next move on a shortest path to the solution."""
        game = self.game
        if game is None:
            return None
        return next_move(game.snapshot(), PegId.target())

    def return_home(self) -> None:
        for key in (GAME_KEY, MESSAGE_KEY):
            self._state.pop(key, None)
        self.page = "home"
