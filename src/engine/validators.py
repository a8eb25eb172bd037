"""
Tower of Hanoi - Input Validation Utilities

Provides validation functions for game engine inputs. Validators either
return normalized data or raise descriptive ValueError subclasses.
"""

from src.engine.base import (
    Difficulty,
    InvalidConfigurationError,
    InvalidMoveCommandError,
    PegId,
)

MIN_DISKS = 1
MAX_DISKS = 10
DEFAULT_DISKS = 3


def validate_disk_count(
    count: int,
    minimum: int = MIN_DISKS,
    maximum: int = MAX_DISKS,
) -> int:
    """
    Validate the number of disks for a new game.

    Args:
        count: Requested disk count
        minimum: Smallest allowed count
        maximum: Largest allowed count

    Returns:
        Validated count

    Raises:
        InvalidConfigurationError: If count is not an integer in range
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidConfigurationError(count, minimum, maximum)

    if not (minimum <= count <= maximum):
        raise InvalidConfigurationError(count, minimum, maximum)

    return count


def resolve_peg(value: PegId | str | int) -> PegId | None:
    """
    Resolve a peg identifier to a PegId.

    Accepts a PegId, a label ("A"/"B"/"C", case-insensitive) or a position
    (0-2). Returns None when the value names no peg.
    """
    if isinstance(value, PegId):
        return value

    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        try:
            return PegId(value)
        except ValueError:
            return None

    if isinstance(value, str):
        label = value.strip().upper()
        if label in PegId.__members__:
            return PegId[label]

    return None


def parse_move_command(command: str) -> tuple[PegId, PegId]:
    """
    Parse a textual move such as "A C".

    The first two peg letters (A, B or C) in the command are taken as source
    and destination; anything else is ignored, so "A C", "ac", "A->C", "AxC"
    and "move A to C" are all equivalent.

    Raises:
        InvalidMoveCommandError: If the command does not name two pegs
    """
    letters = [ch for ch in command.upper() if ch in PegId.__members__]
    if len(letters) < 2:
        raise InvalidMoveCommandError(
            f"Invalid format {command!r}! Use: A C (pegs A, B or C)"
        )

    return PegId[letters[0]], PegId[letters[1]]


def resolve_difficulty(
    difficulty: Difficulty,
    custom_count: int | None = None,
    minimum: int = MIN_DISKS,
    maximum: int = MAX_DISKS,
    default: int = DEFAULT_DISKS,
) -> int:
    """
    Turn a menu choice into a disk count.

    Presets map to their disk count. A preset or custom count outside the
    allowed range falls back to the default instead of raising, as the menu
    always starts some game.

    Args:
        difficulty: Chosen preset
        custom_count: Disk count for Difficulty.CUSTOM
        minimum: Smallest allowed count
        maximum: Largest allowed count
        default: Count used when the chosen count is unusable

    Returns:
        Disk count to start the game with
    """
    count = custom_count if difficulty is Difficulty.CUSTOM else difficulty.value

    try:
        return validate_disk_count(count, minimum, maximum)
    except InvalidConfigurationError:
        return default
