"""
Tests for the ASCII tower board and the instructions text.
"""

from src.engine.base import PegId
from src.engine.hanoi import HanoiGame
from src.ui.components.instructions import build_instructions
from src.ui.components.tower_board import render_status_text, render_towers_text


class TestRenderTowersText:
    """Tests for render_towers_text()."""

    def test_initial_three_disks(self, game):
        text = render_towers_text(game.snapshot(), game.disk_count)
        lines = text.splitlines()

        assert lines == [
            "      #          |          |",
            "     ###         |          |",
            "    #####        |          |",
            "  ---------  ---------  ---------",
            "      A          B          C",
        ]

    def test_disk_width(self):
        pegs = {PegId.A: (), PegId.B: (3,), PegId.C: ()}
        text = render_towers_text(pegs, 3)
        assert "#####" in text
        assert "######" not in text

    def test_wide_tower_grows_columns(self):
        game = HanoiGame(10)
        lines = render_towers_text(game.snapshot(), 10).splitlines()
        assert "#" * 19 in lines[-3]
        assert lines[-2].count("-") == 3 * 19

    def test_height_follows_tallest_peg(self):
        pegs = {PegId.A: (3,), PegId.B: (2, 1), PegId.C: ()}
        lines = render_towers_text(pegs, 3).splitlines()
        # two disk rows, base and labels
        assert len(lines) == 4

    def test_empty_board(self):
        pegs = {PegId.A: (), PegId.B: (), PegId.C: ()}
        lines = render_towers_text(pegs, 3).splitlines()
        assert len(lines) == 2

    def test_missing_peg_drawn_empty(self):
        lines = render_towers_text({PegId.A: (1,)}, 1).splitlines()
        assert lines[0] == "      #          |          |"


class TestRenderStatusText:
    """Tests for render_status_text()."""

    def test_status(self, game):
        game.attempt_move("A", "C")
        assert render_status_text(game) == (
            "Disks: 3 | Moves: 1 | Peg A: 2 disk(s) | Peg B: 0 disk(s) | Peg C: 1 disk(s)"
        )


class TestBuildInstructions:
    """Tests for build_instructions()."""

    def test_mentions_disks_and_minimum(self):
        text = build_instructions(4)
        assert "Move all 4 disk(s)" in text
        assert "**Minimum number of moves:** 15" in text

    def test_mentions_command_format(self):
        assert "`A C`" in build_instructions(3)
