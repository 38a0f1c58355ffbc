"""
Tests for the board helpers: line merging, sliding in every direction, spawning and terminal predicates.
"""

from unittest import TestCase, main

import numpy as np
from numpy.random import default_rng

from game2048.core.gameboard import (
    TILE_SPAWN_PROBS,
    after_state,
    empty_cells,
    fill_cells,
    has_won,
    is_done,
    latent_state,
    merge_line,
    next_state,
    slide_and_merge,
    validate_board,
)
from game2048.core.types import Direction

LOST_BOARD = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])


class TestMergeLine(TestCase):
    """Merging of a single line."""

    def test_two_pairs(self):
        """[2, 2, 4, 4] merges into [4, 8] for 12 points."""
        score, result = merge_line(np.array([2, 2, 4, 4]))
        self.assertEqual(score, 12)
        np.testing.assert_array_equal(result, np.array([4, 8]))

    def test_no_double_merge(self):
        """A merged tile doesn't merge again in the same pass."""
        score, result = merge_line(np.array([2, 2, 2, 0]))
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result, np.array([4, 2]))

    def test_four_equal_tiles(self):
        """[2, 2, 2, 2] gives two 4s, never an 8."""
        score, result = merge_line(np.array([2, 2, 2, 2]))
        self.assertEqual(score, 8)
        np.testing.assert_array_equal(result, np.array([4, 4]))

    def test_gaps_are_compacted_before_merging(self):
        """Tiles separated by empty cells are adjacent once compacted."""
        score, result = merge_line(np.array([2, 0, 0, 2]))
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result, np.array([4]))

    def test_unmergeable_line(self):
        """Distinct neighbours only slide."""
        score, result = merge_line(np.array([0, 4, 2, 4]))
        self.assertEqual(score, 0)
        np.testing.assert_array_equal(result, np.array([4, 2, 4]))

    def test_empty_line(self):
        """An empty line stays empty."""
        score, result = merge_line(np.zeros(4, dtype=np.int64))
        self.assertEqual(score, 0)
        self.assertEqual(len(result), 0)


class TestSlideAndMerge(TestCase):
    """Leftward pass and its rotations."""

    def test_slide_and_merge(self):
        """Every row is merged and padded on the right."""
        board = np.array([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])
        score, result = slide_and_merge(board)
        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])
        self.assertEqual(score, 28)
        np.testing.assert_array_equal(result, expected)

    def test_latent_state_right(self):
        """[0, 2, 0, 2] moved right gives [0, 0, 0, 4]."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[0] = [0, 2, 0, 2]
        result, score = latent_state(board, Direction.RIGHT)
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result[0], [0, 0, 0, 4])
        self.assertEqual(np.count_nonzero(result[1:]), 0)

    def test_latent_state_up(self):
        """Columns merge toward the top row."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[:, 1] = [0, 2, 2, 2]
        result, score = latent_state(board, Direction.UP)
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result[:, 1], [4, 2, 0, 0])

    def test_latent_state_down(self):
        """Columns merge toward the bottom row, starting from the bottom."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[:, 2] = [2, 2, 2, 0]
        result, score = latent_state(board, Direction.DOWN)
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result[:, 2], [0, 0, 2, 4])

    def test_latent_state_does_not_modify_input(self):
        """The input board is left untouched."""
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        before = board.copy()
        latent_state(board, Direction.LEFT)
        np.testing.assert_array_equal(board, before)

    def test_latent_state_preserves_tile_sum(self):
        """Merging conserves the sum of the tiles."""
        board = np.array([[2, 2, 4, 8], [4, 4, 4, 0], [0, 8, 8, 16], [2, 0, 2, 2]])
        for direction in Direction:
            result, _ = latent_state(board, direction)
            self.assertEqual(result.sum(), board.sum())


class TestSpawn(TestCase):
    """Tile spawning."""

    def test_fill_cells_adds_requested_tiles(self):
        """Two tiles of value 2 or 4 are added on empty cells."""
        board = np.zeros((4, 4), dtype=np.int64)
        result, cells = fill_cells(board, number_tile=2, rng=default_rng(0))
        self.assertEqual(np.count_nonzero(result), 2)
        self.assertEqual(len(set(cells)), 2)
        for cell in cells:
            self.assertIn(result[cell], (2, 4))
        self.assertEqual(np.count_nonzero(board), 0)

    def test_fill_cells_only_uses_empty_cells(self):
        """Existing tiles are never overwritten."""
        board = LOST_BOARD.copy()
        board[1, 1] = 0
        result, cells = fill_cells(board, number_tile=1, rng=default_rng(3))
        self.assertEqual(cells, [(1, 1)])
        mask = np.ones_like(board, dtype=bool)
        mask[1, 1] = False
        np.testing.assert_array_equal(result[mask], board[mask])

    def test_fill_cells_caps_to_empty_cells(self):
        """Asking for more tiles than empty cells fills the board."""
        board = LOST_BOARD.copy()
        board[0, 0] = 0
        board[3, 3] = 0
        result, cells = fill_cells(board, number_tile=5, rng=default_rng(1))
        self.assertEqual(len(cells), 2)
        self.assertTrue(np.all(result != 0))

    def test_fill_cells_full_board(self):
        """A full board is returned unchanged."""
        result, cells = fill_cells(LOST_BOARD, number_tile=1, rng=default_rng(1))
        self.assertEqual(cells, [])
        np.testing.assert_array_equal(result, LOST_BOARD)

    def test_fill_cells_distribution(self):
        """Spawned values follow the configured probabilities."""
        rng = default_rng(2024)
        board = np.zeros((4, 4), dtype=np.int64)
        values = []
        for _ in range(5000):
            result, cells = fill_cells(board, number_tile=1, rng=rng)
            values.append(int(result[cells[0]]))
        ratio_two = values.count(2) / len(values)
        self.assertAlmostEqual(ratio_two, TILE_SPAWN_PROBS[2], delta=0.02)
        self.assertEqual(set(values), {2, 4})

    def test_fill_cells_custom_distribution(self):
        """A distribution with a single value always spawns it."""
        board = np.zeros((4, 4), dtype=np.int64)
        result, cells = fill_cells(board, number_tile=3, rng=default_rng(5), spawn_probs={4: 1.0})
        self.assertEqual([int(result[cell]) for cell in cells], [4, 4, 4])

    def test_fill_cells_reproducible(self):
        """The same seed places the same tiles."""
        board = np.zeros((4, 4), dtype=np.int64)
        first, _ = fill_cells(board, number_tile=2, rng=default_rng(42))
        second, _ = fill_cells(board, number_tile=2, rng=default_rng(42))
        np.testing.assert_array_equal(first, second)

    def test_after_state_probabilities(self):
        """Every outcome is listed and probabilities sum to one."""
        board = LOST_BOARD.copy()
        board[0, 0] = 0
        board[2, 3] = 0
        outcomes = after_state(board)
        self.assertEqual(len(outcomes), 4)
        self.assertAlmostEqual(sum(prob for _, prob in outcomes), 1.0)
        for outcome, _ in outcomes:
            self.assertEqual(np.count_nonzero(outcome), 15)
            self.assertEqual(np.count_nonzero(outcome != board), 1)
            self.assertIn(int(outcome[outcome != board][0]), (2, 4))

    def test_after_state_full_board(self):
        """A full board has a single certain outcome."""
        outcomes = after_state(LOST_BOARD)
        self.assertEqual(len(outcomes), 1)
        self.assertEqual(outcomes[0][1], 1.0)

    def test_empty_cells(self):
        """Empty cells are listed in row-major order."""
        board = LOST_BOARD.copy()
        board[2, 1] = 0
        board[0, 3] = 0
        self.assertEqual(empty_cells(board), [(0, 3), (2, 1)])


class TestNextState(TestCase):
    """Move followed by a spawn."""

    def test_legal_move_spawns_one_tile(self):
        """A move that changes the board adds exactly one tile."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[0] = [2, 2, 4, 4]
        result, score, spawned = next_state(board, Direction.LEFT, rng=default_rng(9))
        latent, _ = latent_state(board, Direction.LEFT)
        self.assertEqual(score, 12)
        self.assertEqual(np.count_nonzero(result), np.count_nonzero(latent) + 1)
        self.assertEqual(latent[spawned], 0)
        self.assertIn(result[spawned], (2, 4))

    def test_noop_move_spawns_nothing(self):
        """A move that changes nothing returns the same board."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[0] = [2, 4, 0, 0]
        result, score, spawned = next_state(board, Direction.LEFT, rng=default_rng(9))
        self.assertIs(result, board)
        self.assertEqual(score, 0)
        self.assertIsNone(spawned)


class TestPredicates(TestCase):
    """Terminal predicates and board validation."""

    def test_is_done(self):
        """A full board without equal neighbours is over."""
        self.assertTrue(is_done(LOST_BOARD))

    def test_not_done_with_vertical_pair(self):
        """An equal vertical pair keeps the game going."""
        board = LOST_BOARD.copy()
        board[1, 0] = 2
        self.assertFalse(is_done(board))

    def test_not_done_with_empty_cell(self):
        """An empty cell keeps the game going."""
        board = LOST_BOARD.copy()
        board[3, 3] = 0
        self.assertFalse(is_done(board))

    def test_has_won(self):
        """Reaching or passing the winning value wins."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[1, 2] = 2048
        self.assertTrue(has_won(board, 2048))
        self.assertTrue(has_won(board, 1024))
        self.assertFalse(has_won(board, 4096))

    def test_validate_board(self):
        """Only square grids of powers of two are boards."""
        validate_board(LOST_BOARD)
        with self.assertRaises(ValueError):
            validate_board(np.zeros((3, 4)))
        with self.assertRaises(ValueError):
            validate_board(np.array([[2, 3], [0, 0]]))
        with self.assertRaises(ValueError):
            validate_board(np.array([[1, 0], [0, 0]]))
        with self.assertRaises(ValueError):
            validate_board(np.array([[-2, 0], [0, 0]]))

    def test_validate_board_rejects_fractional_values(self):
        """Float boards are accepted only when every value is a whole number."""
        with self.assertRaises(ValueError):
            validate_board(np.full((4, 4), 2.5))
        with self.assertRaises(ValueError):
            validate_board(np.array([[np.nan, 0.0], [0.0, 2.0]]))
        with self.assertRaises(ValueError):
            validate_board(np.array([["2", "0"], ["0", "0"]]))
        board = validate_board(np.array([[2.0, 0.0], [0.0, 4.0]]))
        self.assertEqual(board.dtype, np.int64)
        np.testing.assert_array_equal(board, [[2, 0], [0, 4]])


if __name__ == "__main__":
    main()
