"""
Tests for tile spawning: placement, values, probabilities and reproducibility.
"""

from unittest import TestCase, main

import numpy as np

from fortyninetysix.core.gameboard import TILE_SPAWN_PROBS, fill_board, new_board, spawn_outcomes, spawn_tile

FULL_BOARD = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])


class TestSpawnTile(TestCase):
    """Test placement of a single new tile."""

    def test_exactly_one_empty_cell_filled(self):
        """One previously empty cell gets a 2 or a 4, every other cell is unchanged."""
        board = np.array([[2, 0, 4, 8], [0, 16, 0, 0], [2, 2, 0, 0], [0, 0, 0, 32]])

        for seed in range(50):
            result = spawn_tile(board, seed=seed)
            changed = np.argwhere(result != board)

            # ##>: Exactly one cell differs and it was empty.
            self.assertEqual(len(changed), 1)
            cell = tuple(changed[0])
            self.assertEqual(board[cell], 0)
            self.assertIn(result[cell], (2, 4))

    def test_input_not_mutated(self):
        board = new_board()
        result = spawn_tile(board, seed=0)
        self.assertEqual(np.count_nonzero(board), 0)
        self.assertEqual(np.count_nonzero(result), 1)

    def test_full_board_unchanged(self):
        """Spawning on a full board is a no-op that still returns a new array."""
        result = spawn_tile(FULL_BOARD)
        np.testing.assert_array_equal(result, FULL_BOARD)
        self.assertIsNot(result, FULL_BOARD)

    def test_seed_reproducibility(self):
        board = new_board()
        np.testing.assert_array_equal(spawn_tile(board, seed=7), spawn_tile(board, seed=7))

    def test_generator_takes_precedence(self):
        """An explicit generator is used instead of the seed."""
        first = spawn_tile(new_board(), seed=1, generator=np.random.default_rng(99))
        second = spawn_tile(new_board(), seed=2, generator=np.random.default_rng(99))
        np.testing.assert_array_equal(first, second)

    def test_every_empty_cell_reachable(self):
        """Over many draws, every empty cell receives a tile."""
        rng = np.random.default_rng(3)
        hits = np.zeros((4, 4), dtype=int)
        for _ in range(2000):
            hits += spawn_tile(new_board(), generator=rng) != 0
        self.assertTrue(np.all(hits > 0))

    def test_value_ratio(self):
        """Tile values follow the 9:1 distribution of 2 against 4."""
        rng = np.random.default_rng(1234)
        samples = 10000
        fours = sum(int(spawn_tile(new_board(), generator=rng).max() == 4) for _ in range(samples))

        # ##>: Standard deviation is 0.003 for 10000 samples.
        self.assertAlmostEqual(fours / samples, TILE_SPAWN_PROBS[4], delta=0.02)


class TestSpawnOutcomes(TestCase):
    """Test enumeration of every possible spawn."""

    def test_probabilities_sum_to_one(self):
        board = np.array([[2, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        outcomes = spawn_outcomes(board)

        # ##>: Two values for each of the 14 empty cells.
        self.assertEqual(len(outcomes), 28)
        self.assertAlmostEqual(sum(prob for _, prob in outcomes), 1.0, places=10)

    def test_single_empty_cell(self):
        """One empty cell produces two outcomes with P=0.9 and P=0.1."""
        board = FULL_BOARD.copy()
        board[1, 3] = 0
        outcomes = spawn_outcomes(board)

        self.assertEqual(len(outcomes), 2)
        by_value = {int(state[1, 3]): prob for state, prob in outcomes}
        self.assertAlmostEqual(by_value[2], 0.9, places=10)
        self.assertAlmostEqual(by_value[4], 0.1, places=10)

    def test_full_board(self):
        outcomes = spawn_outcomes(FULL_BOARD)
        self.assertEqual(len(outcomes), 1)
        state, prob = outcomes[0]
        np.testing.assert_array_equal(state, FULL_BOARD)
        self.assertEqual(prob, 1.0)

    def test_outcomes_do_not_alias_input(self):
        board = new_board()
        for state, _ in spawn_outcomes(board):
            self.assertFalse(np.shares_memory(state, board))
        self.assertEqual(np.count_nonzero(board), 0)


class TestFillBoard(TestCase):
    """Test the initial board of a game."""

    def test_two_tiles(self):
        board = fill_board(2, seed=42)
        self.assertEqual(np.count_nonzero(board), 2)
        self.assertTrue(np.all(np.isin(board[board != 0], [2, 4])))

    def test_seed_reproducibility(self):
        np.testing.assert_array_equal(fill_board(2, seed=42), fill_board(2, seed=42))


if __name__ == '__main__':
    main()
