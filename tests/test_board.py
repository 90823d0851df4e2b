import unittest
from dataclasses import replace

from tetris_config import CANVAS_WIDTH, CELL_WIDTH, CELL_HEIGHT, CLEAR_SCORE, GRID_HEIGHT
from tetris_board import (
    side_collision, bottom_collision, rotation_collision, top_out,
    full_row, clear_row, remove_rows, occupancy, place_ghost,
    active_block, stopped_blocks,
)
from tetris_move import gravity_step
from tetris_state import tick
from tests.helpers import board, falling, settled_row, settled_cells, footprint, settle


class CollisionTests(unittest.TestCase):
    def test_side_walls(self):
        s = board()
        left = falling("O", cols=-4, rows=5)
        self.assertTrue(side_collision(s, left, -CELL_WIDTH))
        self.assertFalse(side_collision(s, left, CELL_WIDTH))
        right = falling("O", cols=4, rows=5)
        self.assertEqual(max(x for x, _ in right.cells()), CANVAS_WIDTH - CELL_WIDTH)
        self.assertTrue(side_collision(s, right, CELL_WIDTH))
        self.assertFalse(side_collision(s, right, -CELL_WIDTH))

    def test_side_against_settled_cell(self):
        o = falling("O", rows=5)  # cols 4-5, rows 4-5
        s = board(settled_cells([(6, 5)]))
        self.assertTrue(side_collision(s, o, CELL_WIDTH))
        self.assertFalse(side_collision(s, o, -CELL_WIDTH))

    def test_bottom_floor_and_stack(self):
        s = board()
        self.assertTrue(bottom_collision(s, falling("O", rows=GRID_HEIGHT - 1)))
        self.assertFalse(bottom_collision(s, falling("O", rows=GRID_HEIGHT - 2)))
        s = board(settled_cells([(5, 6)]))
        self.assertTrue(bottom_collision(s, falling("O", rows=5)))
        self.assertFalse(bottom_collision(s, falling("O", rows=4)))

    def test_rotation_counts_wall_contact(self):
        s = board()
        self.assertTrue(rotation_collision(s, falling("O", cols=-4, rows=5)))
        self.assertTrue(rotation_collision(s, falling("O", rows=GRID_HEIGHT - 1)))
        self.assertFalse(rotation_collision(s, falling("O", rows=5)))
        s = board(settled_cells([(4, 5)]))
        self.assertTrue(rotation_collision(s, falling("O", rows=5)))

    def test_collisions_ignore_active_and_ghost(self):
        other = falling("O", rows=6, block_id=5)
        s = board(other, ghost=falling("O", rows=6, block_id=6))
        self.assertFalse(bottom_collision(s, falling("O", rows=4)))

    def test_top_out(self):
        self.assertTrue(top_out(falling("T")))
        self.assertTrue(top_out(falling("T", rows=1)))
        self.assertFalse(top_out(falling("T", rows=2)))

    def test_active_and_stopped_lookup(self):
        a = falling("T")
        s = board(settled_row(19), a)
        self.assertIs(active_block(s), a)
        self.assertEqual(len(stopped_blocks(s)), 1)
        self.assertIsNone(active_block(board(settled_row(19))))


class LineClearTests(unittest.TestCase):
    def test_full_row_clears_and_compacts(self):
        above = settled_cells([(2, 18), (3, 17)])
        s = board(settled_row(19), above, clearing=True, score=200, high_score=250)
        self.assertTrue(full_row(s, 19))
        self.assertFalse(full_row(s, 18))
        out = remove_rows(s)
        self.assertFalse(out.clearing)
        self.assertEqual(out.score, 200 + CLEAR_SCORE)
        self.assertEqual(out.high_score, 300)
        self.assertEqual(out.level, 1)
        self.assertEqual(len(out.blocks), 1)  # the filler row vanished
        self.assertEqual(footprint(out.blocks[0]), sorted([(40, 380), (60, 360)]))
        self.assertIsNone(out.ghost)

    def test_stacked_rows_clear_in_one_pass(self):
        s = board(
            settled_row(19, block_id=1), settled_row(18, block_id=2),
            settled_cells([(0, 17)]), settled_row(16, block_id=3),
            clearing=True,
        )
        out = remove_rows(s)
        self.assertEqual(out.score, 3 * CLEAR_SCORE)
        self.assertEqual([c for b in out.blocks for c in b.cells()], [(0, 380)])

    def test_tick_without_active_block_finishes_clearing(self):
        s = board(settled_row(19), settled_cells([(3, 18)]), clearing=True)
        out = tick(s)
        self.assertFalse(out.clearing)
        self.assertEqual(out.score, CLEAR_SCORE)
        self.assertEqual([c for b in out.blocks for c in b.cells()], [(60, 380)])

    def test_level_steps_every_five_hundred(self):
        s = board(settled_row(19), score=400, clearing=True)
        self.assertEqual(remove_rows(s).level, 2)

    def test_clear_waits_for_settling(self):
        s = board(settled_row(19), falling("O", rows=5), clearing=True)
        out = remove_rows(s)
        self.assertEqual(out.blocks, s.blocks)
        self.assertEqual(out.score, 0)
        self.assertFalse(out.clearing)

    def test_nothing_happens_outside_clearing(self):
        s = board(settled_row(19))
        self.assertEqual(remove_rows(s).blocks, s.blocks)

    def test_clear_row_drops_only_cells_above(self):
        s = board(settled_cells([(0, 19), (0, 10), (1, 5)]), settled_row(12))
        out = clear_row(s, 12)
        self.assertEqual(sorted(out.blocks[0].cells()), sorted([(0, 380), (0, 220), (20, 120)]))

    def test_occupancy(self):
        s = board(settled_cells([(0, 19), (9, 0)], color="red"), falling("T", rows=5))
        grid = occupancy(s)
        self.assertEqual(grid[19][0], "red")
        self.assertEqual(grid[0][9], "red")
        self.assertEqual(sum(c is not None for row in grid for c in row), 2)


class GhostTests(unittest.TestCase):
    def test_ghost_matches_simulated_gravity(self):
        for stack in (board(), board(settled_row(19, skip=(4,)), settled_cells([(5, 10)]))):
            for shape in ("I", "J", "L", "O", "S", "T", "Z"):
                with self.subTest(shape=shape):
                    b = falling(shape)
                    sim = b
                    while not bottom_collision(stack, sim):
                        sim = gravity_step(stack, sim)
                    self.assertEqual(footprint(place_ghost(stack, b)), footprint(sim))

    def test_ghost_lands_on_floor(self):
        g = place_ghost(board(), falling("O"))
        self.assertEqual(max(y for _, y in g.cells()), 380)
        self.assertFalse(g.stopped)

    def test_ghost_of_grounded_block_is_itself(self):
        b = settle(falling("O", rows=GRID_HEIGHT - 1))
        self.assertEqual(place_ghost(board(), b), b)
        self.assertEqual(place_ghost(board(), replace(b, stopped=False)).cells(), b.cells())


if __name__ == "__main__":
    unittest.main()
