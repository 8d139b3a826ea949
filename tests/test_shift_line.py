import unittest

from game import (
    Direction,
    Grid,
    extract_line,
    line_coord,
    line_coords,
    shift_line,
    write_line,
)


class TestShiftLine(unittest.TestCase):
    def test_given_compacted_line_without_merges_when_shifting_then_unchanged_and_no_moves(self):
        for line in ([1, 1, 3, 6], [3, 6, 3, 6], [2, 2], [0], [5]):
            new_line, moves = shift_line(line)
            self.assertEqual(list(new_line), line)
            self.assertEqual(moves, [])

    def test_given_gap_after_unmergeable_pair_when_shifting_then_only_gap_fills(self):
        new_line, moves = shift_line([1, 1, 0, 2])
        self.assertEqual(new_line, (1, 1, 2, 0))
        self.assertEqual(len(moves), 1)
        m = moves[0]
        self.assertEqual((m.old_index, m.new_index, m.value), (3, 2, 2))
        self.assertFalse(m.is_merge)

    def test_given_leading_gap_when_shifting_then_everything_slides_one_cell(self):
        new_line, moves = shift_line([0, 3, 1, 2])
        self.assertEqual(new_line, (3, 1, 2, 0))
        got = sorted((m.old_index, m.new_index, m.value) for m in moves)
        self.assertEqual(got, [(1, 0, 3), (2, 1, 1), (3, 2, 2)])

    def test_given_one_then_two_when_shifting_then_merge_recorded_with_operands(self):
        new_line, moves = shift_line([1, 2, 3, 0])
        self.assertEqual(new_line, (3, 3, 0, 0))
        merges = [m for m in moves if m.is_merge]
        self.assertEqual(len(merges), 1)
        self.assertEqual((merges[0].old_index, merges[0].new_index, merges[0].value), (1, 0, 3))
        self.assertEqual(merges[0].operands, (2, 1))
        slides = [m for m in moves if not m.is_merge]
        self.assertEqual([(m.old_index, m.new_index, m.value) for m in slides], [(2, 1, 3)])

    def test_given_two_merges_available_when_shifting_then_single_pass_keeps_result_in_place(self):
        # 3+3 merges at 0, then the 6,6 cascade slides; the new 6 at 0 does not re-merge this pass
        new_line, moves = shift_line([3, 3, 6, 6])
        self.assertEqual(new_line, (6, 6, 6, 0))
        self.assertEqual(sum(1 for m in moves if m.is_merge), 1)

    def test_given_trailing_empties_when_shifting_then_no_move_for_empty_cells(self):
        new_line, moves = shift_line([0, 0, 0, 3])
        self.assertEqual(new_line, (0, 0, 3, 0))
        self.assertEqual([(m.old_index, m.new_index) for m in moves], [(3, 2)])

    def test_given_input_list_when_shifting_then_not_mutated(self):
        line = [0, 1, 2]
        shift_line(line)
        self.assertEqual(line, [0, 1, 2])


class TestProjection(unittest.TestCase):
    def setUp(self):
        self.grid = Grid.from_rows([
            [1, 2, 3],
            [4, 5, 6],
            [7, 8, 9],
        ])

    def test_given_each_direction_when_extracting_then_oriented_toward_shift_edge(self):
        self.assertEqual(extract_line(self.grid, 1, Direction.LEFT), (4, 5, 6))
        self.assertEqual(extract_line(self.grid, 1, Direction.RIGHT), (6, 5, 4))
        self.assertEqual(extract_line(self.grid, 1, Direction.UP), (2, 5, 8))
        self.assertEqual(extract_line(self.grid, 1, Direction.DOWN), (8, 5, 2))

    def test_given_unmodified_line_when_writing_back_then_grid_identical(self):
        for d in Direction:
            for i in range(self.grid.size):
                line = extract_line(self.grid, i, d)
                self.assertEqual(write_line(self.grid, line, i, d), self.grid, f"{d} {i}")

    def test_given_new_line_when_writing_then_inverse_orientation_applied(self):
        g = write_line(self.grid, (10, 20, 30), 0, Direction.DOWN)
        self.assertEqual(g.rows(), [[30, 2, 3], [20, 5, 6], [10, 8, 9]])
        g = write_line(self.grid, (10, 20, 30), 2, Direction.RIGHT)
        self.assertEqual(g.rows()[2], [30, 20, 10])
        # input grid untouched
        self.assertEqual(self.grid.at(0, 0), 1)

    def test_given_wrong_length_or_index_when_projecting_then_errors(self):
        with self.assertRaises(ValueError):
            write_line(self.grid, (1, 2), 0, Direction.LEFT)
        with self.assertRaises(IndexError):
            extract_line(self.grid, 3, Direction.UP)

    def test_given_line_position_when_mapping_then_absolute_coord(self):
        self.assertEqual(line_coord(2, 0, Direction.RIGHT, 4), (2, 3))
        self.assertEqual(line_coord(1, 3, Direction.DOWN, 4), (0, 1))
        self.assertEqual(line_coords(0, Direction.UP, 2), [(0, 0), (1, 0)])


if __name__ == '__main__':
    unittest.main(verbosity=2)
