import unittest

from boggle.core.models import Position
from boggle.engine.board import Board
from boggle.engine.paths import (
    find_words,
    is_adjacent,
    is_continuous_path,
    is_path_realizable,
    neighbors,
    word_from_path,
)
from tests.helpers import BOARD_ROWS, QU_BOARD_ROWS


class AdjacencyTests(unittest.TestCase):
    def test_eight_directions_are_adjacent(self) -> None:
        center = Position(2, 2)
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                other = Position(2 + dr, 2 + dc)
                self.assertEqual(is_adjacent(center, other), other != center)

    def test_distant_cells_are_not_adjacent(self) -> None:
        self.assertFalse(is_adjacent(Position(0, 0), Position(0, 2)))
        self.assertFalse(is_adjacent(Position(0, 0), Position(2, 2)))
        self.assertFalse(is_adjacent(Position(3, 1), Position(1, 1)))

    def test_neighbor_counts_and_bounds(self) -> None:
        for size in (4, 5, 6):
            for row in range(size):
                for col in range(size):
                    result = neighbors(Position(row, col), size)
                    self.assertGreaterEqual(len(result), 3)
                    self.assertLessEqual(len(result), 8)
                    for pos in result:
                        self.assertTrue(0 <= pos.row < size and 0 <= pos.col < size)
                        self.assertTrue(is_adjacent(Position(row, col), pos))

    def test_corner_edge_and_interior(self) -> None:
        self.assertEqual(len(neighbors(Position(0, 0), 4)), 3)
        self.assertEqual(len(neighbors(Position(0, 2), 4)), 5)
        self.assertEqual(len(neighbors(Position(2, 2), 4)), 8)
        self.assertEqual(
            neighbors(Position(0, 0), 4),
            {Position(0, 1), Position(1, 0), Position(1, 1)},
        )

    def test_continuous_path(self) -> None:
        path = [Position(0, 0), Position(0, 1), Position(1, 2)]
        self.assertTrue(is_continuous_path(path, 4))
        self.assertTrue(is_continuous_path([], 4))
        self.assertFalse(is_continuous_path([Position(0, 0), Position(0, 2)], 4))
        self.assertFalse(is_continuous_path([Position(0, 0), Position(0, 1), Position(0, 0)], 4))
        self.assertFalse(is_continuous_path([Position(3, 3), Position(3, 4)], 4))


class PathSearchTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board.from_rows(BOARD_ROWS)
        self.qu_board = Board.from_rows(QU_BOARD_ROWS)

    def test_word_from_path_counts_qu_twice(self) -> None:
        path = [Position(2, 1), Position(3, 1)]
        self.assertEqual(word_from_path(path, self.board), "HQU")

    def test_realizable_words(self) -> None:
        for word in ("cat", "CAT", "tac", "dog", "hot", "cats"):
            self.assertTrue(is_path_realizable(word, self.board), word)

    def test_unrealizable_words(self) -> None:
        # "cac" would reuse the only C; the single O is two columns away from E.
        for word in ("cac", "zebra", "toe", "", "catsx"):
            self.assertFalse(is_path_realizable(word, self.board), word)

    def test_qu_tile_consumes_two_letters(self) -> None:
        self.assertTrue(is_path_realizable("quilt", self.qu_board))
        self.assertTrue(is_path_realizable("quiet", Board.from_rows(["QIEA", "BCTD", "FGHJ", "KLMN"])))
        self.assertFalse(is_path_realizable("uilt", self.qu_board))

    def test_lone_q_matches_qu_tile(self) -> None:
        board = Board.from_rows(["QAT", "BCD", "EFG"])
        self.assertTrue(is_path_realizable("qat", board))

    def test_backtracks_from_dead_ends(self) -> None:
        # Two A's next to C; only the second leads on to T.
        board = Board.from_rows(["CAX", "AXX", "TXX"])
        self.assertTrue(is_path_realizable("cat", board))

    def test_find_words_orders_by_score(self) -> None:
        words = find_words(self.board, ["dog", "cat", "zebra", "toe", "tac", "cats", "CAT"])
        self.assertEqual(words, ["cat", "cats", "dog", "tac"])
        words = find_words(self.qu_board, ["send", "quilt", "rot", "lie", "lit"])
        self.assertEqual(words, ["quilt", "lie", "rot", "send"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
