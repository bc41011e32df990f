from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from checkers.board import Board, SquareColor  # noqa: E402
from checkers.errors import OutOfBounds  # noqa: E402
from checkers.pieces import Color, Piece  # noqa: E402


class BoardLayoutTests(unittest.TestCase):
    def test_square_color_follows_parity(self) -> None:
        board = Board.empty()
        self.assertEqual(board.squareColor(0, 0), SquareColor.LIGHT)
        self.assertEqual(board.squareColor(1, 0), SquareColor.DARK)
        self.assertEqual(board.squareColor(2, 5), SquareColor.DARK)
        self.assertTrue(board.squareColor(3, 4).playable)
        self.assertFalse(board.squareColor(4, 4).playable)

    def test_standard_layout_fills_three_ranks_on_dark_squares(self) -> None:
        board = Board()
        self.assertEqual(board.count(Color.BLACK), 12)
        self.assertEqual(board.count(Color.WHITE), 12)
        for (col, row), piece in board.pieces():
            self.assertEqual(board.squareColor(col, row), SquareColor.DARK)
            self.assertFalse(piece.is_king)
            if piece.color is Color.BLACK:
                self.assertLess(row, 3)
            else:
                self.assertGreaterEqual(row, 5)

    def test_squares_are_row_major(self) -> None:
        board = Board.empty(3, 2)
        visited = []
        board.forEachSquare(lambda square, piece: visited.append(square))
        self.assertEqual(visited, [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)])

    def test_set_and_get_piece(self) -> None:
        board = Board.empty()
        king = Piece(Color.WHITE, is_king=True)
        board.setPiece(3, 4, king)
        self.assertEqual(board.getPiece(3, 4), king)
        self.assertIsNone(board.getPiece(4, 3))
        board.setPiece(3, 4, None)
        self.assertIsNone(board.getPiece(3, 4))

    def test_out_of_bounds_access_raises(self) -> None:
        board = Board.empty()
        for col, row in [(-1, 0), (0, -1), (8, 0), (0, 8)]:
            with self.assertRaises(OutOfBounds):
                board.getPiece(col, row)
            with self.assertRaises(OutOfBounds):
                board.setPiece(col, row, Piece(Color.BLACK))
        with self.assertRaises(IndexError):
            board.squareColor(9, 9)

    def test_state_round_trip_and_copy_are_independent(self) -> None:
        board = Board()
        board.setPiece(1, 4, Piece(Color.BLACK, is_king=True))
        restored = Board.from_state(board.to_state())
        self.assertEqual(restored.to_state(), board.to_state())

        clone = board.copy()
        clone.setPiece(1, 4, None)
        self.assertIsNotNone(board.getPiece(1, 4))

    def test_reset_restores_start_position(self) -> None:
        board = Board()
        start = board.to_state()
        board.setPiece(1, 0, None)
        board.setPiece(3, 4, Piece(Color.WHITE))
        board.reset()
        self.assertEqual(board.to_state(), start)


if __name__ == "__main__":
    unittest.main()
