import sys
import threading
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from checkers.board import Board  # noqa: E402
from checkers.config import CaptureRule, RulesConfig  # noqa: E402
from checkers.pieces import Color, Piece  # noqa: E402
from checkers_api.schemas import CoordinateModel, MoveRequest, ResetRequest, RulesPayload  # noqa: E402
from checkers_api.session import GameSession  # noqa: E402


def _move_request(start: tuple[int, int], *steps: tuple[int, int]) -> MoveRequest:
    return MoveRequest(
        start=CoordinateModel(col=start[0], row=start[1]),
        steps=[CoordinateModel(col=col, row=row) for col, row in steps],
    )


class SessionMoveTests(unittest.TestCase):
    def test_serialize_initial_board(self) -> None:
        session = GameSession()
        state = session.serialize()
        self.assertEqual(state["turn"], "white")
        self.assertEqual(state["status"], "awaiting_move")
        self.assertIsNone(state["winner"])
        self.assertEqual(len(state["pieces"]), 24)
        self.assertEqual(state["pieceCounts"]["white"], {"total": 12, "kings": 0})
        self.assertFalse(state["canUndo"])
        self.assertFalse(state["captureAvailable"])
        self.assertEqual(state["rules"]["captureRule"], "optional")
        self.assertEqual(state["scores"]["black"], {"points": 0, "captures": 0})

    def test_make_move_and_undo(self) -> None:
        session = GameSession()
        moves = session.get_valid_moves(2, 5)["moves"]
        self.assertEqual([m["steps"] for m in moves], [[{"col": 3, "row": 4}], [{"col": 1, "row": 4}]])

        state = session.make_move(_move_request((2, 5), (3, 4)))
        self.assertEqual(state["turn"], "black")
        self.assertEqual(state["moveCount"], 1)
        self.assertEqual(state["lastMove"]["start"], {"col": 2, "row": 5})

        state = session.undo_move()
        self.assertEqual(state["turn"], "white")
        self.assertEqual(state["moveCount"], 0)

        state = session.undo_move()
        self.assertEqual(state["moveCount"], 0)

    def test_multi_jump_path_must_match(self) -> None:
        session = GameSession()
        board = Board.empty()
        board.setPiece(2, 5, Piece(Color.WHITE))
        board.setPiece(3, 4, Piece(Color.BLACK))
        board.setPiece(5, 2, Piece(Color.BLACK))
        board.setPiece(7, 0, Piece(Color.BLACK))
        session.game.setPosition(board, Color.WHITE)

        with self.assertRaises(ValueError):
            session.make_move(_move_request((2, 5), (4, 3)))

        state = session.make_move(_move_request((2, 5), (4, 3), (6, 1)))
        self.assertEqual(state["pieceCounts"]["black"]["total"], 1)
        self.assertEqual(state["scores"]["white"], {"points": 10, "captures": 2})
        self.assertEqual(len(state["lastMove"]["captures"]), 2)
        self.assertTrue(state["captureAvailable"])

    def test_rejects_empty_square_and_wrong_side(self) -> None:
        session = GameSession()
        with self.assertRaises(ValueError):
            session.make_move(_move_request((3, 4), (2, 3)))
        with self.assertRaises(ValueError):
            session.make_move(_move_request((1, 2), (2, 3)))
        with self.assertRaises(ValueError):
            session.get_valid_moves(3, 4)


class SessionRulesTests(unittest.TestCase):
    def test_set_rules_resets_with_overrides(self) -> None:
        session = GameSession()
        session.make_move(_move_request((2, 5), (3, 4)))

        state = session.set_rules(RulesPayload(captureRule="board", startingPlayer="black", quietMoveLimit=40))
        self.assertEqual(state["turn"], "black")
        self.assertEqual(state["moveCount"], 0)
        self.assertEqual(state["rules"]["captureRule"], "board")
        self.assertEqual(state["rules"]["quietMoveLimit"], 40)
        self.assertEqual(session.game.rules.capture_rule, CaptureRule.BOARD)

        state = session.reset(ResetRequest(rules=RulesPayload(quietMoveLimit=None)))
        self.assertIsNone(state["rules"]["quietMoveLimit"])
        self.assertEqual(state["rules"]["captureRule"], "board")

    def test_reset_without_payload_keeps_rules(self) -> None:
        session = GameSession(RulesConfig(starting_player=Color.BLACK))
        state = session.reset()
        self.assertEqual(state["turn"], "black")


class SessionLockTests(unittest.TestCase):
    def test_concurrent_moves_commit_once(self) -> None:
        session = GameSession()
        results: list[str] = []
        barrier = threading.Barrier(4)

        def worker() -> None:
            barrier.wait()
            try:
                session.make_move(_move_request((2, 5), (3, 4)))
                results.append("ok")
            except ValueError:
                results.append("rejected")

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=2.0)

        self.assertEqual(sorted(results), ["ok", "rejected", "rejected", "rejected"])
        self.assertEqual(session.serialize()["moveCount"], 1)


if __name__ == "__main__":
    unittest.main()
