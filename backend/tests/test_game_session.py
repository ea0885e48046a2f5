from __future__ import annotations

import sys
import unittest
from pathlib import Path


BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


from core.board import Board  # noqa: E402
from core.errors import InvalidToken, MalformedToken  # noqa: E402
from core.game import GameSession  # noqa: E402
from core.move import Outcome  # noqa: E402
from core.pieces import BoardSize, Team  # noqa: E402


class GameSessionTurnTests(unittest.TestCase):
    def test_new_session_uses_opening_layout(self) -> None:
        session = GameSession()
        self.assertEqual(session.active_team, Team.FIRST)
        self.assertEqual(len(session.board.pieces()), 24)
        self.assertIsNone(session.chainPiece)
        self.assertEqual(session.toToken(), (Board.newGameSetup(BoardSize.SMALL), "S", "W"))

    def test_empty_origin_reports_no_piece(self) -> None:
        session = GameSession()
        before = session.board.encode()

        result = session.attemptMove((3, 3), (4, 4))

        self.assertEqual(result.outcome, Outcome.NO_PIECE_AT_ORIGIN)
        self.assertEqual(session.board.encode(), before)
        self.assertEqual(session.active_team, Team.FIRST)

    def test_piece_of_waiting_team_is_rejected(self) -> None:
        session = GameSession()
        before = session.board.encode()

        result = session.attemptMove((1, 5), (0, 4))

        self.assertEqual(result.outcome, Outcome.NOT_ACTIVE_TEAM)
        self.assertEqual(session.board.encode(), before)

    def test_completed_move_switches_team(self) -> None:
        session = GameSession()

        result = session.attemptMove((2, 2), (3, 3))

        self.assertEqual(result.outcome, Outcome.MOVED)
        self.assertEqual(session.active_team, Team.SECOND)
        self.assertEqual(session.toToken()[2], "R")
        self.assertIsNotNone(session.board.pieceAt(3, 3))

    def test_illegal_move_keeps_team(self) -> None:
        session = GameSession()
        result = session.attemptMove((2, 2), (2, 3))
        self.assertEqual(result.outcome, Outcome.ILLEGAL)
        self.assertEqual(session.active_team, Team.FIRST)

    def test_capture_chain_keeps_team_until_finished(self) -> None:
        session = GameSession()
        session.loadFromToken("MW00,MR11,MR33,MR77", "S", "W")

        first = session.attemptMove((0, 0), (2, 2))
        self.assertEqual(first.outcome, Outcome.CAPTURED_MUST_CONTINUE)
        self.assertEqual(session.active_team, Team.FIRST)
        self.assertEqual(session.chainPiece.position, (2, 2))

        blocked = session.attemptMove((7, 7), (6, 6))
        self.assertEqual(blocked.outcome, Outcome.ILLEGAL)

        second = session.attemptMove((2, 2), (4, 4))
        self.assertEqual(second.outcome, Outcome.CAPTURED_TURN_ENDS)
        self.assertEqual(session.active_team, Team.SECOND)
        self.assertIsNone(session.chainPiece)
        self.assertEqual(session.board.encode(), "MW44,MR77")

    def test_destinations_from(self) -> None:
        session = GameSession()
        self.assertEqual(session.destinationsFrom((2, 2)), [(1, 3), (3, 3)])
        self.assertEqual(session.destinationsFrom((1, 5)), [])
        self.assertEqual(session.destinationsFrom((3, 3)), [])


class GameSessionTokenTests(unittest.TestCase):
    def test_new_game_on_large_board(self) -> None:
        session = GameSession()
        session.attemptMove((2, 2), (3, 3))

        session.newGame(BoardSize.LARGE, Team.SECOND)

        self.assertEqual(session.board.dimension, 10)
        self.assertEqual(len(session.board.pieces()), 40)
        self.assertEqual(session.active_team, Team.SECOND)
        board, size, team = session.toToken()
        self.assertEqual(size, "L")
        self.assertEqual(team, "R")
        self.assertEqual(board, Board.newGameSetup(BoardSize.LARGE))

    def test_token_round_trip_between_sessions(self) -> None:
        sender = GameSession()
        sender.attemptMove((2, 2), (3, 3))
        sender.attemptMove((3, 5), (2, 4))
        sender.attemptMove((6, 2), (7, 3))

        recipient = GameSession()
        recipient.loadFromToken(*sender.toToken())

        self.assertEqual(recipient.board, sender.board)
        self.assertEqual(recipient.active_team, Team.SECOND)
        self.assertEqual(recipient.size, BoardSize.SMALL)

    def test_invalid_fields_raise_and_leave_session_untouched(self) -> None:
        session = GameSession()
        session.attemptMove((2, 2), (3, 3))
        before = session.toToken()

        for fields in (("MW00", "X", "W"), ("MW00", "S", "Z"), ("MW0", "S", "W"), ("MW08", "S", "W")):
            with self.subTest(fields=fields):
                with self.assertRaises(InvalidToken):
                    session.loadFromToken(*fields)
                self.assertEqual(session.toToken(), before)
                self.assertEqual(session.active_team, Team.SECOND)

    def test_board_failure_keeps_cause(self) -> None:
        session = GameSession()
        with self.assertRaises(InvalidToken) as ctx:
            session.loadFromToken("QW00", "S", "W")
        self.assertIsInstance(ctx.exception.__cause__, MalformedToken)

    def test_load_accepts_empty_board(self) -> None:
        session = GameSession()
        session.loadFromToken("", "L", "R")
        self.assertEqual(session.board.pieces(), [])
        self.assertEqual(session.toToken(), ("", "L", "R"))


if __name__ == "__main__":
    unittest.main()
