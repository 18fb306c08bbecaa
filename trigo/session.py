# session.py
import random
from collections import namedtuple
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from trigo.capture_engine import CaptureEngine, CaptureResult
from trigo.goban_model import Board, IllegalMove, OccupiedPoint, OutOfBounds, PLAYERS, DEFAULT_SIZE

DEBUG = False


class GameOver(Exception): pass


MoveOutcome = namedtuple('MoveOutcome', ['player', 'point', 'capture', 'turn'])


@dataclass
class SessionConfig:
    board_size: int = DEFAULT_SIZE
    players: Tuple[str, ...] = PLAYERS
    shuffle_players: bool = True
    seed: Optional[int] = None
    max_turns: Optional[int] = None  # None -> board_size ** 2


class GameSession:
    """
    One game from an empty board to the turn limit.
    Owns the board, the turn order, the scores and the turn counter;
    nothing is shared between sessions.
    """

    def __init__(self, config: Optional[SessionConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or SessionConfig()
        if not self.config.players:
            raise ValueError("A session needs at least one player")
        if len(set(self.config.players)) != len(self.config.players):
            raise ValueError(f"Duplicate player tags: {self.config.players}")
        self.board = Board(size=self.config.board_size)
        self.engine = CaptureEngine()
        self._rng = rng or random.Random(self.config.seed)
        order = list(self.config.players)
        if self.config.shuffle_players:
            self._rng.shuffle(order)
        self._players: Tuple[str, ...] = tuple(order)
        self._scores: Dict[str, int] = {p: 0 for p in self._players}
        self._current = 0
        self.turns = 0
        self.max_turns = self.config.max_turns
        if self.max_turns is None:
            self.max_turns = self.config.board_size ** 2
        if DEBUG:
            print(f"[GameSession] new game, order {''.join(self._players)}, {self.max_turns} turns")

    @property
    def players(self) -> Tuple[str, ...]:
        return self._players

    @property
    def current_player(self) -> str:
        return self._players[self._current]

    @property
    def scores(self) -> Dict[str, int]:
        return dict(self._scores)

    @property
    def is_over(self) -> bool:
        return self.turns >= self.max_turns

    def check_move(self, row: int, col: int):
        """Raise an IllegalMove subclass if (row, col) cannot take a stone."""
        if not self.board.in_bounds(row, col):
            raise OutOfBounds(f"({row}, {col}) is out of bounds")
        if not self.board.is_empty(row, col):
            raise OccupiedPoint(f"({row}, {col}) is occupied")

    def play(self, row: int, col: int) -> MoveOutcome:
        """Place the current player's stone, resolve captures and pass the turn."""
        if self.is_over:
            raise GameOver(f"Turn limit of {self.max_turns} reached")
        self.check_move(row, col)
        player = self.current_player
        self.board.place(row, col, player)
        capture: CaptureResult = self.engine.resolve(self.board, row, col, player)
        # the capturing player is credited once per removed group
        self._scores[player] += sum(capture.captured_groups_by_player.values())
        self.turns += 1
        self._current = (self._current + 1) % len(self._players)
        if DEBUG:
            print(f"[GameSession] turn {self.turns}: {player} at ({row}, {col}), captured={capture.captured}")
        return MoveOutcome(player=player, point=(row, col), capture=capture, turn=self.turns)

    def try_play(self, row: int, col: int) -> Optional[MoveOutcome]:
        """Like play(), but returns None instead of raising on an illegal point."""
        try:
            return self.play(row, col)
        except IllegalMove as e:
            if DEBUG:
                print("[GameSession] IllegalMove:", e)
            return None
