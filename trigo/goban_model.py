# goban_model.py
from typing import Iterator, List, Optional, Set, Tuple

DEBUG = False

EMPTY = None
PLAYERS = ('X', 'O', 'Y')
DEFAULT_SIZE = 9

Point = Tuple[int, int]


# Exceptions
class IllegalMove(Exception): pass


class OutOfBounds(IllegalMove): pass


class OccupiedPoint(IllegalMove): pass


class Board:
    """
    Square grid of cells stored as one flat row-major list.
    A cell holds None (empty) or a player tag such as 'X'.
    All accessors check coordinates; nothing outside [0, size) is ever touched.
    """

    def __init__(self, size: int = DEFAULT_SIZE):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self._cells: List[Optional[str]] = [EMPTY] * (size * size)

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Board":
        """Build a position from strings like 'XO.', '.' marks an empty cell."""
        board = cls(size=len(rows))
        for r, line in enumerate(rows):
            if len(line) != board.size:
                raise ValueError(f"Row {r} has {len(line)} cells, expected {board.size}")
            for c, ch in enumerate(line):
                if ch != '.':
                    board.place(r, c, ch)
        return board

    # --- helpers ---
    def in_bounds(self, r, c):
        return 0 <= r < self.size and 0 <= c < self.size

    def _offset(self, r, c):
        if not self.in_bounds(r, c):
            raise OutOfBounds(f"({r}, {c}) is outside a {self.size}x{self.size} board")
        return r * self.size + c

    def neighbors(self, r, c) -> Iterator[Point]:
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                yield nr, nc

    # --- cell access ---
    def get(self, r, c) -> Optional[str]:
        return self._cells[self._offset(r, c)]

    def is_empty(self, r, c) -> bool:
        """True only for an in-bounds cell holding no stone."""
        if not self.in_bounds(r, c):
            return False
        return self._cells[r * self.size + c] is EMPTY

    def place(self, r, c, player: str):
        off = self._offset(r, c)
        if self._cells[off] is not EMPTY:
            raise OccupiedPoint(f"({r}, {c}) is occupied by {self._cells[off]}")
        self._cells[off] = player
        if DEBUG:
            print(f"[Board] place {player} at ({r}, {c})")

    def remove(self, r, c):
        self._cells[self._offset(r, c)] = EMPTY

    # --- groups ---
    def group_and_liberties(self, r, c) -> Tuple[Set[Point], Set[Point]]:
        """Return (stones_set, liberties_set) for the group containing (r, c)."""
        color = self.get(r, c)
        if color is EMPTY:
            return set(), set()
        visited: Set[Point] = set()
        liberties: Set[Point] = set()
        stack = [(r, c)]
        while stack:
            p = stack.pop()
            if p in visited:
                continue
            visited.add(p)
            for nr, nc in self.neighbors(*p):
                v = self._cells[nr * self.size + nc]
                if v is EMPTY:
                    liberties.add((nr, nc))
                elif v == color and (nr, nc) not in visited:
                    stack.append((nr, nc))
        return visited, liberties

    def stones(self) -> Iterator[Tuple[Point, str]]:
        for off, v in enumerate(self._cells):
            if v is not EMPTY:
                yield divmod(off, self.size), v

    def count_stones(self, player: Optional[str] = None) -> int:
        return sum(1 for _, v in self.stones() if player is None or v == player)

    # utility for tests
    def pretty(self):
        rows = []
        for r in range(self.size):
            row = self._cells[r * self.size:(r + 1) * self.size]
            rows.append(''.join('.' if x is None else x for x in row))
        return '\n'.join(rows)

    def get_board(self) -> List[List[Optional[str]]]:
        """Return a copy of the grid as a list of rows with None/player tags."""
        return [self._cells[r * self.size:(r + 1) * self.size] for r in range(self.size)]


def new_board(size: int = DEFAULT_SIZE) -> Board:
    return Board(size=size)
