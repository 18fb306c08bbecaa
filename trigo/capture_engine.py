# capture_engine.py
from collections import namedtuple
from typing import Dict, List, Set

from trigo.goban_model import Board, Point, OutOfBounds

DEBUG = False

# captured_groups_by_player: owner of the removed group -> number of groups removed
CaptureResult = namedtuple('CaptureResult', ['captured', 'captured_groups_by_player', 'captured_stones'])


class CaptureEngine:
    """
    Removes every opposing group left without liberties after a placement.

    The whole board is scanned in row-major order, not only the neighbours of
    the placed stone, so one resolution is exhaustive. A dead group is removed
    as soon as it is found; groups examined later see the freed cells. The
    placing player's own groups are never examined, so a self-surrounding
    move stays on the board.
    """

    def _remove_group(self, board: Board, group: Set[Point]) -> List[Point]:
        for (r, c) in group:
            board.remove(r, c)
        return sorted(group)

    def resolve(self, board: Board, placed_row: int, placed_col: int, placing_player: str) -> CaptureResult:
        if not board.in_bounds(placed_row, placed_col):
            raise OutOfBounds(f"({placed_row}, {placed_col}) is outside the board")
        examined: Set[Point] = set()
        groups_by_player: Dict[str, int] = {}
        removed: List[Point] = []
        for r in range(board.size):
            for c in range(board.size):
                owner = board.get(r, c)
                if owner is None or owner == placing_player or (r, c) in examined:
                    continue
                stones, libs = board.group_and_liberties(r, c)
                examined |= stones
                if libs:
                    continue
                removed.extend(self._remove_group(board, stones))
                # one increment per group, whatever its size
                groups_by_player[owner] = groups_by_player.get(owner, 0) + 1
                if DEBUG:
                    print(f"[CaptureEngine] {placing_player} captured {len(stones)} {owner} stone(s) at {min(stones)}")
        return CaptureResult(
            captured=bool(groups_by_player),
            captured_groups_by_player=groups_by_player,
            captured_stones=sorted(removed),
        )


def resolve_captures(board: Board, placed_row: int, placed_col: int, placing_player: str) -> CaptureResult:
    return CaptureEngine().resolve(board, placed_row, placed_col, placing_player)
