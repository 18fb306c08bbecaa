# console.py
# Text front-end: draws the board, reads "row col" lines and runs games
# until the players decline a rematch.
import argparse
from typing import Callable, Dict, Iterable, Optional, Tuple

from trigo import capture_engine, goban_model, session as session_mod
from trigo.goban_model import Board, IllegalMove
from trigo.session import GameSession, SessionConfig

DEBUG = False

CLEAR_SCREEN = "\033[2J\033[H"
MSG_INVALID_INPUT = "Invalid input. Please enter two integers separated by a space."
MSG_INVALID_MOVE = "Invalid move, the spot is either occupied or out of bounds."
MSG_CAPTURED = "A group was captured!"
MSG_GAME_OVER = "Game Over!"
MSG_PLAY_AGAIN = "Do you want to play another game? (y/n)"


class InvalidCoordinateInput(ValueError): pass


def render_board(board: Board) -> str:
    n = board.size
    header = "   " + " ".join(str(c) for c in range(n))
    border = "  +" + "-" * (2 * n - 1) + "+"
    lines = [header, border]
    for r, row in enumerate(board.get_board()):
        cells = " ".join('.' if v is None else v for v in row)
        lines.append(f"{r} |{cells}|")
    lines.append(border)
    return "\n".join(lines)


def render_scores(players: Iterable[str], scores: Dict[str, int]) -> str:
    lines = ["Scores:"]
    for p in players:
        lines.append(f"Player {p}: {scores.get(p, 0)} points")
    return "\n".join(lines)


def parse_coordinates(text: str) -> Tuple[int, int]:
    """Parse 'row col' into two ints, raise InvalidCoordinateInput otherwise."""
    tokens = (text or "").split()
    if len(tokens) != 2:
        raise InvalidCoordinateInput(f"expected 2 numbers, got {len(tokens)}")
    try:
        return int(tokens[0]), int(tokens[1])
    except ValueError as e:
        raise InvalidCoordinateInput(str(e)) from e


class ConsoleGame:
    """
    Drives one GameSession from a line reader.
    read/out default to input/print; tests pass scripted callables.
    """

    def __init__(self, session: GameSession, read: Callable[[str], str] = input,
                 out: Callable[..., None] = print, clear_screen: bool = False):
        self.session = session
        self.read = read
        self.out = out
        self.clear_screen = clear_screen

    def show(self):
        if self.clear_screen:
            self.out(CLEAR_SCREEN, end="")
        self.out(render_board(self.session.board))
        self.out()
        self.out(render_scores(self.session.players, self.session.scores))
        self.out()

    def play_turn(self):
        s = self.session
        player = s.current_player
        self.out(f"Player {player}'s turn!")
        last = s.board.size - 1
        prompt = f"Enter row (0-{last}) and column (0-{last}) separated by a space: "
        while True:
            line = self.read(prompt)
            try:
                row, col = parse_coordinates(line)
            except InvalidCoordinateInput as e:
                if DEBUG:
                    print("[ConsoleGame] InvalidCoordinateInput:", e)
                self.out(MSG_INVALID_INPUT)
                continue
            try:
                outcome = s.play(row, col)
            except IllegalMove as e:
                if DEBUG:
                    print("[ConsoleGame] IllegalMove:", e)
                self.out(MSG_INVALID_MOVE)
                continue
            if outcome.capture.captured:
                self.out(MSG_CAPTURED)
            return outcome

    def run(self):
        while not self.session.is_over:
            self.show()
            self.play_turn()
        self.show()
        self.out(MSG_GAME_OVER)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trigo", description="Three-player capture Go in the terminal.")
    parser.add_argument("--size", type=int, default=goban_model.DEFAULT_SIZE, help="board size (default: 9)")
    parser.add_argument("--seed", type=int, default=None, help="seed for the turn order shuffle")
    parser.add_argument("--no-shuffle", action="store_true", help="keep the X, O, Y turn order")
    parser.add_argument("--clear", action="store_true", help="clear the screen before drawing the board")
    parser.add_argument("--debug", action="store_true", help="print engine trace lines")
    return parser


def set_debug(enabled: bool):
    global DEBUG
    DEBUG = enabled
    goban_model.DEBUG = enabled
    capture_engine.DEBUG = enabled
    session_mod.DEBUG = enabled


def main(argv: Optional[list] = None, read: Callable[[str], str] = input, out: Callable[..., None] = print) -> int:
    args = build_parser().parse_args(argv)
    set_debug(args.debug)
    seed = args.seed
    try:
        while True:
            config = SessionConfig(board_size=args.size, shuffle_players=not args.no_shuffle, seed=seed)
            ConsoleGame(GameSession(config), read=read, out=out, clear_screen=args.clear).run()
            if seed is not None:
                # next game gets a different order
                seed += 1
            out(MSG_PLAY_AGAIN)
            if read("").strip().lower() != "y":
                break
    except (EOFError, KeyboardInterrupt):
        out()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
