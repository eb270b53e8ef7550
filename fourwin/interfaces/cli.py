"""
cli.py - Command-line interface for Four Win Three Lose

This module provides the terminal front end: a board visualizer, a human
player reading moves from stdin, and a CLI to play games, solve or inspect
positions and benchmark the move generators.
"""

import argparse
import sys
import time
from typing import Callable, Dict, List, Optional

from fourwin.ai.computer import ComputerPlayer
from fourwin.ai.moves import MoveGenerator
from fourwin.ai.brute_force import brute_force_game_state
from fourwin.debug import DebugLevel, debug
from fourwin.game.board import Board, BoardError
from fourwin.game.handler import BoardVisualizer, GameHandler, GamePlayer
from fourwin.game.rules import game_state, loser, winner
from fourwin.utils import (GameResult, Player, Position, format_positions,
                           parse_cells, parse_position)

RESULT_MESSAGES = {
    GameResult.DRAW: "Draw! Nobody wins.",
    GameResult.PLAYER_ONE_WIN: "Player One wins!",
    GameResult.PLAYER_TWO_WIN: "Player Two wins!",
}

PLAYER_NAMES = {
    Player.ONE: "player one",
    Player.TWO: "player two",
}

# Positions the benchmark cycles through, row by row (0 empty, 1 X, 2 O).
BENCHMARK_SCENARIOS = [
    "2,2,1,1,1,1,2,2,0,0,0,0,0,0,0,0",
    "1,0,0,2,2,0,0,2,1,0,0,1,1,0,0,2",
    "1,0,0,2,0,1,2,0,0,1,2,0,2,0,0,1",
    "1,0,0,2,2,2,0,0,0,0,0,0,1,1,2,1",
    "1,0,0,2,2,2,0,1,0,0,0,0,1,2,0,1",
    "2,1,0,1,0,1,0,2,0,0,0,0,1,2,0,2",
]


class TerminalVisualizer(BoardVisualizer):
    """Prints the board and game messages to stdout."""

    def __init__(self, out: Callable[[str], None] = print):
        self.out = out

    def draw_field(self, board: Board):
        self.out(board.render())

    def players_turn(self, player: Player):
        self.out(f"\nIt's {PLAYER_NAMES[player]}'s turn...\n")

    def display_result(self, result: GameResult):
        self.out(RESULT_MESSAGES[result])


class HumanTerminalPlayer(GamePlayer):
    """A human typing moves as 'x y'."""

    def __init__(self, player: Player,
                 input_func: Callable[[str], str] = input,
                 out: Callable[[str], None] = print):
        super().__init__(player)
        self.input_func = input_func
        self.out = out

    def make_move(self, board: Board) -> Position:
        """Read input until it parses as a position."""
        self.out("Please give a valid move of pattern 'x y':")
        while True:
            try:
                return parse_position(self.input_func("> "))
            except ValueError:
                self.out("Your inputs needs to have the form 'x y'. Try again:")

    def invalid_move(self, board: Board, pos: Position, error: BoardError):
        moves = MoveGenerator.EXHAUSTIVE(board)
        self.out(f"Can't make the move {pos}: {error} Try again. "
                 f"Possible moves: {format_positions(moves)}")


def parse_player(name: str) -> Player:
    """Map 'one'/'two' (or 1/2) to a Player."""
    lookup = {"one": Player.ONE, "1": Player.ONE, "two": Player.TWO, "2": Player.TWO}
    try:
        return lookup[name.lower()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"Unknown player '{name}', use one or two") from None


def board_from_string(text: Optional[str]) -> Board:
    """Build a board from a position string; None gives an empty board."""
    if not text:
        return Board()
    return Board.from_flat(parse_cells(text))


def next_player(board: Board) -> Player:
    """Player one moves first, so equal mark counts mean it is their turn."""
    ones = int((board.grid == Player.ONE.value).sum())
    twos = int((board.grid == Player.TWO.value).sum())
    return Player.ONE if ones == twos else Player.TWO


class SimpleCLI:
    """Simple command-line interface for Four Win Three Lose."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 out: Callable[[str], None] = print):
        self.args = None
        self.input_func = input_func
        self.out = out

    def build_parser(self) -> argparse.ArgumentParser:
        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--debug', action='store_true', help='Enable debug output')
        common.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging verbosity')
        common.add_argument('--log-file', default=None, help='Also write the log to this file')

        parser = argparse.ArgumentParser(
            description='Four Win Three Lose: four in a row wins, three in a row loses.')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', parents=[common], help='Play a game in the terminal')
        play_parser.add_argument('--mode', choices=['hvh', 'cvh', 'hvc'], default='hvc',
                                 help='hvh: two humans, cvh: computer first, hvc: human first')
        play_parser.add_argument('--generator', type=MoveGenerator, choices=list(MoveGenerator),
                                 default=MoveGenerator.EXHAUSTIVE,
                                 help='Move generator used by the computer below the root')

        solve_parser = subparsers.add_parser('solve', parents=[common], help='Solve a position')
        solve_parser.add_argument('--position', type=str, default=None,
                                  help='16 comma separated cells (0 empty, 1 X, 2 O), row by row')
        solve_parser.add_argument('--generator', type=MoveGenerator, choices=list(MoveGenerator),
                                  default=MoveGenerator.HYBRID, help='Move generator')
        solve_parser.add_argument('--perspective', type=parse_player, default=None,
                                  help='Player whose result is maximized (default: the mover)')
        solve_parser.add_argument('--mover', type=parse_player, default=None,
                                  help='Player to move (default: from the mark counts)')

        test_parser = subparsers.add_parser('test', parents=[common], help='Inspect a position')
        test_parser.add_argument('--position', type=str, required=True,
                                 help='16 comma separated cells (0 empty, 1 X, 2 O), row by row')

        benchmark_parser = subparsers.add_parser('benchmark', parents=[common],
                                                 help='Benchmark the move generators')
        benchmark_parser.add_argument('--iterations', type=int, default=len(BENCHMARK_SCENARIOS),
                                      help='Number of positions to solve per generator')
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)
        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)
        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if self.args is None:
            self.parse_args(argv)

        commands = {
            'play': self.play_game,
            'solve': self.solve_position,
            'test': self.test_position,
            'benchmark': self.benchmark,
        }
        command = commands.get(self.args.command)
        if command is None:
            self.out("Please specify a command. Use --help for options.")
            return 1
        try:
            return command()
        except (ValueError, BoardError) as err:
            debug.error(str(err), "cli")
            self.out(f"Error: {err}")
            return 2
        except EOFError:
            debug.warning("Input closed before the command finished", "cli")
            self.out("\nInput closed, stopping.")
            return 3

    def make_player(self, player: Player, computer: bool) -> GamePlayer:
        if computer:
            return ComputerPlayer(player, move_generator=self.args.generator)
        return HumanTerminalPlayer(player, self.input_func, self.out)

    def play_game(self) -> int:
        """Play a game in the terminal."""
        mode = self.args.mode
        player_one = self.make_player(Player.ONE, computer=(mode == 'cvh'))
        player_two = self.make_player(Player.TWO, computer=(mode == 'hvc'))
        self.out("Four in a row wins, three in a row loses. Enter moves as 'x y'.")
        handler = GameHandler(player_one, player_two, TerminalVisualizer(self.out))
        handler.play()
        return 0

    def solve_position(self) -> int:
        """Solve a position and print the result."""
        board = board_from_string(self.args.position)
        mover = self.args.mover or next_player(board)
        perspective = self.args.perspective or mover
        if board.count_occupied() < 6:
            self.out("Solving a sparse board searches a large tree, this can take a long time.")
        self.out(board.render())
        start = time.perf_counter()
        result = brute_force_game_state(board, perspective, mover, self.args.generator)
        elapsed = time.perf_counter() - start
        self.out(f"Evaluated for {PLAYER_NAMES[perspective]}, {PLAYER_NAMES[mover]} to move "
                 f"({self.args.generator}): {RESULT_MESSAGES[result]}")
        self.out(f"Solved in {elapsed:.3f} seconds")
        return 0

    def test_position(self) -> int:
        """Show a position with its terminal patterns and candidate moves."""
        board = board_from_string(self.args.position)
        self.out("Loaded position:")
        self.out(board.render())
        won = winner(board)
        lost = loser(board)
        result = game_state(board)
        self.out(f"Occupied cells: {board.count_occupied()}")
        self.out(f"Four in a row: {PLAYER_NAMES[won] if won else 'none'}")
        self.out(f"Three in a row: {PLAYER_NAMES[lost] if lost else 'none'}")
        self.out(f"Result: {RESULT_MESSAGES[result] if result else 'in progress'}")
        for generator in MoveGenerator:
            self.out(f"{generator} moves: {format_positions(generator(board))}")
        return 0

    def benchmark(self) -> int:
        """Time the search with each move generator over the scenario set."""
        timings: Dict[MoveGenerator, float] = {}
        for generator in MoveGenerator:
            start = time.perf_counter()
            for i in range(self.args.iterations):
                board = board_from_string(BENCHMARK_SCENARIOS[i % len(BENCHMARK_SCENARIOS)])
                brute_force_game_state(board, Player.ONE, Player.ONE, generator)
            timings[generator] = time.perf_counter() - start

        self.out(f"Solved {self.args.iterations} positions per generator:")
        for generator, elapsed in timings.items():
            per_position = elapsed / max(1, self.args.iterations) * 1000
            self.out(f"  {str(generator):<10s} {elapsed:8.3f} s total, {per_position:8.2f} ms per position")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
