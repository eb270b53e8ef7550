"""
computer.py - Automated player backed by the brute force search

The computer player searches the whole remaining game tree before every move,
so it never misses a forced win and avoids a forced loss when it can.
"""

from fourwin.ai.moves import MoveGenerator
from fourwin.ai.brute_force import best_move
from fourwin.debug import debug
from fourwin.game.board import Board, BoardError
from fourwin.game.handler import GamePlayer
from fourwin.utils import Player, Position


class PlayerInvariantError(RuntimeError):
    """The computer player produced a move the board refused."""


class ComputerPlayer(GamePlayer):
    """
    A player that picks the search's best move.

    Root candidates are deduplicated by symmetry, every deeper level uses
    ``move_generator``. Each decision gets its own transposition cache.
    """

    def __init__(self, player: Player,
                 move_generator: MoveGenerator = MoveGenerator.EXHAUSTIVE,
                 root_generator: MoveGenerator = MoveGenerator.SYMMETRIC):
        """
        Args:
            player: The player this computer moves for
            move_generator: Strategy used below the root
            root_generator: Strategy producing the candidate moves
        """
        super().__init__(player)
        self.move_generator = move_generator
        self.root_generator = root_generator

    def make_move(self, board: Board) -> Position:
        """
        Get the best move for this player.

        Args:
            board: The current board; it is not modified

        Returns:
            The chosen position

        Raises:
            PlayerInvariantError: If the board has no empty cell
        """
        scratch = board.copy()
        debug.start_timer("computer_move")
        try:
            pos, result = best_move(scratch, self.player, self.move_generator, self.root_generator)
        except ValueError as err:
            raise PlayerInvariantError(
                f"The computer player is expected to do a move, but no moves available.\n{board}"
            ) from err
        debug.end_timer("computer_move", "computer")
        debug.info(f"{self.player.name} plays {pos}, expecting {result.name}", "computer")
        return pos

    def invalid_move(self, board: Board, pos: Position, error: BoardError):
        raise PlayerInvariantError(
            f"Computer player {self.player.name} proposed {pos}, which was rejected: {error}"
        ) from error
