"""
handler.py - The game loop for Four Win Three Lose

GameHandler asks two players for moves in turn, applies them to the board and
keeps a visualizer up to date until the game has a result. Players and
visualizers are plain objects implementing the small interfaces below.
"""

from typing import Optional

from fourwin.debug import debug
from fourwin.game.board import Board, BoardError
from fourwin.game.rules import FourWinGame
from fourwin.utils import GameResult, Player, Position


class GamePlayer:
    """Something that can produce a move for a board."""

    def __init__(self, player: Player):
        self.player = player

    def make_move(self, board: Board) -> Position:
        raise NotImplementedError

    def invalid_move(self, board: Board, pos: Position, error: BoardError):
        """Called when the board rejected the move this player returned."""
        raise NotImplementedError


class BoardVisualizer:
    """Receives everything the game loop wants to show."""

    def draw_field(self, board: Board):
        raise NotImplementedError

    def players_turn(self, player: Player):
        raise NotImplementedError

    def display_result(self, result: GameResult):
        raise NotImplementedError


class GameHandler:
    """Runs one game between two players."""

    def __init__(self, player_one: GamePlayer, player_two: GamePlayer,
                 visualizer: BoardVisualizer, game: Optional[FourWinGame] = None):
        self.players = {Player.ONE: player_one, Player.TWO: player_two}
        self.visualizer = visualizer
        self.game = game if game is not None else FourWinGame()

    @property
    def board(self) -> Board:
        return self.game.board

    def _update_board(self):
        self.visualizer.draw_field(self.game.board)
        if not self.game.is_game_over():
            self.visualizer.players_turn(self.game.current_player)

    def play_turn(self) -> Optional[GameResult]:
        """
        Ask the player to move until the board accepts a move.

        Returns:
            The game result if the move ended the game, otherwise None
        """
        mover = self.game.current_player
        player = self.players[mover]
        while True:
            pos = player.make_move(self.game.board)
            try:
                result = self.game.make_move(pos)
            except BoardError as err:
                debug.warning(f"Player {mover.name} tried to make the move {pos} "
                              f"but got the error: {err}", "game")
                player.invalid_move(self.game.board, pos, err)
                continue
            self._update_board()
            return result

    def play(self) -> GameResult:
        """Play until the game is over and return its result."""
        self._update_board()
        while not self.game.is_game_over():
            self.play_turn()
        debug.info(f"Game finished: {self.game.result.name}", "game")
        self.visualizer.display_result(self.game.result)
        return self.game.result
