"""
brute_force.py - Exhaustive game tree search for Four Win Three Lose

The search plays out every continuation of a board and returns the
game-theoretic result. Results are memoized in a transposition cache keyed
by the exact board content; the cache belongs to one top-level search and is
thrown away with it.

Two players steer the search:

- ``evaluate_for`` is the player whose result the current node maximizes
- ``player_turn`` is the player who places the next mark

Both flip at every level. Passing the same player for both finds that
player's best result; passing opposites finds the result of a player trying
to lose, which proves forced losses.
"""

from typing import Dict, List, Optional, Tuple

from fourwin.ai.moves import MoveGenerator
from fourwin.debug import DebugLevel, debug
from fourwin.game.board import Board
from fourwin.game.rules import loser, winner
from fourwin.utils import GameResult, Player, Position

TranspositionCache = Dict[bytes, GameResult]

ORIGIN = Position(0, 0)


class BruteForceSearch:
    """
    Depth-first minimax over every candidate move with memoized results.

    The board is mutated in place while recursing; every trial move is taken
    back before the next one is tried, also when the recursion raises.
    """

    def __init__(self, move_generator: MoveGenerator = MoveGenerator.EXHAUSTIVE,
                 cache: Optional[TranspositionCache] = None):
        """
        Args:
            move_generator: Strategy producing the moves to branch on
            cache: Transposition cache to fill; a fresh one if None
        """
        self.move_generator = move_generator
        self.cache: TranspositionCache = {} if cache is None else cache
        self.nodes_evaluated = 0
        self.cache_hits = 0

    def game_state(self, board: Board, evaluate_for: Player, player_turn: Player) -> GameResult:
        """
        Resolve a board.

        Args:
            board: Board to solve; it is restored before this returns
            evaluate_for: Player whose result is maximized at this node
            player_turn: Player who moves next

        Returns:
            The result reached under perfect play from both perspectives
        """
        self.nodes_evaluated += 1

        won = winner(board)
        if won is not None:
            return GameResult.from_player(won)
        lost = loser(board)
        if lost is not None:
            return GameResult.from_player(lost).opposite()

        key = board.key()
        cached = self.cache.get(key)
        if cached is not None:
            self.cache_hits += 1
            return cached

        moves = self.move_generator(board)
        if moves is None:
            # Full board without a pattern.
            result = GameResult.DRAW
        else:
            _, result = self.fold(board, moves, evaluate_for, player_turn)

        self.cache[key] = result
        return result

    def fold(self, board: Board, moves: List[Position],
             evaluate_for: Player, player_turn: Player) -> Tuple[Position, GameResult]:
        """
        Try each move and keep the best one for ``evaluate_for``.

        The running best starts at (origin, loss for evaluate_for). A later
        move replaces it when its result is better or equal, and the scan
        stops at the first outright win.

        Returns:
            The chosen move and its result
        """
        favourable = GameResult.from_player(evaluate_for)
        best_pos, best_result = ORIGIN, favourable.opposite()

        for pos in moves:
            board.set(pos, player_turn)
            try:
                result = self.game_state(board, evaluate_for.other(), player_turn.other())
            finally:
                board.force_set(pos, None)

            if debug.is_enabled_for(DebugLevel.TRACE, "search"):
                debug.trace(f"{player_turn.name} at {pos} -> {result.name}", "search")

            if result == favourable:
                return pos, result
            if result.better_eq_for(best_result, evaluate_for):
                best_pos, best_result = pos, result

        return best_pos, best_result


def search(board: Board, evaluate_for: Player, player_turn: Player,
           move_generator: MoveGenerator,
           cache: Optional[TranspositionCache] = None) -> GameResult:
    """
    Resolve a board with the given move generator and cache.

    Args:
        board: Board to solve; mutated during the search and restored after
        evaluate_for: Player whose result is maximized
        player_turn: Player who moves next
        move_generator: Strategy producing candidate moves
        cache: Transposition cache scoped to this search; fresh if None

    Returns:
        The resolved GameResult
    """
    return BruteForceSearch(move_generator, cache).game_state(board, evaluate_for, player_turn)


def brute_force_game_state(board: Board, evaluate_for: Player, player_turn: Player,
                           move_generator: MoveGenerator = MoveGenerator.EXHAUSTIVE) -> GameResult:
    """Solve a board with a fresh cache and log how much work it took."""
    solver = BruteForceSearch(move_generator)
    debug.start_timer("brute_force_game_state")
    result = solver.game_state(board, evaluate_for, player_turn)
    debug.end_timer("brute_force_game_state", "search")
    debug.debug(f"Solved with {move_generator}: {result.name}, "
                f"{solver.nodes_evaluated} nodes, {solver.cache_hits} cache hits, "
                f"{len(solver.cache)} cached boards", "search")
    return result


def best_move(board: Board, player: Player,
              move_generator: MoveGenerator = MoveGenerator.EXHAUSTIVE,
              root_generator: MoveGenerator = MoveGenerator.SYMMETRIC,
              cache: Optional[TranspositionCache] = None) -> Tuple[Position, GameResult]:
    """
    Pick the best move for ``player``, who is also the one to move.

    Candidates come from ``root_generator``; every reply below the root is
    searched with ``move_generator``. One cache is shared by all candidates.

    Raises:
        ValueError: If the board has no empty cell
    """
    candidates = root_generator(board)
    if candidates is None:
        raise ValueError("No moves available on a full board")
    solver = BruteForceSearch(move_generator, cache)
    pos, result = solver.fold(board, candidates, player, player)
    debug.debug(f"Best move for {player.name}: {pos} ({result.name}), "
                f"{solver.nodes_evaluated} nodes", "search")
    return pos, result
