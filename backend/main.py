"""
Headless driver for the snake simulation.

Runs one round: asks a player for a direction once per tick, feeds it to
SnakeGame, and ticks until the snake dies, fills the board, or the round
limit is reached. Nothing is drawn; the board can be logged at DEBUG.
"""
import argparse
import json
import logging
import random
import time
import uuid
from typing import Any, Dict, List, Optional

from config import GameConfig, load_config
from domain import SnakeGame
from domain.constants import START_FOOD, START_HEAD
from domain.game_state import GameState
from players import AVAILABLE_PLAYERS, Player, RandomPlayer, ScriptedPlayer, get_player_class

logger = logging.getLogger(__name__)


def _fits(cell, width: int, height: int) -> bool:
    return cell[0] < width and cell[1] < height


def create_game(config: GameConfig, rng: Optional[random.Random] = None) -> SnakeGame:
    """
    Build a SnakeGame for the configured board.

    The fixed start cells are used when they fit on the board; otherwise the
    head starts in the middle and the food is placed after the first move.
    """
    head = START_HEAD if _fits(START_HEAD, config.width, config.height) else (
        config.width // 2, config.height // 2
    )
    food = START_FOOD if _fits(START_FOOD, config.width, config.height) and START_FOOD != head else None
    return SnakeGame(body=[head], food=food, rng=rng)


def observe(game: SnakeGame, config: GameConfig) -> GameState:
    """Snapshot for the player; before the first tick the board size comes from config."""
    state = game.get_current_state()
    if state.width is None:
        state.width, state.height = config.width, config.height
    return state


def serialize_history(history: List[GameState]) -> List[Dict[str, Any]]:
    """
    Convert the list of GameState objects to a JSON-serializable list of dicts.
    """
    return [state.to_dict() for state in history]


def run_simulation(
    config: GameConfig,
    player: Optional[Player] = None,
    include_history: bool = False,
) -> Dict[str, Any]:
    """
    Runs a single round of the game.

    Args:
        config: board size, round limit, seed and tick delay
        player: where directions come from; a seeded RandomPlayer by default
        include_history: add every per-tick snapshot to the summary

    Returns:
        A dictionary summarizing the round (score, length, rounds, death_reason, result).
    """
    game_id = str(uuid.uuid4())
    game_rng = random.Random(config.seed)
    if player is None:
        player = RandomPlayer(random.Random(None if config.seed is None else config.seed + 1))

    game = create_game(config, rng=game_rng)
    game.record_history()
    logger.info(
        "Game %s: %dx%d board, player=%s, seed=%s",
        game_id, config.width, config.height, getattr(player, 'name', type(player).__name__), config.seed,
    )

    ticks = 0
    while not game.game_over and ticks < config.max_rounds:
        state = observe(game, config)
        move = player.get_move(state)
        if not game.set_direction(move):
            logger.debug("Tick %d: reversal to %s ignored", ticks, move)

        outcome = game.tick(config.width, config.height)
        ticks += 1
        game.record_history()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tick %d: %s -> %s\n%s", ticks, move, outcome, game.get_current_state().print_board())

        if config.tick_seconds:
            time.sleep(config.tick_seconds)

    if not game.game_over:
        logger.info("Game %s: reached max rounds (%d)", game_id, config.max_rounds)

    final_state = game.get_current_state()
    summary = {
        "game_id": game_id,
        "score": game.score,
        "length": len(game.body),
        "rounds": game.round_number,
        "ticks": ticks,
        "game_over": game.game_over,
        "death_reason": game.death_reason,
        "result": game.result,
        "final_state": final_state.to_dict(),
    }
    if include_history:
        summary["history"] = serialize_history(game.history)
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a headless round of Snake and print a JSON summary."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Width of the board (default: SNAKE_BOARD_WIDTH or 20)")
    parser.add_argument("--height", type=int, default=None,
                        help="Height of the board (default: SNAKE_BOARD_HEIGHT or 20)")
    parser.add_argument("--max_rounds", type=int, default=None,
                        help="Maximum number of ticks (default: SNAKE_MAX_ROUNDS or 500)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the random player")
    parser.add_argument("--tick_seconds", type=float, default=None,
                        help="Delay between ticks in seconds")
    parser.add_argument("--player", choices=AVAILABLE_PLAYERS, default="random",
                        help="Where moves come from")
    parser.add_argument("--moves", type=str, nargs='*', default=[],
                        help="Moves for the scripted player (e.g. UP UP LEFT)")
    parser.add_argument("--history", action="store_true",
                        help="Include every tick's state in the output")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log every tick with the board")
    return parser


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config()
        for field in ("width", "height", "max_rounds", "seed", "tick_seconds"):
            value = getattr(args, field)
            if value is not None:
                setattr(config, field, value)
        config.validate()

        player_cls = get_player_class(args.player)
        if args.moves and player_cls is not ScriptedPlayer:
            raise ValueError(f"--moves only applies to --player scripted, not {args.player!r}")
        # None lets run_simulation seed the random player from config
        player = player_cls(args.moves) if player_cls is ScriptedPlayer else None
    except ValueError as e:
        raise SystemExit(f"error: {e}")

    result = run_simulation(config, player=player, include_history=args.history)

    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
