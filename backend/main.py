"""
Simulation driver for the snake engine.

Runs one game with an automated player and reports the outcome:

    python backend/main.py --width 12 --height 12 --food-target 5 --player greedy --show
"""

import argparse
import json
import logging
import random
import sys
from typing import Any, Dict, Optional

from domain import GameStatus, InvalidConfiguration, SnakeEngine
from players import AVAILABLE_PLAYERS, Player, get_player_class
from settings import SimulationSettings

logger = logging.getLogger(__name__)


def run_simulation(
    settings: SimulationSettings,
    player: Optional[Player] = None,
    rng: Optional[random.Random] = None,
    show_board: bool = False,
) -> Dict[str, Any]:
    """
    Runs a single game until it is won, lost, or max_rounds is reached.

    Args:
        settings: board size, food target, initial score, round limit and player key
        player: player to use instead of the one named in settings
        rng: random source shared by the engine and the player
        show_board: print the board after every move

    Returns:
        A dictionary summarizing the game (status, score, remaining_food,
        rounds, snake_length, death_reason).

    Raises:
        InvalidConfiguration: if the engine rejects the board settings.
        ValueError: if settings name an unknown player.
    """
    if rng is None:
        rng = random.Random()
    if player is None:
        player = get_player_class(settings.player)(rng=rng)

    engine = SnakeEngine(
        width=settings.width,
        height=settings.height,
        food_target=settings.food_target,
        initial_score=settings.initial_score,
        rng=rng,
    )
    logger.info(
        "Starting %dx%d game: player=%s food_target=%d initial_score=%d",
        settings.width, settings.height, getattr(player, "name", type(player).__name__),
        settings.food_target, settings.initial_score,
    )

    if show_board:
        print(engine.render())

    status = GameStatus.CONTINUE
    while engine.round_number < settings.max_rounds:
        state = engine.snapshot()
        move = player.get_move(state)
        status = engine.move(move)
        logger.debug(
            "Round %d: %s -> %s (score=%d, remaining_food=%d)",
            engine.round_number, move.value, status.value,
            engine.current_score(), engine.remaining_food(),
        )
        if show_board:
            print(engine.render())
        if status.is_terminal:
            break

    if not status.is_terminal:
        logger.info("Reached max rounds (%d) without a result", settings.max_rounds)

    result = {
        "status": status.value,
        "score": engine.current_score(),
        "remaining_food": engine.remaining_food(),
        "rounds": engine.round_number,
        "snake_length": len(engine.snake),
        "death_reason": engine.death_reason,
    }
    logger.info("Game finished: %s", result)
    return result


def main(argv=None):
    settings = SimulationSettings.from_env()

    parser = argparse.ArgumentParser(
        description="Run a snake game with an automated player."
    )
    parser.add_argument("--width", type=int, help=f"Board rows (default {settings.width})")
    parser.add_argument("--height", type=int, help=f"Board columns (default {settings.height})")
    parser.add_argument("--food-target", type=int,
                        help=f"Food to eat to win (default {settings.food_target})")
    parser.add_argument("--initial-score", type=int,
                        help=f"Starting score (default {settings.initial_score})")
    parser.add_argument("--max-rounds", type=int,
                        help=f"Maximum number of moves (default {settings.max_rounds})")
    parser.add_argument("--player", type=str, choices=AVAILABLE_PLAYERS,
                        help=f"Player implementation (default {settings.player})")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible game")
    parser.add_argument("--show", action="store_true",
                        help="Print the board after every move")

    args = parser.parse_args(argv)

    settings = settings.override(
        width=args.width,
        height=args.height,
        food_target=args.food_target,
        initial_score=args.initial_score,
        max_rounds=args.max_rounds,
        player=args.player,
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        result = run_simulation(settings, rng=rng, show_board=args.show)
    except (InvalidConfiguration, ValueError) as e:
        raise SystemExit(f"Error: {e}")

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
