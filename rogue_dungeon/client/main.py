"""Client entry point."""

import argparse
import logging
import random

from blessed import Terminal

from ..common.constants import (
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_ROOMS,
    ROOM_MAX_SIZE,
    ROOM_MIN_SIZE,
)
from ..game.loop import run
from ..game.state import new_game
from ..mapgen import DungeonConfig
from .log_buffer import LogBuffer
from .terminal_ui import TerminalUI


def setup_logging(log_file: str | None, log_buffer: LogBuffer) -> None:
    """Configure logging with in-memory buffer and optional file output."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # The status area only has room for the interesting lines
    log_buffer.setLevel(logging.INFO)
    root.addHandler(log_buffer)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        root.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rogue Dungeon")
    parser.add_argument("--seed", type=int, help="Random seed (default: random)")
    parser.add_argument("--width", type=int, default=MAP_WIDTH, help="Map width")
    parser.add_argument("--height", type=int, default=MAP_HEIGHT, help="Map height")
    parser.add_argument(
        "--max-rooms", type=int, default=MAX_ROOMS, help="Room placement attempts"
    )
    parser.add_argument(
        "--room-min-size", type=int, default=ROOM_MIN_SIZE, help="Minimum room side"
    )
    parser.add_argument(
        "--room-max-size", type=int, default=ROOM_MAX_SIZE, help="Maximum room side"
    )
    parser.add_argument("--log", help="Log file path (in addition to in-memory log buffer)")
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the generated map and exit instead of starting the game",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = DungeonConfig(
        width=args.width,
        height=args.height,
        max_rooms=args.max_rooms,
        room_min_size=args.room_min_size,
        room_max_size=args.room_max_size,
    )
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    log_buffer = LogBuffer(maxlen=200)
    setup_logging(args.log, log_buffer)

    seed = args.seed if args.seed is not None else random.randrange(2**32)
    state = new_game(config, random.Random(seed), seed=seed)

    if args.dump:
        print(state.grid.render_ascii())
        print(f"Seed: {seed} | Spawn: ({state.player.x}, {state.player.y})")
        return

    term = Terminal()
    ui = TerminalUI(term, log_buffer=log_buffer, seed=seed)
    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            run(state, ui)
    except KeyboardInterrupt:
        pass
    finally:
        ui.cleanup()


if __name__ == "__main__":
    main()
