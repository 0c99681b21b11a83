# Command line entry point: parses flags, sets up logging and plays one game.
import argparse
import logging
import sys

from guess_game.config import (DEBUG, EXIT_FAILURE, EXIT_INTERRUPTED,
                               LOG_FORMAT)
from guess_game.game import GuessingGame, InputStreamFailure

log = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="guess-game",
        description="Guess the secret number between 1 and 100.")
    parser.add_argument('--debug', action='store_true', default=DEBUG,
                        help='Reveal the secret number and log debug output')
    return parser


def setup_logging(debug):
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO,
                        format=LOG_FORMAT)
# Entry point


def main(argv=None, stdin=None, stdout=None, rng=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    game = GuessingGame(stdin=stdin, stdout=stdout, rng=rng,
                        debug_reveal=args.debug)
    try:
        return game.run()
    except InputStreamFailure as e:
        log.error(f"Game aborted: {e}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        game.say("")
        log.info("Game interrupted.")
        return EXIT_INTERRUPTED


# Start the game
if __name__ == "__main__":
    sys.exit(main())
