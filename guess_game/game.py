"""
Guess the Number - interactive game loop.

One session: draw a secret in [SECRET_MIN, SECRET_MAX], then read one line
per turn until the player hits it. Bad input is shrugged off and re-prompted;
losing the input stream ends the session with InputStreamFailure.
"""

import logging
import random
import re
import sys

from guess_game import feedback, messages
from guess_game.config import (EXIT_SUCCESS, GUESS_MAX, GUESS_MIN,
                               SECRET_MAX, SECRET_MIN)

log = logging.getLogger(__name__)

GUESS_PATTERN = re.compile(r"\+?[0-9]+")


# --- Errors ---

class GameError(Exception):
    pass


class InvalidGuessFormat(GameError, ValueError):
    def __init__(self, text):
        super().__init__(f"not a valid guess: {text!r}")
        self.text = text


class InputStreamFailure(GameError):
    pass


# --- Parsing ---

def parse_guess(text):
    text = text.strip()
    if not GUESS_PATTERN.fullmatch(text):
        raise InvalidGuessFormat(text)
    # zero padding is fine, more digits than GUESS_MAX has never is
    digits = text.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(GUESS_MAX)):
        raise InvalidGuessFormat(text)
    value = int(digits)
    if value < GUESS_MIN or value > GUESS_MAX:
        raise InvalidGuessFormat(text)
    return value


# --- Main Game ---

class GuessingGame:
    def __init__(self, stdin=None, stdout=None, rng=None, debug_reveal=False):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.debug_reveal = debug_reveal

        # State
        self.secret = None
        self.turns = 0
        self.history = []

    def say(self, text, end="\n"):
        self.stdout.write(text + end)

    def flush(self):
        # best effort, a failed flush never ends the game
        try:
            self.stdout.flush()
        except (OSError, ValueError):
            log.debug("Flushing output failed", exc_info=True)

    def read_line(self):
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputStreamFailure(f"failed reading a guess: {e}") from e
        if not line:
            raise InputStreamFailure("input stream closed before the number was guessed")
        return line

    def start(self):
        self.say(messages.pick(messages.BANNERS, self.rng))
        self.secret = self.rng.randint(SECRET_MIN, SECRET_MAX)
        self.turns = 0
        self.history = []
        log.info("New game started.")
        log.debug(f"Target number: {self.secret}")
        if self.debug_reveal:
            self.say(f"The secret number is {self.secret}.")

    def take_turn(self):
        """Play one prompt/read/feedback round. Returns True once the secret is found."""
        self.say(messages.pick(messages.PROMPTS, self.rng), end="")
        self.flush()
        text = self.read_line()
        try:
            guess = parse_guess(text)
        except InvalidGuessFormat as e:
            log.debug(f"Rejected input: {e.text!r}")
            self.say(messages.pick(messages.INVALID, self.rng))
            return False

        if self.debug_reveal:
            self.say(f"Your guess was {guess}.")

        self.turns += 1
        bucket = feedback.classify(guess, self.secret)
        self.history.append((guess, bucket))
        log.debug(f"Attempt {self.turns}: {guess} -> {bucket}")

        if bucket == feedback.EQUAL:
            return True
        self.say(messages.pick(messages.HINTS[bucket], self.rng))
        return False

    def finish(self):
        guesses = "guess" if self.turns == 1 else "guesses"
        self.say(messages.pick(messages.VICTORY, self.rng))
        self.say(f"You found {self.secret} in {self.turns} {guesses}.")
        self.say(messages.pick(messages.CLOSING, self.rng))
        self.flush()
        log.info(f"Game won in {self.turns} {guesses}.")

    def run(self):
        self.start()
        while not self.take_turn():
            pass
        self.finish()
        return EXIT_SUCCESS
