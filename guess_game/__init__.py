"""Guess the Number - a small command line guessing game."""

from guess_game.feedback import classify
from guess_game.game import (GameError, GuessingGame, InputStreamFailure,
                             InvalidGuessFormat, parse_guess)

__version__ = "1.0.0"
