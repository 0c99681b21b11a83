"""
Flavor text for the guessing game.

Every pool is a plain list; the game picks one entry uniformly at random
with pick(). Wording is free to change, the pool keys are not.
"""

import random

from guess_game import feedback
from guess_game.config import SECRET_MAX, SECRET_MIN

BANNERS = [
    "====================================================\n"
    f"I'm thinking of a number between {SECRET_MIN} and {SECRET_MAX} inclusive,\n"
    "\t\tcan you guess what it is?",
    "====================================================\n"
    f"A number between {SECRET_MIN} and {SECRET_MAX} is hiding somewhere.\n"
    "\t\tFind it!",
    "====================================================\n"
    f"Pick a number, any number... as long as it's {SECRET_MIN} to {SECRET_MAX}.\n"
    "\t\tI've already picked mine.",
]

PROMPTS = [
    "Enter your guess: ",
    "Your guess: ",
    "Take a shot: ",
    "What's the number? ",
]

INVALID = [
    "Please make a valid guess",
    "That's not a number I can work with. Try again!",
    "Numbers only, please.",
    "Hmm, that doesn't look like a guess.",
]

VICTORY = [
    "You Got IT!! You Win! Congrats 🎉",
    "Bullseye! That's the number!",
    "Correct! You read my mind.",
]

CLOSING = [
    "==================== GAME OVER ====================",
    "=============== THANKS FOR PLAYING ================",
]

HINTS = {
    feedback.LESS_NEAR: [
        "too small! ...but only just.",
        "So close! Nudge it up a little.",
        "Warm! A tiny bit higher.",
    ],
    feedback.LESS_MID: [
        "too small!",
        "Higher. You're in the neighbourhood.",
        "Not bad, but aim higher.",
    ],
    feedback.LESS_FAR: [
        "Way too small!",
        "Brrr, freezing. Go much higher.",
        "Not even close. Think bigger!",
    ],
    feedback.GREATER_NEAR: [
        "TOO BIG! ...but only just.",
        "So close! Nudge it down a little.",
        "Warm! A tiny bit lower.",
    ],
    feedback.GREATER_MID: [
        "TOO BIG!",
        "Lower. You're in the neighbourhood.",
        "Not bad, but aim lower.",
    ],
    feedback.GREATER_FAR: [
        "WAY TOO BIG!",
        "Brrr, freezing. Go much lower.",
        "Not even close. Think smaller!",
    ],
}


def pick(pool, rng=None):
    """Return one entry of pool chosen uniformly at random."""
    return (rng or random).choice(pool)
