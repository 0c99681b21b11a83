import io
import random


class FixedRandom(random.Random):
    """Random source whose randint always lands on a chosen secret."""
    secret = 50

    def randint(self, a, b):
        return self.secret


def fixed_rng(secret):
    rng = FixedRandom(0)
    rng.secret = secret
    return rng


def lines(*guesses):
    return io.StringIO("".join(g + "\n" for g in guesses))


def first_entry(pool, rng=None):
    return pool[0]
