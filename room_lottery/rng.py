import random
from typing import Optional


def get_rng(seed: Optional[int] = None) -> random.Random:
    """
    Returns an isolated random source for a single request.

    Same seed always produces the same shuffles, so a draw can be replayed.
    """
    return random.Random(seed)
