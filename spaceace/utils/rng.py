"""Random sources: a seedable RNG for generation and a dice source selector."""

import logging
import os
import random

logger = logging.getLogger(__name__)

SECURE_SOURCE = "Cryptographically secure random (os.urandom)"
PSEUDO_SOURCE = "Pseudorandom (random.Random) - not cryptographically secure"


class GameRNG:
    """Wrapper around Python's random.Random for deterministic generation.

    All randomness in galaxy generation goes through this class so the same
    seed always produces the same map.
    """

    def __init__(self, seed: int):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive."""
        return self.rng.randint(a, b)

    def choice(self, seq):
        """Choose random element from non-empty sequence."""
        return self.rng.choice(seq)

    def sample(self, seq, k: int) -> list:
        """Choose k unique elements from a sequence.

        Args:
            seq: Sequence to sample from
            k: Number of elements (0 <= k <= len(seq))

        Returns:
            New list of k elements in selection order
        """
        return self.rng.sample(list(seq), k)

    def shuffle(self, seq):
        """Shuffle sequence in place."""
        self.rng.shuffle(seq)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self.rng.random()

    def get_state(self):
        """Get the current state of the RNG for serialization.

        Returns:
            RNG state tuple that can be used with set_state
        """
        return self.rng.getstate()

    def set_state(self, state):
        """Set the state of the RNG for deserialization.

        Args:
            state: RNG state tuple from get_state
        """
        self.rng.setstate(state)


def secure_random_available() -> bool:
    """Check whether the OS exposes a cryptographic randomness source."""
    try:
        os.urandom(1)
    except NotImplementedError:
        return False
    return True


def select_dice_source() -> tuple[random.Random, str]:
    """Pick the best available randomness source for dice.

    Prefers ``random.SystemRandom`` (backed by ``os.urandom``) and falls back
    to a plain ``random.Random`` when the OS has no entropy source. The
    fallback is logged so it shows up in diagnostics.

    Returns:
        Tuple of (random source, human-readable source description)
    """
    if secure_random_available():
        return random.SystemRandom(), SECURE_SOURCE
    logger.warning("Secure randomness not available, falling back to random.Random")
    return random.Random(), PSEUDO_SOURCE
