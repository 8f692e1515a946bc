# rental_api/uploads/filenames.py
import random
import time
from typing import Optional
from .validator import file_extension

RANDOM_SUFFIX_MAX = 10 ** 9

# OS entropy, never seeded, so concurrent workers do not share a sequence
_system_random = random.SystemRandom()


def generate_filename(
    original_filename: str,
    now: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Build ``<ms-timestamp>-<random>.<ext>`` for a stored upload.

    The extension is taken from ``original_filename`` and lower-cased; it is
    not re-validated here.
    """
    timestamp = int((time.time() if now is None else now) * 1000)
    suffix = (rng or _system_random).randint(0, RANDOM_SUFFIX_MAX)
    return f"{timestamp}-{suffix}.{file_extension(original_filename)}"
