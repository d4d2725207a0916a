import random
import string
import time
from typing import Optional

BASE36_ALPHABET = string.digits + string.ascii_lowercase
DEFAULT_RANDOM_LENGTH = 6

_system_random = random.SystemRandom()


def to_base36(number: int) -> str:
    """
    Renders a non-negative integer in lowercase base36.

    Args:
        number: The integer to convert.

    Returns:
        The base36 representation, e.g. 35 -> 'z'.
    """
    if number < 0:
        raise ValueError("Only non-negative integers can be rendered in base36.")
    if number == 0:
        return '0'

    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return ''.join(reversed(digits))


def _epoch_millis(now: Optional[float]) -> int:
    if now is None:
        now = time.time()
    return int(now * 1000)


def random_base36(length: int = DEFAULT_RANDOM_LENGTH, rng: Optional[random.Random] = None) -> str:
    rng = rng or _system_random
    return ''.join(rng.choice(BASE36_ALPHABET) for _ in range(length))


def generate_unique_part(
    now: Optional[float] = None,
    rng: Optional[random.Random] = None,
    random_length: int = DEFAULT_RANDOM_LENGTH,
) -> str:
    """
    Builds the unique part used when creating prompt page slugs.

    The token is the creation time in epoch milliseconds followed by a
    short random base36 string, e.g. '1729339200000-k3j9xq'.

    Args:
        now: Creation time in seconds since the epoch. Defaults to time.time().
        rng: Random source. Defaults to a SystemRandom instance.
        random_length: Number of random base36 characters.

    Returns:
        The unique token.
    """
    if random_length < 1:
        raise ValueError("random_length must be at least 1.")
    return f"{_epoch_millis(now)}-{random_base36(random_length, rng)}"


def timestamp_token(now: Optional[float] = None, offset_ms: int = 0) -> str:
    """
    Epoch milliseconds in base36, used for universal page slugs.

    offset_ms shifts the timestamp forward so retries within the same
    millisecond still yield distinct tokens.
    """
    return to_base36(_epoch_millis(now) + offset_ms)
