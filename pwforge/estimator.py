"""
pwforge.estimator

Brute-force crack time heuristic:
- keyspace(charset_size, length): number of strings of length 1..length
  over the pool (the attacker does not know the exact length)
- estimate_crack_seconds(...): keyspace divided by a fixed attack rate
- format_duration(seconds): human readable rendering of the estimate
- analyze_password(password): the same estimate for an existing password

All arithmetic is done on Python ints, so 77 ** 128 and friends are exact.
The result is a theoretical figure for bcrypt-speed exhaustive search with
no dictionary or rainbow-table acceleration.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import List

from .charsets import CharacterCategory, detect_categories
from .exceptions import InvalidConfigError

logger = logging.getLogger(__name__)

# attempts per second, roughly bcrypt on commodity hardware
ATTACK_RATE = 9000

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
SECONDS_PER_MONTH = 30 * SECONDS_PER_DAY
SECONDS_PER_YEAR = 365 * SECONDS_PER_DAY

# above this many years the estimate is shown in scientific notation
SCIENTIFIC_YEARS = 10 ** 6

_UNITS = [
    ("year", SECONDS_PER_YEAR),
    ("month", SECONDS_PER_MONTH),
    ("day", SECONDS_PER_DAY),
    ("hour", SECONDS_PER_HOUR),
    ("minute", SECONDS_PER_MINUTE),
    ("second", 1),
]


@dataclass(frozen=True)
class PasswordAnalysis:
    length: int
    categories: List[CharacterCategory]
    charset_size: int
    keyspace: int
    crack_seconds: int


def keyspace(charset_size: int, length: int) -> int:
    """
    Sum of charset_size ** i for i in 1..length.
    """
    if charset_size < 0:
        raise InvalidConfigError("charset_size must be >= 0")
    if length <= 0 or charset_size == 0:
        return 0
    if charset_size == 1:
        return length
    # geometric series, exact because the numerator is divisible by (c - 1)
    return (charset_size ** (length + 1) - charset_size) // (charset_size - 1)


def seconds_for_keyspace(total: int, attack_rate: int = ATTACK_RATE) -> int:
    """Seconds needed to try `total` candidates at `attack_rate` guesses/second."""
    if attack_rate <= 0:
        raise InvalidConfigError("attack_rate must be > 0")
    seconds = total // attack_rate
    logger.debug("keyspace=%d attack_rate=%d seconds=%d", total, attack_rate, seconds)
    return seconds


def estimate_crack_seconds(charset_size: int, length: int, attack_rate: int = ATTACK_RATE) -> int:
    """Seconds needed to exhaust the keyspace at `attack_rate` guesses/second."""
    if attack_rate <= 0:
        raise InvalidConfigError("attack_rate must be > 0")
    return seconds_for_keyspace(keyspace(charset_size, length), attack_rate)


def format_duration(seconds: int) -> str:
    """
    Render a number of seconds as e.g. "2 years 3 months 15 days".

    At most the three largest non-zero units are shown. Past a million
    years the year count is given in scientific notation instead.
    """
    seconds = int(seconds)
    if seconds < 0:
        raise InvalidConfigError("duration must be >= 0")
    if seconds == 0:
        return "less than a second"

    years = seconds // SECONDS_PER_YEAR
    if years >= SCIENTIFIC_YEARS:
        # Decimal keeps huge values away from float overflow
        with localcontext() as ctx:
            ctx.prec = 50
            return f"{format(Decimal(seconds) / SECONDS_PER_YEAR, '.3E')} years"

    parts = []
    remaining = seconds
    for name, size in _UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count:,} {name}" + ("" if count == 1 else "s"))
        if len(parts) == 3:
            break
    return " ".join(parts)


def analyze_password(password: str, attack_rate: int = ATTACK_RATE) -> PasswordAnalysis:
    """
    Estimate crack time for an existing password from the categories it uses.
    """
    cats = detect_categories(password)
    size = sum(len(c) for c in cats)
    total = keyspace(size, len(password))
    return PasswordAnalysis(
        length=len(password),
        categories=cats,
        charset_size=size,
        keyspace=total,
        crack_seconds=seconds_for_keyspace(total, attack_rate),
    )
