"""
pwforge.generator
Secure password generator using Python's secrets backend (SystemRandom).
"""

import logging
from dataclasses import dataclass, field
from random import SystemRandom
from typing import Optional

from .charsets import build_charset
from .estimator import keyspace, seconds_for_keyspace
from .exceptions import InvalidConfigError, RandomSourceError

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 16
MIN_LENGTH = 8
MAX_LENGTH = 128

_sysrand = SystemRandom()


def length_warning(requested: Optional[int]) -> Optional[str]:
    """Message shown when `requested` is rejected, or None."""
    if requested is None or MIN_LENGTH <= requested <= MAX_LENGTH:
        return None
    return (
        f"Length {requested} is outside {MIN_LENGTH}-{MAX_LENGTH}; "
        f"using default length {DEFAULT_LENGTH}."
    )


def resolve_length(requested: Optional[int]) -> int:
    """
    Return `requested` if it lies in [MIN_LENGTH, MAX_LENGTH], otherwise
    warn and fall back to DEFAULT_LENGTH. Out-of-range values are reset to
    the default, not clamped to the nearest bound.
    """
    if requested is None:
        return DEFAULT_LENGTH
    warning = length_warning(requested)
    if warning:
        logger.warning(warning)
        return DEFAULT_LENGTH
    return requested



@dataclass(frozen=True)
class GenerationConfig:
    length: int = DEFAULT_LENGTH
    include_uppercase: bool = False
    include_digits: bool = False
    include_special: bool = False
    # raw user input before resolve_length, kept for the diagnostic
    requested_length: Optional[int] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if not MIN_LENGTH <= self.length <= MAX_LENGTH:
            raise InvalidConfigError(
                f"length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {self.length}"
            )

    @property
    def warning(self) -> Optional[str]:
        return length_warning(self.requested_length)

    @classmethod
    def create(
        cls,
        length: Optional[int] = None,
        include_uppercase: bool = False,
        include_digits: bool = False,
        include_special: bool = False,
    ) -> "GenerationConfig":
        """Build a config, resetting an out-of-range length to the default."""
        return cls(
            length=resolve_length(length),
            include_uppercase=include_uppercase,
            include_digits=include_digits,
            include_special=include_special,
            requested_length=length,
        )


@dataclass(frozen=True)
class GeneratedPassword:
    password: str
    length: int
    charset_size: int
    keyspace: int
    crack_seconds: int
    warning: Optional[str] = None


def sample_password(length: int, charset: str, rng=None) -> str:
    """
    Draw `length` characters from `charset`, each one independently and
    uniformly. `rng` must be a CSPRNG exposing choice(); defaults to
    SystemRandom.
    """
    if not charset:
        raise InvalidConfigError("charset must not be empty")
    if length < 1:
        raise InvalidConfigError("length must be >= 1")

    rng = rng or _sysrand
    try:
        return "".join(rng.choice(charset) for _ in range(length))
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(f"Random source failed: {e}") from e


def generate(config: GenerationConfig, rng=None) -> GeneratedPassword:
    """
    Generate a password for `config` and estimate how long it would take to
    brute-force it. The result carries the length warning, if any.
    """
    charset = build_charset(config)
    password = sample_password(config.length, charset, rng)
    size = len(charset)
    total = keyspace(size, config.length)
    return GeneratedPassword(
        password=password,
        length=config.length,
        charset_size=size,
        keyspace=total,
        crack_seconds=seconds_for_keyspace(total),
        warning=config.warning,
    )
