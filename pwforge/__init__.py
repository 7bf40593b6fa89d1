"""
pwforge: random password generator with a brute-force crack time estimate.
"""

from .charsets import CharacterCategory, build_charset, charset_size
from .estimator import (
    ATTACK_RATE,
    PasswordAnalysis,
    analyze_password,
    estimate_crack_seconds,
    seconds_for_keyspace,
    format_duration,
    keyspace,
)
from .exceptions import ConfigError, InvalidConfigError, PwforgeError, RandomSourceError
from .generator import (
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
    GeneratedPassword,
    GenerationConfig,
    generate,
    resolve_length,
    sample_password,
)

__version__ = "0.1.0"
