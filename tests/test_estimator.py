import pytest

from pwforge.charsets import CharacterCategory
from pwforge.estimator import (
    ATTACK_RATE,
    SECONDS_PER_DAY,
    SECONDS_PER_MONTH,
    SECONDS_PER_YEAR,
    analyze_password,
    estimate_crack_seconds,
    format_duration,
    keyspace,
    seconds_for_keyspace,
)
from pwforge.exceptions import InvalidConfigError


def test_keyspace_matches_exact_sum():
    assert keyspace(62, 8) == 221_919_451_578_090
    assert keyspace(62, 8) == sum(62 ** i for i in range(1, 9))


def test_crack_seconds_is_exact_integer_division():
    assert estimate_crack_seconds(62, 8) == 221_919_451_578_090 // ATTACK_RATE


def test_no_overflow_for_largest_input():
    total = keyspace(77, 128)
    assert total == sum(77 ** i for i in range(1, 129))
    assert total > 2 ** 128
    assert estimate_crack_seconds(77, 128) == total // 9000


def test_monotonic_in_charset_size():
    assert estimate_crack_seconds(26, 8) < estimate_crack_seconds(62, 8)


def test_strictly_increasing_in_length():
    for c in (2, 26, 77):
        values = [keyspace(c, n) for n in range(1, 40)]
        assert all(a < b for a, b in zip(values, values[1:]))
        assert estimate_crack_seconds(c, 16) < estimate_crack_seconds(c, 17)


def test_degenerate_inputs():
    assert keyspace(1, 5) == 5
    assert keyspace(0, 5) == 0
    assert keyspace(26, 0) == 0
    with pytest.raises(InvalidConfigError):
        keyspace(-1, 5)
    with pytest.raises(InvalidConfigError):
        estimate_crack_seconds(26, 8, attack_rate=0)


def test_format_duration_units():
    assert format_duration(0) == "less than a second"
    assert format_duration(1) == "1 second"
    assert format_duration(59) == "59 seconds"
    assert format_duration(3661) == "1 hour 1 minute 1 second"
    assert format_duration(SECONDS_PER_YEAR + 5) == "1 year 5 seconds"
    span = 2 * SECONDS_PER_YEAR + 3 * SECONDS_PER_MONTH + 15 * SECONDS_PER_DAY + 42
    assert format_duration(span) == "2 years 3 months 15 days"


def test_format_duration_huge_values():
    assert format_duration(SECONDS_PER_YEAR * 10 ** 6) == "1.000E+6 years"
    text = format_duration(estimate_crack_seconds(77, 128))
    assert text.endswith(" years")
    assert "E+" in text


def test_analyze_lowercase_word():
    result = analyze_password("abc")
    assert result.categories == [CharacterCategory.LOWERCASE]
    assert result.charset_size == 26
    assert result.keyspace == 26 + 26 ** 2 + 26 ** 3


def test_analyze_mixed_password():
    result = analyze_password("Xy7!Xy7!")
    assert result.charset_size == 77
    assert result.length == 8
    assert result.crack_seconds == estimate_crack_seconds(77, 8)


def test_analyze_empty_password():
    result = analyze_password("")
    assert result.charset_size == 0
    assert result.crack_seconds == 0


def test_seconds_for_keyspace():
    total = keyspace(77, 128)
    assert seconds_for_keyspace(total) == estimate_crack_seconds(77, 128)
    assert seconds_for_keyspace(17999) == 1
    with pytest.raises(InvalidConfigError):
        seconds_for_keyspace(100, attack_rate=-1)
