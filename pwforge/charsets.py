"""
pwforge.charsets
Character categories and the charset builder.
"""

from enum import Enum
from typing import List


class CharacterCategory(Enum):
    LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
    UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    DIGITS = "0123456789"
    SPECIAL = "!@#$%^&*_-+=<>?"

    @property
    def chars(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)


def categories_for(config) -> List[CharacterCategory]:
    """
    Enabled categories for a GenerationConfig, in charset order:
    lowercase, uppercase, special, digits.
    """
    cats = [CharacterCategory.LOWERCASE]
    if config.include_uppercase:
        cats.append(CharacterCategory.UPPERCASE)
    if config.include_special:
        cats.append(CharacterCategory.SPECIAL)
    if config.include_digits:
        cats.append(CharacterCategory.DIGITS)
    return cats


def build_charset(config) -> str:
    """
    Build the pool of characters a password is drawn from.
    Lowercase is always present, so the result is never empty.
    """
    return "".join(c.chars for c in categories_for(config))


def charset_size(config) -> int:
    return sum(len(c) for c in categories_for(config))


def detect_categories(password: str) -> List[CharacterCategory]:
    """Categories that appear in `password`, in CharacterCategory order."""
    found = []
    for cat in CharacterCategory:
        if any(ch in cat.chars for ch in password):
            found.append(cat)
    # anything outside the known pools is treated as a symbol
    known = "".join(c.chars for c in CharacterCategory)
    if CharacterCategory.SPECIAL not in found and any(ch not in known for ch in password):
        found.append(CharacterCategory.SPECIAL)
    return found
