# -*- coding: utf-8 -*-
"""
Password generation core.

Key features
- Alphabet assembly from the enabled character classes, in a fixed order.
- Cryptographically secure generation (secrets module).
- Bounded heuristic strength score (0..100) plus a coarse strength level.
- Plain-text save of a generated password.

Notes on the strength score
- The score rewards length and the number of class-matching characters. It is a
  heuristic, not an entropy estimate: a long run of one repeated lowercase letter
  still scores well.
"""

from __future__ import annotations

import enum
import logging
import re
import secrets
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, Union

# -------------------------
# Constants
# -------------------------

UPPERCASE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE_CHARS = "abcdefghijklmnopqrstuvwxyz"
DIGIT_CHARS = "0123456789"
SPECIAL_CHARS = "!@#$%^&*()-_=+[]{}|;:'\",.<>?/"

MAX_SCORE = 100

# Length bonuses: +30 at 8 characters, +20 more at 12.
LENGTH_BONUSES = ((8, 30), (12, 20))

STRONG_THRESHOLD = 75
MEDIUM_THRESHOLD = 50

_LENGTH_RE = re.compile(r"[+-]?[0-9]+")


logger = logging.getLogger(__name__)


class InvalidRequest(ValueError):
    """Raised for a generation request that cannot be satisfied."""


class CharacterClass(enum.Enum):
    """Selectable character classes; declaration order is alphabet order."""

    UPPERCASE = UPPERCASE_CHARS
    LOWERCASE = LOWERCASE_CHARS
    DIGIT = DIGIT_CHARS
    SPECIAL = SPECIAL_CHARS

    @property
    def chars(self) -> str:
        return self.value


class StrengthLevel(enum.Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"


@dataclass(frozen=True)
class GenerationRequest:
    length: int
    enabled_classes: FrozenSet[CharacterClass]

    @classmethod
    def from_flags(
        cls,
        length: int,
        uppercase: bool = True,
        lowercase: bool = True,
        digits: bool = True,
        special: bool = True,
    ) -> "GenerationRequest":
        flags = (
            (CharacterClass.UPPERCASE, uppercase),
            (CharacterClass.LOWERCASE, lowercase),
            (CharacterClass.DIGIT, digits),
            (CharacterClass.SPECIAL, special),
        )
        return cls(length=length, enabled_classes=frozenset(c for c, on in flags if on))

    def validate(self) -> None:
        """
        Raises:
            InvalidRequest if no class is enabled or length is not positive.
        """
        if not self.enabled_classes:
            raise InvalidRequest("At least one character type should be selected.")
        if self.length <= 0:
            raise InvalidRequest("Password length must be positive.")


# =========================
#   ALPHABET / GENERATION
# =========================

def build_alphabet(enabled_classes: Iterable[CharacterClass]) -> str:
    """
    Concatenate the character sets of the enabled classes.

    The result always follows CharacterClass declaration order, whatever the
    iteration order of ``enabled_classes``.

    Raises:
        InvalidRequest if no class is enabled.
    """
    enabled = set(enabled_classes)
    alphabet = "".join(c.chars for c in CharacterClass if c in enabled)
    if not alphabet:
        raise InvalidRequest("At least one character type should be selected.")
    return alphabet


def generate(length: int, alphabet: str) -> str:
    """
    Draw ``length`` characters uniformly at random from ``alphabet``.

    Raises:
        InvalidRequest for a non-positive length or an empty alphabet.
    """
    if length <= 0:
        raise InvalidRequest("Password length must be positive.")
    if not alphabet:
        raise InvalidRequest("Alphabet is empty; no characters to choose from.")

    chars = []
    for _ in range(length):
        chars.append(alphabet[secrets.randbelow(len(alphabet))])
    return "".join(chars)


def generate_password(request: GenerationRequest) -> str:
    request.validate()
    alphabet = build_alphabet(request.enabled_classes)
    logger.debug("Generating %d characters from a %d-character alphabet.", request.length, len(alphabet))
    return generate(request.length, alphabet)


def parse_length(text: str) -> int:
    """Parse a user-typed length. Positivity is checked at generation time."""
    text = text.strip()
    # ASCII digits with an optional sign; no underscores or other Unicode digits.
    if not _LENGTH_RE.fullmatch(text):
        raise InvalidRequest("Please enter a valid password length.")
    return int(text)


# =========================
#   STRENGTH
# =========================

def _count_in(password: str, chars: str) -> int:
    return sum(1 for c in password if c in chars)


def score_strength(password: str) -> int:
    length = len(password)
    score = 0

    for min_length, bonus in LENGTH_BONUSES:
        if length >= min_length:
            score += bonus

    # The four alphabets are disjoint, so each character counts at most once.
    for char_class in CharacterClass:
        score += _count_in(password, char_class.chars)

    return min(score, MAX_SCORE)


def strength_level(score: int) -> StrengthLevel:
    if score >= STRONG_THRESHOLD:
        return StrengthLevel.STRONG
    if score >= MEDIUM_THRESHOLD:
        return StrengthLevel.MEDIUM
    return StrengthLevel.WEAK


# =========================
#   FILE OUTPUT
# =========================

def save_password(password: str, path: Union[str, Path]) -> Path:
    """
    Write ``password`` verbatim to ``path`` (overwriting).

    Raises:
        OSError if the file cannot be written; no retry is attempted.
    """
    target = Path(path)
    with target.open("w", encoding="utf-8", newline="") as f:
        f.write(password)
    logger.debug("Password written to %s.", target)
    return target
