"""
Privacy Helpers
================

Ways to describe or identify a password without keeping the plaintext:
SHA-256 digests, content-free metadata, truncated fingerprints, and
coarse analytics records.
"""

from __future__ import annotations

import hashlib
import re
import time

from passshield.analyzers.composition import code_units
from passshield.core.models import (
    AnonymousAnalytics,
    PasswordAnalysis,
    PasswordFingerprint,
    PasswordMetadata,
)

DEFAULT_SALT = "passshield-2024"
FINGERPRINT_LENGTH = 16

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
_SPACE_RE = re.compile(r"\s")
_STARTS_LETTER_RE = re.compile(r"\A[a-zA-Z]")
_ENDS_DIGIT_RE = re.compile(r"[0-9]\Z")
_REPEAT_RE = re.compile(r"(.)\1{2,}")
_HASH_RE = re.compile(r"\A(?:[0-9a-fA-F]{64}|[0-9a-fA-F]{16})\Z")

_KEYBOARD_PATTERNS: tuple[str, ...] = (
    "qwerty", "asdfgh", "zxcvbn", "qwertyuiop",
    "123456", "098765", "abcdef", "fedcba",
    "password", "admin", "login", "welcome",
)

_LENGTH_RANGES: tuple[tuple[int, str], ...] = (
    (8, "0-7"),
    (12, "8-11"),
    (16, "12-15"),
    (20, "16-19"),
)


def _now_ms() -> int:
    return int(time.time() * 1000)


def hash_password(password: str) -> str:
    """Hex SHA-256 digest of the UTF-8 encoded *password*."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def hash_password_with_salt(password: str, salt: str = DEFAULT_SALT) -> str:
    """SHA-256 of *password* with *salt* appended."""
    return hash_password(password + salt)


def _has_keyboard_pattern(password: str) -> bool:
    lower = password.lower()
    return any(
        pattern in lower or pattern[::-1] in lower
        for pattern in _KEYBOARD_PATTERNS
    )


def password_metadata(password: str) -> PasswordMetadata:
    """Structural facts about *password* that do not reveal its content."""
    password = code_units(password)
    flags = {
        "has_lowercase": bool(_LOWER_RE.search(password)),
        "has_uppercase": bool(_UPPER_RE.search(password)),
        "has_numbers": bool(_DIGIT_RE.search(password)),
        "has_symbols": bool(_SYMBOL_RE.search(password)),
        "has_spaces": bool(_SPACE_RE.search(password)),
    }
    return PasswordMetadata(
        length=len(password),
        starts_with_letter=bool(_STARTS_LETTER_RE.search(password)),
        ends_with_number=bool(_ENDS_DIGIT_RE.search(password)),
        has_repeating_chars=bool(_REPEAT_RE.search(password)),
        has_keyboard_patterns=_has_keyboard_pattern(password),
        character_variety=sum(flags.values()),
        **flags,
    )


def password_fingerprint(password: str) -> PasswordFingerprint:
    """First 16 hex digits of the digest plus metadata and a timestamp."""
    return PasswordFingerprint(
        hash=hash_password(password)[:FINGERPRINT_LENGTH],
        metadata=password_metadata(password),
        timestamp=_now_ms(),
    )


def is_valid_password_hash(value: str) -> bool:
    """True for a full (64) or fingerprint-length (16) hex digest."""
    return bool(_HASH_RE.match(value))


def length_range(length: int) -> str:
    for upper, label in _LENGTH_RANGES:
        if length < upper:
            return label
    return "20+"


def anonymous_analytics(analysis: PasswordAnalysis) -> AnonymousAnalytics:
    """Coarse summary of *analysis* suitable for aggregate statistics.

    Entropy is floored to a multiple of ten and length is bucketed.
    """
    composition = analysis.composition
    return AnonymousAnalytics(
        strength_score=analysis.score,
        entropy_level=int(analysis.entropy // 10) * 10,
        length_range=length_range(composition.length),
        has_symbols=composition.symbols > 0,
        has_numbers=composition.digits > 0,
        has_uppercase=composition.uppercase > 0,
        has_lowercase=composition.lowercase > 0,
        dictionary_found=analysis.dictionary_analysis.is_in_dictionary,
        timestamp=_now_ms(),
    )
