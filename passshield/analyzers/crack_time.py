"""
Crack-Time Estimator
=====================

Turns an entropy figure into average-case crack times for four attacker
models. The search space is ``2 ** (entropy - 1)`` guesses (half the
keyspace on average).

Attack models (guesses per second):
    - Offline, slow hash (bcrypt/scrypt class):  1e4
    - Offline, fast hash (MD5/SHA-1 on GPUs):     1e10
    - Online, throttled:                          100 per hour
    - Online, unthrottled:                        10

These are order-of-magnitude figures, not guarantees.

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
"""

from __future__ import annotations

import math

from passshield.core.models import CrackTime

GUESS_RATES: dict[str, float] = {
    "offline_slow_hashing_1e4_per_second": 1e4,
    "offline_fast_hashing_1e10_per_second": 1e10,
    "online_throttling_100_per_hour": 100 / 3600,
    "online_no_throttling_10_per_second": 10.0,
}

MINUTE = 60
HOUR = 3600
DAY = 86400
MONTH = 2629800
YEAR = 31557600
CENTURY = 3155760000

# (upper bound in seconds, divisor, unit); the last bucket is "centuries".
_BUCKETS: tuple[tuple[float, float, str], ...] = (
    (MINUTE, 1, "seconds"),
    (HOUR, MINUTE, "minutes"),
    (DAY, HOUR, "hours"),
    (MONTH, DAY, "days"),
    (YEAR, MONTH, "months"),
    (CENTURY, YEAR, "years"),
)

_UNIT_SECONDS: dict[str, float] = {
    unit: divisor for _, divisor, unit in _BUCKETS
}

# Largest exponent that still fits in a double.
_MAX_EXPONENT = 1023


def entropy_to_seconds(entropy: float, guesses_per_second: float) -> float:
    """Average seconds to exhaust half of a ``2 ** entropy`` keyspace."""
    exponent = entropy - 1
    if exponent > _MAX_EXPONENT:
        return math.inf
    return math.pow(2, exponent) / guesses_per_second


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_time(seconds: float) -> str:
    """Human-readable duration bucket for *seconds*.

    Buckets are half-open, so exactly 60 seconds reads ``"1 minutes"``.
    """
    if seconds < 1:
        return "instant"
    for upper, divisor, unit in _BUCKETS:
        if seconds < upper:
            return f"{_round_half_up(seconds / divisor)} {unit}"
    return "centuries"


def parse_time(display: str) -> float:
    """Approximate inverse of :func:`format_time`, in seconds.

    ``"instant"`` parses to 0 and ``"centuries"`` to infinity.

    Raises:
        ValueError: If *display* is not a string ``format_time`` produces.
    """
    if display == "instant":
        return 0.0
    if display == "centuries":
        return math.inf
    amount, _, unit = display.partition(" ")
    if unit not in _UNIT_SECONDS:
        raise ValueError(f"Unrecognised duration: {display!r}")
    return int(amount) * _UNIT_SECONDS[unit]


class CrackTimeEstimator:
    """Formatted crack times for every attacker model."""

    @staticmethod
    def estimate(entropy: float) -> CrackTime:
        return CrackTime(**{
            model: format_time(entropy_to_seconds(entropy, rate))
            for model, rate in GUESS_RATES.items()
        })
