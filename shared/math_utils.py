"""
PassShield Mathematical Utilities
==================================

Entropy estimators over arbitrary symbol sequences (password strings,
byte strings), backed by NumPy.

References:
    [1] Shannon, C. E. (1948). A Mathematical Theory of Communication.
        Bell System Technical Journal, 27(3), 379-423.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Hashable, Sequence

import numpy as np
from numpy.typing import NDArray

FloatArray = NDArray[np.floating]


def frequency_distribution(symbols: Sequence[Hashable]) -> FloatArray:
    """Relative frequency of each distinct symbol, in first-seen order.

    Args:
        symbols: Any finite sequence (``str`` iterates by code point).

    Returns:
        1-D array of probabilities summing to 1.0; empty for empty input.
    """
    if not symbols:
        return np.zeros(0, dtype=np.float64)
    counts = np.fromiter(Counter(symbols).values(), dtype=np.float64)
    return counts / counts.sum()


def shannon_entropy(symbols: Sequence[Hashable]) -> float:
    """Shannon entropy per symbol, in bits.

    .. math::

        H = -\\sum_c p_c \\, \\log_2(p_c)

    Reference:
        Shannon, C. E. (1948). A Mathematical Theory of Communication.

    Returns:
        Bits per symbol; 0.0 for empty or constant input.
    """
    probs = frequency_distribution(symbols)
    if probs.size == 0:
        return 0.0
    return max(0.0, float(-np.sum(probs * np.log2(probs))))


def safe_log2(value: float) -> float:
    """``log2(value)``, or 0.0 for non-positive input."""
    if value <= 0:
        return 0.0
    return math.log2(value)
