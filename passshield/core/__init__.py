"""
PassShield Core Module
=======================

Data models shared by every analyzer. The engine facade lives in
:mod:`passshield.core.engine`; it is not imported here because the
analyzers themselves import this package.
"""

from passshield.core.models import (
    Composition,
    DatasetInsights,
    DictionaryAnalysis,
    EntropyDetails,
    Feedback,
    GeneratorOptions,
    PasswordAnalysis,
    PasswordStrength,
    PatternCategory,
    PatternMatch,
    SecurityAdvice,
)

__all__ = [
    "Composition",
    "DatasetInsights",
    "DictionaryAnalysis",
    "EntropyDetails",
    "Feedback",
    "GeneratorOptions",
    "PasswordAnalysis",
    "PasswordStrength",
    "PatternCategory",
    "PatternMatch",
    "SecurityAdvice",
]
