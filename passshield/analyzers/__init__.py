"""
PassShield Analyzers
=====================

Pipeline stages of the password-analysis engine plus the generator,
privacy helpers and security advisor built on top of it.
"""

from passshield.analyzers.composition import CompositionScanner
from passshield.analyzers.patterns import PatternDetector
from passshield.analyzers.dictionary import DictionaryEngine
from passshield.analyzers.dataset import DatasetInsightEngine
from passshield.analyzers.entropy import EntropyCalculator
from passshield.analyzers.scorer import Scorer
from passshield.analyzers.crack_time import CrackTimeEstimator
from passshield.analyzers.feedback import FeedbackGenerator
from passshield.analyzers.password import PasswordAnalyzer, analyze
from passshield.analyzers.generator import PasswordGenerator
from passshield.analyzers.advisor import SecurityAdvisor
from passshield.analyzers.privacy import (
    anonymous_analytics,
    hash_password,
    hash_password_with_salt,
    is_valid_password_hash,
    password_fingerprint,
    password_metadata,
)

__all__ = [
    "CompositionScanner",
    "PatternDetector",
    "DictionaryEngine",
    "DatasetInsightEngine",
    "EntropyCalculator",
    "Scorer",
    "CrackTimeEstimator",
    "FeedbackGenerator",
    "PasswordAnalyzer",
    "PasswordGenerator",
    "SecurityAdvisor",
    "analyze",
    "anonymous_analytics",
    "hash_password",
    "hash_password_with_salt",
    "is_valid_password_hash",
    "password_fingerprint",
    "password_metadata",
]
