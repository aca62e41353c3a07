"""
Security Advisor
=================

Report-style guidance for a finished :class:`PasswordAnalysis`:
vulnerabilities, recommendations, a threat-level statement and general
industry tips. Thresholds follow NIST SP 800-63B and common guidance on
bits of entropy for online and offline attacks.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
"""

from __future__ import annotations

import math

from passshield.core.models import PasswordAnalysis, SecurityAdvice

_CRITICAL_ENTROPY = 28
_LOW_ENTROPY = 45
_NIST_MIN_LENGTH = 8
_RECOMMENDED_LENGTH = 12

_NO_VULNERABILITIES = "No critical vulnerabilities detected based on current heuristics."

_THREAT_LEVELS: tuple[tuple[float, str], ...] = (
    (90, (
        "Security Level: EXCELLENT. Entropy indicates resistance to brute-force "
        "attacks even by state-level actors. Estimated offline crack time exceeds "
        "current hardware capabilities (centuries)."
    )),
    (75, (
        "Security Level: ROBUST. Resistant to commercial GPU clusters and "
        "dictionary attacks. Offline cracking would require significant "
        "resources (decades)."
    )),
    (50, (
        "Security Level: MODERATE. Safe against online throttling attacks. "
        "Vulnerable to dedicated offline cracking rigs (days/weeks). "
        "Recommended for non-critical accounts only."
    )),
    (25, (
        "Security Level: WEAK. Vulnerable to standard dictionary attacks and "
        "rainbow tables. Estimated crack time is trivial (< 24 hours)."
    )),
)

_CRITICAL_THREAT = (
    "Security Level: CRITICAL RISK. Password appears in common breach lists or "
    "follows predictable patterns. Can be cracked instantly. Change immediately."
)

INDUSTRY_TIPS: tuple[str, ...] = (
    'NIST SP 800-63B: Verifiers SHOULD NOT impose composition rules (e.g., '
    '"must use special char") if length is sufficient.',
    "Entropy Concept: A 12-char password (lower+upper+digit) has ~72 bits of entropy.",
    "Attack Vector: Credential Stuffing assumes you reuse passwords. "
    "Unique passwords are the best defense.",
    "Modern Hashing: Use Argon2id or bcrypt for storage, not simple SHA-256.",
    'Passphrases: "Length beats complexity" for human-memorable security.',
)


class SecurityAdvisor:
    """Builds :class:`SecurityAdvice` from an analysis."""

    def advise(self, analysis: PasswordAnalysis) -> SecurityAdvice:
        return SecurityAdvice(
            vulnerabilities=self.vulnerabilities(analysis),
            recommendations=self.recommendations(analysis),
            threat_analysis=self.threat_analysis(analysis.score),
            industry_tips=list(INDUSTRY_TIPS),
        )

    @staticmethod
    def vulnerabilities(analysis: PasswordAnalysis) -> list[str]:
        comp = analysis.composition
        bits = math.floor(analysis.entropy + 0.5)
        found: list[str] = []

        if comp.length < _NIST_MIN_LENGTH:
            found.append("Crucial Vulnerability: Length < 8 characters (NIST Violation)")

        if analysis.entropy < _CRITICAL_ENTROPY:
            found.append(f"Critical: Very Low Entropy ({bits} bits). Highly predictable.")
        elif analysis.entropy < _LOW_ENTROPY:
            found.append(
                f"Warning: Low Entropy ({bits} bits). "
                "Vulnerable to fast dictionary attacks."
            )

        if (
            comp.length > _NIST_MIN_LENGTH
            and comp.symbols == 0
            and comp.digits == 0
            and comp.uppercase == 0
        ):
            found.append(
                "Pattern Vulnerability: Contains only lowercase letters "
                "(search space is too small)."
            )

        if comp.symbols == 0:
            found.append(
                "Dictionary Vulnerability: Lack of special characters increases "
                "susceptibility to rainbow table attacks."
            )

        if analysis.score < 40:
            found.append("Security Assessment: Weak. Immediate update required.")

        return found or [_NO_VULNERABILITIES]

    @staticmethod
    def recommendations(analysis: PasswordAnalysis) -> list[str]:
        comp = analysis.composition
        recs: list[str] = []
        if comp.length < _RECOMMENDED_LENGTH:
            recs.append("Compliance: Increase length to 12+ characters (NIST recommendation).")
        if comp.symbols == 0:
            recs.append("Complexity: Introduce high-entropy special characters (!@#$%^&*).")
        if comp.digits == 0 or comp.uppercase == 0:
            recs.append(
                "Complexity: Diversify character sets (Upper + Digit) "
                "to increase search space size."
            )
        if analysis.score < 70:
            recs.append(
                'Strategy: Use a passphrase (e.g., "correct-horse-battery-staple") '
                "to maximize entropy/memorable ratio."
            )
        recs.append(
            "Defense: Enable Multi-Factor Authentication (MFA) "
            "to mitigate credential stuffing risks."
        )
        recs.append("Storage: Use a cryptographically secure Password Manager (AES-256).")
        return recs

    @staticmethod
    def threat_analysis(score: float) -> str:
        for threshold, text in _THREAT_LEVELS:
            if score >= threshold:
                return text
        return _CRITICAL_THREAT
