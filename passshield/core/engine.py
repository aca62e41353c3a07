"""
PassShield Analysis Engine
===========================

Central orchestrator for PassShield. :class:`PassShieldEngine` wraps the
pure analysis pipeline, the password generator, the privacy helpers and
the security advisor, and returns unified :class:`~shared.models.ScanResult`
objects for the CLI and report writers.

Architecture follows the Facade pattern (Gamma et al., 1994), providing
a simplified interface over the individual analyzer subsystems.

The plaintext password never reaches a log record or a result target;
only derived facts (length, score, strength) are logged.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from shared.config import PassShieldConfig
from shared.logger import ShieldLogger
from shared.models import Finding, Risk, ScanResult, Severity

from passshield.analyzers.advisor import SecurityAdvisor
from passshield.analyzers.dataset import DatasetInsightEngine
from passshield.analyzers.generator import PasswordGenerator
from passshield.analyzers.password import PasswordAnalyzer
from passshield.analyzers.privacy import anonymous_analytics, password_fingerprint
from passshield.core.models import (
    GeneratorOptions,
    PasswordAnalysis,
    PasswordStrength,
    PatternCategory,
    SecurityAdvice,
)

TOOL_NAME = "passshield"
PASSWORD_TARGET = "[password]"
GENERATED_TARGET = "[generated password]"
PASSPHRASE_TARGET = "[generated passphrase]"

_NIST_REFERENCE = "NIST SP 800-63B (2017). Digital Identity Guidelines."

_PATTERN_DESCRIPTIONS: dict[PatternCategory, str] = {
    PatternCategory.DICTIONARY: "The whole password is one of the most common passwords.",
    PatternCategory.SPATIAL: "Adjacent keys on a keyboard are among the first guesses tried.",
    PatternCategory.SEQUENCE: "Alphabetic or numeric runs add almost no entropy.",
    PatternCategory.REPEAT: "Runs of the same character are cheap to guess.",
    PatternCategory.DATE: "Dates and years are a small, well-known search space.",
}


class PassShieldEngine:
    """Orchestrates PassShield analysis, generation and advice.

    Usage::

        engine = PassShieldEngine()
        result = await engine.analyze_password("P@ssw0rd!")
        result = await engine.generate_password()
        advice = await engine.advise("hunter2")
        result = await engine.fingerprint("hunter2")

    Attributes:
        config: PassShield configuration instance.
        logger: Logger for the engine.
    """

    def __init__(self, config: Optional[PassShieldConfig] = None) -> None:
        self.config = config or PassShieldConfig()
        settings = self.config.global_settings
        self.logger = ShieldLogger(
            "engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

        self._analyzer = PasswordAnalyzer()
        self._generator = PasswordGenerator()
        self._advisor = SecurityAdvisor()

    # ------------------------------------------------------------------ #
    #  Password Analysis
    # ------------------------------------------------------------------ #

    async def analyze_password(self, password: str) -> ScanResult:
        """Analyse the strength of a password.

        Args:
            password: The password to analyse. It is not stored on the
                result; ``target`` is always ``"[password]"``.

        Returns:
            ScanResult with one finding per notable observation and the
            full camelCase analysis under ``metadata``.
        """
        result = ScanResult(tool_name=TOOL_NAME, target=PASSWORD_TARGET)

        with self.logger.operation("analyze"):
            self.logger.info("Starting password analysis", length=len(password))
            try:
                with self.logger.timed("password analysis"):
                    analysis = await self._run(self._analyzer.analyze, password)
                self._populate(result, analysis)
                self.logger.info(
                    "Password analysis complete",
                    score=analysis.score,
                    strength=analysis.strength.value,
                )
            except Exception as exc:
                self.logger.exception(f"Password analysis failed: {exc}")
                result.add_finding(Finding(
                    title="Password Analysis Error",
                    description=f"Error during password analysis: {exc}",
                    severity=Severity.MEDIUM,
                ))
                result.summary = f"Error: {exc}"

        return result.finalize(result.summary or None)

    def _populate(self, result: ScanResult, analysis: PasswordAnalysis) -> None:
        result.metadata = analysis.model_dump(by_alias=True, mode="json")
        result.risk = Risk(
            score=100 - analysis.score,
            factors=self._risk_factors(analysis),
        )

        details = analysis.entropy_details
        result.add_finding(Finding(
            title=f"Password Strength: {analysis.strength.value.replace('-', ' ').title()}",
            description=(
                f"Score: {analysis.score:.0f}/100. "
                f"Adjusted entropy: {analysis.entropy:.2f} bits "
                f"(charset {details.charset_entropy:.2f}, "
                f"pattern-reduced {details.pattern_reduced_entropy:.2f}). "
                f"Length: {analysis.composition.length}."
            ),
            severity=self._strength_severity(analysis.strength),
            confidence=0.90,
            evidence={
                "score": analysis.score,
                "strength": analysis.strength.value,
                "entropy": analysis.entropy,
                "length": analysis.composition.length,
                "unique_chars": details.unique_char_count,
            },
            references=[_NIST_REFERENCE],
        ))

        for match in analysis.patterns:
            result.add_finding(Finding(
                title=f"Pattern Detected: {match.pattern.value}",
                description=(
                    f"{_PATTERN_DESCRIPTIONS[match.pattern]} "
                    f"Span {match.i}-{match.j}, {len(match.token)} characters."
                ),
                severity=Severity.LOW,
                confidence=0.75,
                evidence={"category": match.pattern.value, "i": match.i, "j": match.j},
            ))

        dictionary = analysis.dictionary_analysis
        if dictionary.is_in_dictionary:
            result.add_finding(Finding(
                title="Dictionary Match",
                description=(
                    f"Matched {len(dictionary.matched_words)} dictionary token(s) in "
                    f"categories: {', '.join(dictionary.dictionary_type)}."
                ),
                severity=(
                    Severity.CRITICAL
                    if "common-passwords" in dictionary.dictionary_type
                    else Severity.HIGH
                ),
                confidence=0.95,
                evidence={
                    "categories": dictionary.dictionary_type,
                    "score": dictionary.score,
                    "strength": dictionary.strength.value,
                },
                recommendation="Avoid dictionary words, names, years and known passwords.",
                references=[_NIST_REFERENCE],
            ))

        insights = analysis.dataset_insights
        if insights.predictability_index > 50:
            result.add_finding(Finding(
                title="Highly Predictable Password",
                description=(
                    f"Predictability index {insights.predictability_index:.0f}/100 "
                    "against breach-corpus heuristics."
                ),
                severity=Severity.MEDIUM,
                confidence=0.80,
                recommendation=" ".join(DatasetInsightEngine.recommendations(insights)),
            ))

        crack = analysis.crack_time
        result.add_finding(Finding(
            title="Estimated Crack Time",
            description=(
                f"Offline fast hashing: {crack.offline_fast_hashing_1e10_per_second}. "
                f"Offline slow hashing: {crack.offline_slow_hashing_1e4_per_second}. "
                f"Online unthrottled: {crack.online_no_throttling_10_per_second}. "
                f"Online throttled: {crack.online_throttling_100_per_hour}."
            ),
            severity=Severity.INFO,
            confidence=0.60,
            evidence=crack.model_dump(),
        ))

        feedback = analysis.feedback
        if feedback.warning:
            result.add_finding(Finding(
                title="Password Warning",
                description=feedback.warning,
                severity=Severity.MEDIUM,
            ))

        for suggestion in feedback.suggestions[: self.config.analysis.max_suggestions]:
            result.add_finding(Finding(
                title="Password Improvement Suggestion",
                description=suggestion,
                severity=Severity.INFO,
            ))

        result.summary = (
            f"Password analysis: {analysis.strength.value}, "
            f"score={analysis.score:.0f}/100, entropy={analysis.entropy:.1f} bits, "
            f"rank {insights.dataset_comparison.rank.value}"
        )

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def default_options(self) -> GeneratorOptions:
        """Generator options taken from the ``[generator]`` config section."""
        gen = self.config.generator
        return GeneratorOptions(
            length=gen.length,
            include_lowercase=gen.include_lowercase,
            include_uppercase=gen.include_uppercase,
            include_numbers=gen.include_numbers,
            include_symbols=gen.include_symbols,
            exclude_similar=gen.exclude_similar,
            exclude_ambiguous=gen.exclude_ambiguous,
        )

    async def generate_password(
        self,
        options: Optional[GeneratorOptions] = None,
    ) -> ScanResult:
        """Generate a random password and analyse it.

        The generated value is returned in ``metadata["password"]``.
        """
        options = options or self.default_options()
        result = ScanResult(tool_name=TOOL_NAME, target=GENERATED_TARGET)

        with self.logger.operation("generate"):
            try:
                password = self._generator.generate(options)
            except ValueError as exc:
                self.logger.error(f"Password generation failed: {exc}")
                result.add_finding(Finding(
                    title="Password Generation Error",
                    description=str(exc),
                    severity=Severity.HIGH,
                ))
                return result.finalize(f"Error: {exc}")

            analysis = await self._run(self._analyzer.analyze, password)
            estimate = self._generator.estimate_strength(options)
            self.logger.info(
                "Generated password",
                length=len(password),
                score=analysis.score,
            )

        result.metadata = {
            "password": password,
            "options": options.model_dump(by_alias=True),
            "estimatedStrength": round(estimate, 2),
            "analysis": analysis.model_dump(by_alias=True, mode="json"),
        }
        result.risk = Risk(score=100 - analysis.score)
        result.add_finding(Finding(
            title="Password Generated",
            description=(
                f"{len(password)} characters, estimated strength "
                f"{estimate:.0f}/100, analysed score {analysis.score:.0f}/100 "
                f"({analysis.strength.value})."
            ),
            severity=Severity.INFO,
        ))
        return result.finalize(
            f"Generated {len(password)}-character password ({analysis.strength.value})"
        )

    async def generate_passphrase(
        self,
        word_count: Optional[int] = None,
        separator: Optional[str] = None,
    ) -> ScanResult:
        """Generate a word-based passphrase and analyse it.

        The generated value is returned in ``metadata["password"]``.
        """
        gen = self.config.generator
        word_count = gen.passphrase_words if word_count is None else word_count
        separator = gen.separator if separator is None else separator
        result = ScanResult(tool_name=TOOL_NAME, target=PASSPHRASE_TARGET)

        with self.logger.operation("passphrase"):
            try:
                phrase = self._generator.generate_passphrase(word_count, separator)
            except ValueError as exc:
                self.logger.error(f"Passphrase generation failed: {exc}")
                result.add_finding(Finding(
                    title="Passphrase Generation Error",
                    description=str(exc),
                    severity=Severity.HIGH,
                ))
                return result.finalize(f"Error: {exc}")

            analysis = await self._run(self._analyzer.analyze, phrase)
            self.logger.info("Generated passphrase", words=word_count, score=analysis.score)

        result.metadata = {
            "password": phrase,
            "wordCount": word_count,
            "separator": separator,
            "analysis": analysis.model_dump(by_alias=True, mode="json"),
        }
        result.risk = Risk(score=100 - analysis.score)
        result.add_finding(Finding(
            title="Passphrase Generated",
            description=(
                f"{word_count} words, {len(phrase)} characters, analysed score "
                f"{analysis.score:.0f}/100 ({analysis.strength.value})."
            ),
            severity=Severity.INFO,
        ))
        return result.finalize(
            f"Generated {word_count}-word passphrase ({analysis.strength.value})"
        )

    # ------------------------------------------------------------------ #
    #  Fingerprint
    # ------------------------------------------------------------------ #

    async def fingerprint(self, password: str) -> ScanResult:
        """Identify *password* without revealing it.

        ``metadata`` holds the truncated-hash fingerprint under
        ``"fingerprint"`` and a coarse analytics record of its analysis
        under ``"analytics"``.
        """
        result = ScanResult(tool_name=TOOL_NAME, target=PASSWORD_TARGET)

        with self.logger.operation("fingerprint"):
            fingerprint = password_fingerprint(password)
            analysis = await self._run(self._analyzer.analyze, password)
            analytics = anonymous_analytics(analysis)
            self.logger.info(
                "Fingerprint computed",
                length_range=analytics.length_range,
                entropy_level=analytics.entropy_level,
            )

        result.metadata = {
            "fingerprint": fingerprint.model_dump(by_alias=True),
            "analytics": analytics.model_dump(by_alias=True),
        }
        result.add_finding(Finding(
            title="Password Fingerprint",
            description=(
                f"Fingerprint {fingerprint.hash}, length range {analytics.length_range}, "
                f"entropy level {analytics.entropy_level} bits, "
                f"{fingerprint.metadata.character_variety} character classes."
            ),
            severity=Severity.INFO,
            evidence={"hash": fingerprint.hash},
        ))
        return result.finalize(f"Password fingerprint {fingerprint.hash}")

    # ------------------------------------------------------------------ #
    #  Advice
    # ------------------------------------------------------------------ #

    async def advise(self, password: str) -> SecurityAdvice:
        """Report-style security advice for *password*."""
        with self.logger.operation("advise"):
            analysis = await self._run(self._analyzer.analyze, password)
            advice = self._advisor.advise(analysis)
            self.logger.info(
                "Security advice generated",
                vulnerabilities=len(advice.vulnerabilities),
            )
        return advice

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    async def _run(func, *args):
        """Run a CPU-bound callable in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func, *args)

    @staticmethod
    def _risk_factors(analysis: PasswordAnalysis) -> list[str]:
        factors: list[str] = []
        if analysis.composition.length < 8:
            factors.append("short")
        if analysis.dictionary_analysis.is_in_dictionary:
            factors.extend(analysis.dictionary_analysis.dictionary_type)
        factors.extend(sorted({m.pattern.value for m in analysis.patterns}))
        if analysis.dataset_insights.predictability_index > 50:
            factors.append("predictable")
        return factors

    @staticmethod
    def _strength_severity(strength: PasswordStrength) -> Severity:
        """Map password strength to a severity level."""
        mapping = {
            PasswordStrength.VERY_WEAK: Severity.CRITICAL,
            PasswordStrength.WEAK: Severity.HIGH,
            PasswordStrength.FAIR: Severity.MEDIUM,
            PasswordStrength.GOOD: Severity.LOW,
            PasswordStrength.STRONG: Severity.INFO,
        }
        return mapping.get(strength, Severity.MEDIUM)
