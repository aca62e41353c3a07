"""
Password Analyzer
==================

Orchestrates the analysis pipeline for one password:

    composition + patterns -> dictionary + dataset -> entropy
        -> adjusted entropy -> score -> strength, crack time, feedback

The pipeline is a pure function of its input. It performs no I/O, keeps
no state between calls, and never raises for a ``str`` argument, so it
can be called from any number of threads at once.

The input is first split into UTF-16 code units; every length, span and
count in the result is measured in those units.
"""

from __future__ import annotations

from passshield.analyzers.composition import CompositionScanner, code_units
from passshield.analyzers.crack_time import CrackTimeEstimator
from passshield.analyzers.dataset import DatasetInsightEngine
from passshield.analyzers.dictionary import DictionaryEngine
from passshield.analyzers.entropy import EntropyCalculator
from passshield.analyzers.feedback import FeedbackGenerator
from passshield.analyzers.patterns import PatternDetector
from passshield.analyzers.scorer import Scorer
from passshield.core.models import (
    DatasetInsights,
    DictionaryAnalysis,
    PasswordAnalysis,
)

_PREDICTABILITY_THRESHOLD = 50


class PasswordAnalyzer:
    """Runs every analyzer and assembles a :class:`PasswordAnalysis`.

    Usage::

        analysis = PasswordAnalyzer().analyze("correct horse battery staple")
        print(analysis.score, analysis.strength.value)
    """

    def __init__(self) -> None:
        self._composition = CompositionScanner()
        self._patterns = PatternDetector()
        self._dictionary = DictionaryEngine()
        self._dataset = DatasetInsightEngine()
        self._entropy = EntropyCalculator()

    def analyze(self, password: str) -> PasswordAnalysis:
        password = code_units(password)
        composition = self._composition.scan(password)
        patterns = self._patterns.detect(password)
        dictionary = self._dictionary.check(password)
        dataset = self._dataset.analyze(password)
        details = self._entropy.calculate(password, composition, patterns)

        entropy = self.adjust_entropy(details.pattern_reduced_entropy, dictionary, dataset)
        raw_score = Scorer.raw_score(password, composition, patterns, entropy, dictionary, dataset)
        score = round(raw_score, 2)

        return PasswordAnalysis(
            score=score,
            entropy=entropy,
            entropy_details=details,
            dictionary_analysis=dictionary,
            dataset_insights=dataset,
            crack_time=CrackTimeEstimator.estimate(entropy),
            feedback=FeedbackGenerator.generate(
                password, composition, patterns, raw_score, dictionary, dataset,
            ),
            composition=composition,
            patterns=patterns,
            strength=Scorer.strength(raw_score),
        )

    @staticmethod
    def adjust_entropy(
        entropy: float,
        dictionary: DictionaryAnalysis,
        dataset: DatasetInsights,
    ) -> float:
        """Cap *entropy* by dictionary findings, then scale by predictability."""
        if dictionary.is_in_dictionary:
            entropy = min(entropy, dictionary.score / 10)
        if dataset.predictability_index > _PREDICTABILITY_THRESHOLD:
            entropy *= (100 - dataset.predictability_index) / 100
        return entropy


_DEFAULT_ANALYZER = PasswordAnalyzer()


def analyze(password: str) -> PasswordAnalysis:
    """Analyze *password* with the default pipeline."""
    return _DEFAULT_ANALYZER.analyze(password)
