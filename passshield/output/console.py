"""
PassShield Console Output
==========================

Rich-based console displays for PassShield results: the strength meter,
composition and entropy tables, dictionary and dataset findings,
crack-time projections, detected patterns, and feedback.

Uses the shared console infrastructure for consistent styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.text import Text

from shared.console import ShieldConsole
from passshield.core.models import (
    AnonymousAnalytics,
    DatasetStats,
    DictionaryStatistics,
    PasswordAnalysis,
    PasswordFingerprint,
    SecurityAdvice,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_STRENGTH_COLOURS: dict[str, str] = {
    "very-weak": "bold white on red",
    "weak": "bold red",
    "fair": "bold yellow",
    "good": "bold green",
    "strong": "bold bright_green",
}

_CRACK_SCENARIOS: tuple[tuple[str, str, str], ...] = (
    ("online_throttling_100_per_hour", "Online, throttled", "100 / hour"),
    ("online_no_throttling_10_per_second", "Online, unthrottled", "10 / sec"),
    ("offline_slow_hashing_1e4_per_second", "Offline, slow hash", "1e4 / sec"),
    ("offline_fast_hashing_1e10_per_second", "Offline, fast hash", "1e10 / sec"),
)

_METER_WIDTH = 40


def mask_password(password: str) -> str:
    """Keep the first and last characters, star the rest."""
    if len(password) <= 2:
        return "*" * len(password)
    return f"{password[0]}{'*' * (len(password) - 2)}{password[-1]}"


class ShieldConsoleOutput:
    """Console output formatters for PassShield results.

    Usage::

        console = ShieldConsole()
        output = ShieldConsoleOutput(console)
        output.display_analysis(analysis, label=mask_password(pw))
    """

    def __init__(
        self,
        console: Optional[ShieldConsole] = None,
        *,
        max_suggestions: int = 10,
        show_patterns: bool = True,
    ) -> None:
        self.console = console or ShieldConsole()
        self._rich = self.console.rich
        self._max_suggestions = max_suggestions
        self._show_patterns = show_patterns

    # ------------------------------------------------------------------ #
    #  Analysis Display
    # ------------------------------------------------------------------ #

    def display_analysis(self, analysis: PasswordAnalysis, label: str = "") -> None:
        """Display a full password analysis.

        Args:
            analysis: Result of :func:`passshield.analyze`.
            label:    How to show the password (masked by the caller).
        """
        self.console.section("Password Analysis")
        self._rich.print(self._strength_meter(analysis))
        self._display_overview(analysis, label)
        self._display_entropy(analysis)
        self._display_dictionary(analysis)
        self._display_dataset(analysis)
        self._display_crack_time(analysis)
        if self._show_patterns:
            self._display_patterns(analysis)
        self._display_feedback(analysis)

    @staticmethod
    def _strength_meter(analysis: PasswordAnalysis) -> Panel:
        colour = _STRENGTH_COLOURS.get(analysis.strength.value, "white")
        label = analysis.strength.value.replace("-", " ").upper()
        filled = max(0, min(_METER_WIDTH, int(analysis.score / 100 * _METER_WIDTH)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{analysis.score:.0f}/100  ")
        meter.append("[", style="dim")
        for i in range(_METER_WIDTH):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < _METER_WIDTH * 0.25:
                meter.append("█", style="red")
            elif i < _METER_WIDTH * 0.50:
                meter.append("█", style="yellow")
            elif i < _METER_WIDTH * 0.75:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]  ", style="dim")
        meter.append(label, style=colour)
        return Panel(meter, title="Strength Meter", border_style="cyan")

    def _display_overview(self, analysis: PasswordAnalysis, label: str) -> None:
        comp = analysis.composition
        rows = []
        if label:
            rows.append(("Password", label))
        rows.extend([
            ("Length", comp.length),
            ("Lowercase", comp.lowercase),
            ("Uppercase", comp.uppercase),
            ("Digits", comp.digits),
            ("Symbols", comp.symbols),
            ("Spaces", comp.spaces),
        ])
        self.console.table("Composition", ["Property", "Value"], rows, styles=["bold", ""])

    def _display_entropy(self, analysis: PasswordAnalysis) -> None:
        details = analysis.entropy_details
        self.console.table(
            "Entropy",
            ["Estimate", "Bits"],
            [
                ("Charset", f"{details.charset_entropy:.2f}"),
                ("Shannon (total)", f"{details.shannon_entropy:.2f}"),
                ("Minimum", f"{details.min_entropy:.2f}"),
                ("Pattern-reduced", f"{details.pattern_reduced_entropy:.2f}"),
                ("Adjusted", f"{analysis.entropy:.2f}"),
            ],
            caption=(
                f"Effective length {details.effective_length:.2f}, "
                f"{details.unique_char_count} unique characters"
            ),
            styles=["bold", ""],
        )

    def _display_dictionary(self, analysis: PasswordAnalysis) -> None:
        dictionary = analysis.dictionary_analysis
        if not dictionary.is_in_dictionary:
            self.console.success("No dictionary matches")
            return
        self.console.table(
            "Dictionary Matches",
            ["Property", "Value"],
            [
                ("Categories", ", ".join(dictionary.dictionary_type)),
                ("Tokens matched", len(dictionary.matched_words)),
                ("Dictionary score", f"{dictionary.score}/100"),
                ("Strength", dictionary.strength.value),
            ],
            styles=["bold", "yellow"],
        )

    def _display_dataset(self, analysis: PasswordAnalysis) -> None:
        insights = analysis.dataset_insights
        comparison = insights.dataset_comparison
        pattern = insights.pattern_analysis
        self.console.table(
            "Dataset Insights",
            ["Metric", "Value"],
            [
                ("Similarity", f"{insights.similarity_score:.2f}"),
                ("Uniqueness", f"{insights.uniqueness_score:.0f}"),
                ("Predictability", f"{insights.predictability_index:.0f}"),
                ("Rank", f"{comparison.rank.value} (better than {comparison.better_than}%)"),
                ("Pattern family", pattern.pattern_type or "none"),
            ],
            caption=comparison.recommendation,
            styles=["bold", ""],
        )

    def _display_crack_time(self, analysis: PasswordAnalysis) -> None:
        crack = analysis.crack_time.model_dump()
        self.console.table(
            "Crack Time Estimates",
            ["Attack Scenario", "Speed", "Estimated Time"],
            [(name, speed, crack[key]) for key, name, speed in _CRACK_SCENARIOS],
            styles=["bold", "", ""],
        )

    def _display_patterns(self, analysis: PasswordAnalysis) -> None:
        if not analysis.patterns:
            return
        self.console.blank()
        self._rich.print("[bold]Patterns Detected:[/bold]")
        for match in analysis.patterns:
            self._rich.print(
                f"  [yellow]⚠[/yellow] {match.pattern.value} at {match.i}-{match.j} "
                f"({len(match.token)} chars, {match.entropy:.2f} bits)"
            )

    def _display_feedback(self, analysis: PasswordAnalysis) -> None:
        feedback = analysis.feedback
        self.console.blank()
        if feedback.warning:
            self.console.warning(feedback.warning)
        if feedback.suggestions:
            self._rich.print("[bold]Suggestions:[/bold]")
            for suggestion in feedback.suggestions[: self._max_suggestions]:
                self._rich.print("  [bright_cyan]•[/bright_cyan] ", Text(suggestion), sep="")

    # ------------------------------------------------------------------ #
    #  Generated secrets
    # ------------------------------------------------------------------ #

    def display_generated(self, secret: str, analysis: PasswordAnalysis, kind: str) -> None:
        """Show a freshly generated password or passphrase in full."""
        self.console.section(f"Generated {kind.title()}")
        self._rich.print(Panel(Text(secret, style="bold bright_green"), border_style="green"))
        self._rich.print(self._strength_meter(analysis))
        self.console.info(f"Not stored anywhere. Save this {kind} in a password manager.")

    # ------------------------------------------------------------------ #
    #  Fingerprint Display
    # ------------------------------------------------------------------ #

    def display_fingerprint(
        self,
        fingerprint: PasswordFingerprint,
        analytics: AnonymousAnalytics,
    ) -> None:
        self.console.section("Password Fingerprint")
        meta = fingerprint.metadata
        self.console.table(
            "Fingerprint",
            ["Property", "Value"],
            [
                ("Hash prefix", fingerprint.hash),
                ("Length", meta.length),
                ("Character classes", meta.character_variety),
                ("Starts with letter", "yes" if meta.starts_with_letter else "no"),
                ("Ends with number", "yes" if meta.ends_with_number else "no"),
                ("Repeating characters", "yes" if meta.has_repeating_chars else "no"),
                ("Keyboard patterns", "yes" if meta.has_keyboard_patterns else "no"),
            ],
            styles=["bold", ""],
        )
        self.console.table(
            "Anonymous Analytics",
            ["Property", "Value"],
            [
                ("Score", f"{analytics.strength_score:.0f}/100"),
                ("Entropy level", f"{analytics.entropy_level}+ bits"),
                ("Length range", analytics.length_range),
                ("Dictionary match", "yes" if analytics.dictionary_found else "no"),
            ],
            styles=["bold", ""],
        )

    # ------------------------------------------------------------------ #
    #  Advice Display
    # ------------------------------------------------------------------ #

    def display_advice(self, advice: SecurityAdvice) -> None:
        self.console.section("Security Advice")
        self._rich.print(Panel(advice.threat_analysis, title="Threat Analysis", border_style="magenta"))
        for title, items, bullet in (
            ("Vulnerabilities", advice.vulnerabilities, "[red]✘[/red]"),
            ("Recommendations", advice.recommendations, "[green]✔[/green]"),
            ("Industry Tips", advice.industry_tips, "[bright_cyan]•[/bright_cyan]"),
        ):
            self.console.blank()
            self._rich.print(f"[bold]{title}:[/bold]")
            for item in items:
                self._rich.print(f"  {bullet} ", Text(item), sep="")

    # ------------------------------------------------------------------ #
    #  Statistics Display
    # ------------------------------------------------------------------ #

    def display_statistics(self, dataset: DatasetStats, dictionary: DictionaryStatistics) -> None:
        self.console.section("Reference Data")
        self.console.table(
            "Bundled Word Lists",
            ["List", "Entries"],
            [
                ("Common passwords", dictionary.total_passwords),
                ("Common words", dictionary.total_words),
                ("Names", dictionary.total_names),
                ("Keyboard patterns", dictionary.total_patterns),
                ("Years", dictionary.total_years),
            ],
            styles=["bold", ""],
        )
        self.console.table(
            "Corpus Pattern Frequencies",
            ["Pattern", "Count", "Share"],
            [(p.pattern, f"{p.count:,}", f"{p.percentage:.2f}%") for p in dataset.common_patterns],
            caption=(
                f"{dataset.total_passwords:,} passwords, {dataset.unique_passwords:,} unique, "
                f"average length {dataset.average_length}"
            ),
            styles=["bold", "", ""],
        )
        self.console.table(
            "Top Passwords",
            ["Password", "Count", "Share"],
            [(p.password, f"{p.count:,}", f"{p.percentage:.2f}%") for p in dataset.top_passwords],
            styles=["bold", "", ""],
        )
