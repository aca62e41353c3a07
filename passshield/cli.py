"""
PassShield CLI
===============

Click-based command-line interface for PassShield. Provides subcommands
for password analysis, password and passphrase generation, security
advice, privacy-preserving fingerprints, and the bundled reference
statistics.

Usage::

    python -m passshield analyze                 # prompts, input hidden
    python -m passshield -o json analyze "Tr0ub4dor&3"
    python -m passshield generate --length 24 --no-symbols
    python -m passshield passphrase --words 5 --separator .
    python -m passshield advise
    python -m passshield fingerprint
    python -m passshield stats

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import click

from shared.config import PassShieldConfig
from shared.console import ShieldConsole
from shared.models import Finding, ScanResult, Severity

from passshield import __version__
from passshield.analyzers.dataset import DatasetInsightEngine
from passshield.analyzers.dictionary import DictionaryEngine
from passshield.core.engine import PASSWORD_TARGET, TOOL_NAME, PassShieldEngine
from passshield.core.models import (
    AnonymousAnalytics,
    GeneratorOptions,
    PasswordAnalysis,
    PasswordFingerprint,
    SecurityAdvice,
)
from passshield.output.console import ShieldConsoleOutput, mask_password
from passshield.output.report import ShieldReportGenerator


# ===================================================================== #
#  Async Runner Helper
# ===================================================================== #

def _run_async(coro):
    """Run an engine coroutine from a synchronous Click handler."""
    return asyncio.run(coro)


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to PassShield configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default=None,
    help="Output format (defaults to the configured analysis.output_format).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.version_option(__version__, prog_name="passshield")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """PassShield -- local password strength analysis.

    Analyse passwords without sending them anywhere, generate strong
    passwords and passphrases, and get security advice.
    """
    ctx.ensure_object(dict)

    try:
        shield_config = PassShieldConfig.load(config) if config else PassShieldConfig.load()
    except (OSError, ValueError) as exc:
        raise click.ClickException(f"Could not load configuration: {exc}") from exc

    output_format = output or shield_config.analysis.output_format
    if output_format not in ("console", "json", "html"):
        output_format = "console"

    ctx.obj["config"] = shield_config
    ctx.obj["output_format"] = output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    # Console output is muted for JSON so stdout stays machine-readable.
    console = ShieldConsole(quiet=output_format == "json")
    ctx.obj["console"] = console
    ctx.obj["engine"] = PassShieldEngine(shield_config)
    ctx.obj["display"] = ShieldConsoleOutput(
        console,
        max_suggestions=shield_config.analysis.max_suggestions,
        show_patterns=shield_config.analysis.show_patterns,
    )
    ctx.obj["reporter"] = ShieldReportGenerator(version=__version__)

    if not quiet and output_format == "console":
        console.banner(version=__version__)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Write *result* as JSON or HTML according to the selected format."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: ShieldReportGenerator = ctx.obj["reporter"]
    console: ShieldConsole = ctx.obj["console"]
    config: PassShieldConfig = ctx.obj["config"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            click.echo(f"JSON report saved to: {path}", err=True)
        else:
            click.echo(reporter.to_json(result))
    elif output_format == "html":
        if output_file:
            path = reporter.generate_html(result, Path(output_file))
        else:
            default_path = Path(config.global_settings.output_dir) / "passshield_report.html"
            path = reporter.generate_html(result, default_path)
        if not ctx.obj["quiet"]:
            console.success(f"HTML report saved to: {path}")


def _read_password(password: Optional[str]) -> str:
    if password is None:
        return click.prompt("Password", hide_input=True, default="", show_default=False)
    return password


def _analysis_from(metadata: dict) -> Optional[PasswordAnalysis]:
    if not metadata:
        return None
    return PasswordAnalysis.model_validate(metadata)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.pass_context
def analyze(ctx: click.Context, password: Optional[str]) -> None:
    """Analyse password strength.

    Omit PASSWORD to be prompted with hidden input, which keeps it out of
    the shell history.
    """
    password = _read_password(password)
    engine: PassShieldEngine = ctx.obj["engine"]
    display: ShieldConsoleOutput = ctx.obj["display"]
    config: PassShieldConfig = ctx.obj["config"]

    result = _run_async(engine.analyze_password(password))

    if ctx.obj["output_format"] == "console":
        analysis = _analysis_from(result.metadata)
        if analysis is not None:
            label = mask_password(password) if config.analysis.mask_password else password
            display.display_analysis(analysis, label=label)
        else:
            ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)


@cli.command()
@click.option("--length", "-l", type=click.IntRange(1, 1024), default=None,
              help="Password length (default from config).")
@click.option("--no-lowercase", is_flag=True, default=False, help="Exclude lowercase letters.")
@click.option("--no-uppercase", is_flag=True, default=False, help="Exclude uppercase letters.")
@click.option("--no-numbers", is_flag=True, default=False, help="Exclude digits.")
@click.option("--no-symbols", is_flag=True, default=False, help="Exclude symbols.")
@click.option("--exclude-similar", is_flag=True, default=False,
              help="Drop look-alike characters (il1Lo0O).")
@click.option("--exclude-ambiguous", is_flag=True, default=False,
              help="Drop brackets, quotes and other ambiguous symbols.")
@click.option("--custom", default="", help="Extra characters to add to the pool.")
@click.pass_context
def generate(
    ctx: click.Context,
    length: Optional[int],
    no_lowercase: bool,
    no_uppercase: bool,
    no_numbers: bool,
    no_symbols: bool,
    exclude_similar: bool,
    exclude_ambiguous: bool,
    custom: str,
) -> None:
    """Generate a random password with a CSPRNG."""
    engine: PassShieldEngine = ctx.obj["engine"]
    defaults = engine.default_options()
    options = GeneratorOptions(
        length=length or defaults.length,
        include_lowercase=defaults.include_lowercase and not no_lowercase,
        include_uppercase=defaults.include_uppercase and not no_uppercase,
        include_numbers=defaults.include_numbers and not no_numbers,
        include_symbols=defaults.include_symbols and not no_symbols,
        exclude_similar=defaults.exclude_similar or exclude_similar,
        exclude_ambiguous=defaults.exclude_ambiguous or exclude_ambiguous,
        custom_characters=custom,
    )

    result = _run_async(engine.generate_password(options))
    _show_generated(ctx, result, "password")


@cli.command()
@click.option("--words", "-w", type=click.IntRange(1, 64), default=None,
              help="Number of words (default from config).")
@click.option("--separator", "-s", default=None, help="Word separator (default from config).")
@click.pass_context
def passphrase(ctx: click.Context, words: Optional[int], separator: Optional[str]) -> None:
    """Generate a random word passphrase."""
    engine: PassShieldEngine = ctx.obj["engine"]
    result = _run_async(engine.generate_passphrase(words, separator))
    _show_generated(ctx, result, "passphrase")


def _show_generated(ctx: click.Context, result: ScanResult, kind: str) -> None:
    if "password" not in result.metadata:
        raise click.ClickException(result.summary)
    if ctx.obj["output_format"] != "console":
        _handle_output(ctx, result)
        return
    display: ShieldConsoleOutput = ctx.obj["display"]
    analysis = PasswordAnalysis.model_validate(result.metadata["analysis"])
    display.display_generated(result.metadata["password"], analysis, kind)


@cli.command()
@click.argument("password", required=False)
@click.pass_context
def advise(ctx: click.Context, password: Optional[str]) -> None:
    """Security advice: vulnerabilities, recommendations and threat level."""
    password = _read_password(password)
    engine: PassShieldEngine = ctx.obj["engine"]
    advice = _run_async(engine.advise(password))

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_advice(advice)
    else:
        _handle_output(ctx, _advice_result(advice))


def _advice_result(advice: SecurityAdvice) -> ScanResult:
    result = ScanResult(tool_name=TOOL_NAME, target=PASSWORD_TARGET)
    result.metadata = advice.model_dump(by_alias=True)
    result.add_finding(Finding(
        title="Threat Analysis",
        description=advice.threat_analysis,
        severity=Severity.INFO,
    ))
    for vulnerability in advice.vulnerabilities:
        result.add_finding(Finding(
            title="Vulnerability",
            description=vulnerability,
            severity=Severity.MEDIUM,
        ))
    for recommendation in advice.recommendations:
        result.add_finding(Finding(
            title="Recommendation",
            description=recommendation,
            severity=Severity.INFO,
            recommendation=recommendation,
        ))
    return result.finalize(f"Security advice: {len(advice.vulnerabilities)} vulnerabilities")


@cli.command()
@click.argument("password", required=False)
@click.pass_context
def fingerprint(ctx: click.Context, password: Optional[str]) -> None:
    """Identify a password by hash prefix and coarse analytics only."""
    password = _read_password(password)
    engine: PassShieldEngine = ctx.obj["engine"]
    result = _run_async(engine.fingerprint(password))

    if ctx.obj["output_format"] != "console":
        _handle_output(ctx, result)
        return
    ctx.obj["display"].display_fingerprint(
        PasswordFingerprint.model_validate(result.metadata["fingerprint"]),
        AnonymousAnalytics.model_validate(result.metadata["analytics"]),
    )


@cli.command()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Show the bundled word-list sizes and corpus statistics."""
    dataset = DatasetInsightEngine.statistics()
    dictionary = DictionaryEngine.statistics()

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_statistics(dataset, dictionary)
        return

    payload = {
        "dictionary": dictionary.model_dump(by_alias=True),
        "dataset": dataset.model_dump(by_alias=True),
    }
    if ctx.obj["output_format"] == "json" and not ctx.obj["output_file"]:
        click.echo(json.dumps(payload, indent=2))
        return

    result = ScanResult(tool_name=TOOL_NAME, target="[reference data]", metadata=payload)
    _handle_output(ctx, result.finalize("Reference data statistics"))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the PassShield CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
