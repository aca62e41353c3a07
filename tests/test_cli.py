import json

import pytest
from click.testing import CliRunner

from passshield import __version__
from passshield.cli import cli


@pytest.fixture()
def runner():
    return CliRunner()


def invoke(runner, config_file, *args, **kwargs):
    return runner.invoke(cli, ["-c", str(config_file), *args], obj={}, **kwargs)


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_analyze_json(runner, config_file):
    result = invoke(runner, config_file, "-o", "json", "analyze", "123456")
    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert report["report_metadata"]["target"] == "[password]"
    assert report["metadata"]["strength"] == "very-weak"


def test_analyze_prompts_when_password_omitted(runner, config_file):
    result = invoke(runner, config_file, "-o", "json", "analyze", input="hunter2\n")
    assert result.exit_code == 0, result.output
    report = json.loads(result.output[result.output.index("{"):])
    assert report["metadata"]["composition"]["length"] == 7


def test_analyze_console_masks_password(runner, config_file):
    result = invoke(runner, config_file, "-q", "analyze", "Tr0ub4dor&3xyz9Q!")
    assert result.exit_code == 0, result.output
    assert "Strength Meter" in result.output
    assert "Tr0ub4dor&3xyz9Q!" not in result.output


def test_analyze_html_file(runner, config_file, tmp_path):
    target = tmp_path / "report.html"
    result = invoke(runner, config_file, "-q", "-o", "html", "-f", str(target), "analyze", "abc")
    assert result.exit_code == 0, result.output
    assert target.exists()


def test_generate_json(runner, config_file):
    result = invoke(runner, config_file, "-o", "json", "generate", "-l", "24", "--no-symbols")
    assert result.exit_code == 0, result.output
    password = json.loads(result.output)["metadata"]["password"]
    assert len(password) == 24
    assert password.isalnum()


def test_generate_uses_configured_length(runner, config_file):
    result = invoke(runner, config_file, "-o", "json", "generate")
    assert result.exit_code == 0, result.output
    assert len(json.loads(result.output)["metadata"]["password"]) == 20


def test_generate_without_character_types_fails(runner, config_file):
    result = invoke(
        runner, config_file, "-o", "json", "generate",
        "--no-lowercase", "--no-uppercase", "--no-numbers", "--no-symbols",
    )
    assert result.exit_code == 1
    assert "At least one character type must be selected" in result.output


def test_passphrase_json(runner, config_file):
    result = invoke(runner, config_file, "-o", "json", "passphrase", "-w", "5", "-s", ".")
    assert result.exit_code == 0, result.output
    metadata = json.loads(result.output)["metadata"]
    assert metadata["wordCount"] == 5
    assert len(metadata["password"].split(".")) == 5


def test_advise_json(runner, config_file):
    result = invoke(runner, config_file, "-o", "json", "advise", "abc")
    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert report["metadata"]["threatAnalysis"].startswith("Security Level: CRITICAL RISK.")
    assert len(report["metadata"]["industryTips"]) == 5


def test_stats_json(runner, config_file):
    result = invoke(runner, config_file, "-o", "json", "stats")
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["dictionary"]["totalYears"] == 50
    assert payload["dataset"]["totalPasswords"] == 10_000_000


def test_stats_console(runner, config_file):
    result = invoke(runner, config_file, "-q", "stats")
    assert result.exit_code == 0, result.output
    assert "Reference Data" in result.output


def test_bad_config_path(runner, tmp_path):
    result = runner.invoke(cli, ["-c", str(tmp_path / "missing.toml"), "stats"])
    assert result.exit_code == 2


def test_fingerprint_json(runner, config_file):
    result = invoke(runner, config_file, "-o", "json", "fingerprint", "hunter2")
    assert result.exit_code == 0, result.output
    assert "hunter2" not in result.output
    report = json.loads(result.output)
    assert len(report["metadata"]["fingerprint"]["hash"]) == 16
    assert report["metadata"]["analytics"]["lengthRange"] == "0-7"


def test_fingerprint_console(runner, config_file):
    result = invoke(runner, config_file, "-q", "fingerprint", "hunter2")
    assert result.exit_code == 0, result.output
    assert "Anonymous Analytics" in result.output
    assert "hunter2" not in result.output
