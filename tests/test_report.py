import asyncio
import json

from shared.models import Finding, ScanResult, Severity
from passshield.core.engine import PassShieldEngine
from passshield.output.report import ShieldReportGenerator


def analysed(config, password):
    return asyncio.run(PassShieldEngine(config).analyze_password(password))


def test_json_report(tmp_path, quiet_config):
    result = analysed(quiet_config, "Summer2019!")
    path = ShieldReportGenerator(version="9.9").generate_json(result, tmp_path / "a" / "r.json")

    report = json.loads(path.read_text(encoding="utf-8"))
    assert set(report) == {"report_metadata", "summary", "findings", "metadata"}
    assert report["report_metadata"]["version"] == "9.9"
    assert report["report_metadata"]["target"] == "[password]"
    assert report["summary"]["total_findings"] == len(result.findings)
    assert report["summary"]["risk_score"] == result.risk.score
    assert report["metadata"]["score"] == result.metadata["score"]
    assert report["findings"][0]["severity"] in {s.value for s in Severity}


def test_html_report(tmp_path, quiet_config):
    result = analysed(quiet_config, "Summer2019!")
    path = ShieldReportGenerator().generate_html(result, tmp_path / "report.html")

    html = path.read_text(encoding="utf-8")
    assert html.startswith("<!DOCTYPE html>")
    assert "Strength Report" in html
    assert 'class="meter-fill"' in html
    assert "Analysis Data" in html


def test_html_escapes_untrusted_text(tmp_path):
    result = ScanResult(tool_name="passshield", target="<b>x</b>")
    result.add_finding(Finding(
        title="<script>alert(1)</script>",
        description="a & b",
        severity=Severity.LOW,
    ))
    result.finalize()

    html = ShieldReportGenerator().generate_html(result, tmp_path / "x.html").read_text(
        encoding="utf-8"
    )
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
    assert "&lt;b&gt;x&lt;/b&gt;" in html
    assert "a &amp; b" in html
    assert 'class="meter"' not in html


def test_meter_reads_nested_analysis(quiet_config):
    result = asyncio.run(PassShieldEngine(quiet_config).generate_passphrase(4, "-"))
    meter = ShieldReportGenerator._build_meter_html(result)
    assert "Score:" in meter
