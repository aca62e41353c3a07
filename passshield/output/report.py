"""
PassShield Report Generator
============================

Writes HTML and JSON reports from :class:`~shared.models.ScanResult`
objects. The HTML report is a single self-contained file with inline CSS;
the JSON report is structured for scripts and CI pipelines.

Reports are built from the result envelope only. Analysis results never
carry the plaintext password; generator results carry the freshly
generated secret in ``metadata["password"]``.

References:
    - OWASP Reporting Guidelines. https://owasp.org/www-community/
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from shared.models import ScanResult


# ===================================================================== #
#  HTML Template (inline CSS, no external assets)
# ===================================================================== #

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>PassShield Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --accent-green: #3fb950;
            --accent-yellow: #d29922;
            --accent-red: #f85149;
            --accent-purple: #bc8cff;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 1100px; margin: 0 auto; }}
        .header {{
            text-align: center;
            padding: 2rem;
            border: 1px solid var(--accent-cyan);
            border-radius: 8px;
            margin-bottom: 2rem;
            background: var(--bg-secondary);
        }}
        .header h1 {{ color: var(--accent-cyan); font-size: 2rem; }}
        .header .subtitle {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .section {{
            background: var(--bg-secondary);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .section h2 {{
            color: var(--accent-purple);
            font-size: 1.4rem;
            margin-bottom: 1rem;
            padding-bottom: 0.5rem;
            border-bottom: 1px solid var(--border);
        }}
        table {{ width: 100%; border-collapse: collapse; margin: 1rem 0; }}
        th, td {{ padding: 0.75rem 1rem; text-align: left; border: 1px solid var(--border); }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); font-weight: 600; }}
        .meter {{
            height: 24px;
            background: var(--bg-tertiary);
            border-radius: 12px;
            overflow: hidden;
            border: 1px solid var(--border);
        }}
        .meter-fill {{ height: 100%; border-radius: 12px; }}
        .badge {{
            display: inline-block;
            padding: 0.25rem 0.75rem;
            border-radius: 4px;
            font-weight: 700;
            font-size: 0.85rem;
        }}
        .severity-info {{ background: rgba(88, 166, 255, 0.2); color: var(--accent-cyan); }}
        .severity-low {{ background: rgba(63, 185, 80, 0.2); color: var(--accent-green); }}
        .severity-medium {{ background: rgba(210, 153, 34, 0.2); color: var(--accent-yellow); }}
        .severity-high {{ background: rgba(248, 81, 73, 0.2); color: var(--accent-red); }}
        .severity-critical {{ background: rgba(248, 81, 73, 0.4); color: #ff7b72; }}
        .finding {{
            padding: 1rem;
            margin: 0.5rem 0;
            border-left: 4px solid var(--border);
            background: var(--bg-tertiary);
            border-radius: 0 4px 4px 0;
        }}
        .finding h3 {{ font-size: 1rem; margin-bottom: 0.5rem; }}
        .finding p {{ color: var(--text-secondary); font-size: 0.9rem; }}
        pre {{
            background: var(--bg-tertiary);
            padding: 1rem;
            border-radius: 4px;
            overflow-x: auto;
            font-size: 0.85rem;
            color: var(--text-secondary);
        }}
        .footer {{
            text-align: center;
            padding: 1.5rem;
            color: var(--text-secondary);
            font-size: 0.8rem;
            border-top: 1px solid var(--border);
            margin-top: 2rem;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>PassShield</h1>
            <div class="subtitle">
                Password Strength Report | {target}<br>
                Generated: {timestamp}
            </div>
        </div>

        <div class="section">
            <h2>Summary</h2>
            <p>{summary}</p>
            {meter_html}
            <table>
                <tr>
                    <th>Tool</th><td>{tool}</td>
                    <th>Target</th><td>{target}</td>
                </tr>
                <tr>
                    <th>Duration</th><td>{duration:.3f}s</td>
                    <th>Findings</th><td>{finding_count}</td>
                </tr>
            </table>
        </div>

        <div class="section">
            <h2>Findings</h2>
            {findings_html}
        </div>

        {metadata_section}

        <div class="footer">
            PassShield v{version} | Local Password Strength Analysis<br>
            Report generated {timestamp}
        </div>
    </div>
</body>
</html>
"""

_METER_COLOURS: tuple[tuple[float, str], ...] = (
    (20, "var(--accent-red)"),
    (40, "#ff7b72"),
    (60, "var(--accent-yellow)"),
    (80, "var(--accent-green)"),
)


class ShieldReportGenerator:
    """Generates HTML and JSON reports from PassShield results.

    Usage::

        generator = ShieldReportGenerator()
        generator.generate_html(scan_result, Path("report.html"))
        generator.generate_json(scan_result, Path("report.json"))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def generate_html(
        self,
        result: ScanResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write an HTML report and return its path."""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        report_title = title or f"Analysis of {result.target}"

        html_content = _HTML_TEMPLATE.format(
            title=_escape(report_title),
            target=_escape(result.target),
            timestamp=timestamp,
            summary=_escape(result.summary),
            meter_html=self._build_meter_html(result),
            tool=_escape(result.tool_name),
            duration=result.duration_seconds or 0.0,
            finding_count=result.finding_count,
            findings_html=self._build_findings_html(result),
            metadata_section=self._build_metadata_section(result),
            version=_escape(self.version),
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write a JSON report and return its path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(result), encoding="utf-8")
        return output_path

    def build_report(self, result: ScanResult) -> dict[str, Any]:
        """The JSON report structure as a dictionary."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": self.version,
            },
            "summary": {
                "total_findings": result.finding_count,
                "critical_findings": result.critical_count,
                "high_findings": result.high_count,
                "severity_counts": result.severity_counts,
                "duration_seconds": result.duration_seconds,
                "risk_score": result.risk.score if result.risk else None,
                "risk_level": result.risk.level.value if result.risk and result.risk.level else None,
                "description": result.summary,
            },
            "findings": [
                {
                    "title": f.title,
                    "description": f.description,
                    "severity": f.severity.value,
                    "confidence": f.confidence,
                    "evidence": f.evidence,
                    "recommendation": f.recommendation,
                    "references": f.references,
                }
                for f in result.findings
            ],
            "metadata": result.metadata,
        }

    def to_json(self, result: ScanResult) -> str:
        return json.dumps(self.build_report(result), indent=2, ensure_ascii=False, default=str)

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_meter_html(result: ScanResult) -> str:
        analysis = result.metadata.get("analysis", result.metadata)
        score = analysis.get("score") if isinstance(analysis, dict) else None
        if not isinstance(score, (int, float)):
            return ""
        colour = "var(--accent-green)"
        for upper, candidate in _METER_COLOURS:
            if score < upper:
                colour = candidate
                break
        strength = _escape(str(analysis.get("strength", "")))
        return (
            f'<p><strong>Score:</strong> {score:.0f}/100 ({strength})</p>'
            f'<div class="meter"><div class="meter-fill" '
            f'style="width: {max(0.0, min(100.0, score)):.0f}%; background: {colour};"></div></div>'
        )

    @staticmethod
    def _build_findings_html(result: ScanResult) -> str:
        if not result.findings:
            return '<p style="color: var(--text-secondary);">No findings.</p>'

        parts: list[str] = []
        for finding in result.findings:
            parts.append(
                f'<div class="finding">'
                f'<h3><span class="badge {finding.severity.css_class}">'
                f'{finding.severity.value}</span> {_escape(finding.title)}</h3>'
                f'<p>{_escape(finding.description)}</p>'
            )
            if finding.recommendation:
                parts.append(
                    f'<p><strong>Recommendation:</strong> {_escape(finding.recommendation)}</p>'
                )
            if finding.references:
                refs = ", ".join(_escape(r) for r in finding.references)
                parts.append(f'<p style="font-size: 0.8rem;">References: {refs}</p>')
            parts.append("</div>")
        return "\n".join(parts)

    @staticmethod
    def _build_metadata_section(result: ScanResult) -> str:
        if not result.metadata:
            return ""
        json_str = json.dumps(result.metadata, indent=2, ensure_ascii=False, default=str)
        return (
            '<div class="section">'
            "<h2>Analysis Data</h2>"
            f"<pre>{_escape(json_str)}</pre>"
            "</div>"
        )


def _escape(text: str) -> str:
    return html.escape(text, quote=True)
