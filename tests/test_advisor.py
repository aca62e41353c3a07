import pytest

from passshield.analyzers.advisor import INDUSTRY_TIPS, SecurityAdvisor


@pytest.fixture()
def advisor():
    return SecurityAdvisor()


def test_short_weak_password(advisor, analyzer):
    advice = advisor.advise(analyzer.analyze("abc"))
    assert "Crucial Vulnerability: Length < 8 characters (NIST Violation)" in advice.vulnerabilities
    assert any(v.startswith("Critical: Very Low Entropy") for v in advice.vulnerabilities)
    assert "Security Assessment: Weak. Immediate update required." in advice.vulnerabilities
    assert advice.threat_analysis.startswith("Security Level: CRITICAL RISK.")
    assert advice.recommendations[0] == (
        "Compliance: Increase length to 12+ characters (NIST recommendation)."
    )


def test_lowercase_only_password(advisor, analyzer):
    advice = advisor.advise(analyzer.analyze("qzmvtrkxpwhg"))
    assert (
        "Pattern Vulnerability: Contains only lowercase letters (search space is too small)."
        in advice.vulnerabilities
    )


def test_strong_password(advisor, analyzer):
    advice = advisor.advise(analyzer.analyze("Tr0ub4dor&3xyz9Q!"))
    assert advice.vulnerabilities == [
        "No critical vulnerabilities detected based on current heuristics."
    ]
    assert advice.recommendations == [
        "Defense: Enable Multi-Factor Authentication (MFA) to mitigate credential stuffing risks.",
        "Storage: Use a cryptographically secure Password Manager (AES-256).",
    ]
    assert advice.threat_analysis.startswith("Security Level: EXCELLENT.")
    assert advice.industry_tips == list(INDUSTRY_TIPS)
    assert len(advice.industry_tips) == 5


@pytest.mark.parametrize(
    "score, level",
    [
        (100, "EXCELLENT"),
        (90, "EXCELLENT"),
        (89.9, "ROBUST"),
        (75, "ROBUST"),
        (50, "MODERATE"),
        (25, "WEAK"),
        (24.99, "CRITICAL RISK"),
        (0, "CRITICAL RISK"),
    ],
)
def test_threat_levels(score, level):
    assert SecurityAdvisor.threat_analysis(score).startswith(f"Security Level: {level}.")
