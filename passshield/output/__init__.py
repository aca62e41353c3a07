"""
PassShield Output Module
=========================

Console display and report generation for PassShield results.
"""

from passshield.output.console import ShieldConsoleOutput, mask_password
from passshield.output.report import ShieldReportGenerator

__all__ = [
    "ShieldConsoleOutput",
    "ShieldReportGenerator",
    "mask_password",
]
