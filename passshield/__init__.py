"""
PassShield -- Local Password Strength Analysis
===============================================

Estimates the strength of a password entirely on the local machine. The
analysis engine turns a password into a composite 0-100 score, entropy
estimates, dictionary and pattern findings, crack-time projections and
human-readable feedback. Nothing is stored or transmitted.

Modules:
    - passshield.analyzers: Pipeline stages, generator, privacy and advice
    - passshield.core.engine: Async facade returning ScanResult objects
    - passshield.core.models: Pydantic data models
    - passshield.output: Console and report output
    - passshield.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
"""

__version__ = "1.0.0"
__tool_name__ = "passshield"

from passshield.analyzers.password import analyze

__all__ = ["__version__", "__tool_name__", "analyze"]
