"""
PassShield Module Entry Point
==============================

Allows running the PassShield CLI via: python -m passshield
"""

from passshield.cli import main

if __name__ == "__main__":
    main()
