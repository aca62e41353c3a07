"""
PassShield Shared Module
========================

Configuration, logging, console and envelope models shared by every
PassShield component.
"""

from shared.config import PassShieldConfig, get_config

__all__ = ["PassShieldConfig", "get_config"]
