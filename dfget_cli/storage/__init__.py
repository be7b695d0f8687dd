"""
Storage Layer.

This package handles reading the host-wide properties file that supplies
default node addresses and rate limits.
"""

from .config_manager import ConfigManager, apply_properties

__all__ = ["ConfigManager", "apply_properties"]
