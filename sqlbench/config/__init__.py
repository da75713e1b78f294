"""
Configuration Module.
"""

from sqlbench.config.settings import SCENARIO_NAMES, BenchSettings, get_settings

__all__ = ["SCENARIO_NAMES", "BenchSettings", "get_settings"]
