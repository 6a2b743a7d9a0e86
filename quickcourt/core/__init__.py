"""
Core module initialization.
Exports configuration and logging utilities.
"""

from quickcourt.core.config import (
    get_settings,
    setup_logging,
    Settings,
    EnvironmentMode,
    GatewayCredentials,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "EnvironmentMode",
    "GatewayCredentials",
]
