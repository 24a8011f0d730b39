"""Configuration module for OncoFusion.

Constants are available via: from oncofusion.config.constants import ...
Logging: from oncofusion.config.debug import get_logger, set_log_level
"""

from oncofusion.config.debug import get_logger, set_log_level, reset_logger

__all__ = [
    "get_logger",
    "set_log_level",
    "reset_logger",
]
