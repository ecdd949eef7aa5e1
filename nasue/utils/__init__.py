"""
Utility modules for nasue.

Import directly from specific modules to avoid circular dependencies.

Example:
    from nasue.utils.logging_config import setup_logger
    from nasue.utils.numeric import parse_hex
"""

from nasue.utils.logging_config import configure_process_logging, setup_logger
from nasue.utils.numeric import parse_decimal, parse_hex

__all__ = [
    "setup_logger",
    "configure_process_logging",
    "parse_hex",
    "parse_decimal",
]
