"""
nasue.cli: Command line parsing for the NAS UE process.

Core Modules:
- option_parser.py: Table-driven parser resolving arguments into an option table
- main_parser.py: Top-level get_options / print_usage / get_nb_options functions
- run_nas.py: Console entry point (``nas-options``)
- constants.py: Shared CLI constants including exit codes
"""

from .constants import ERROR_EXIT_CODE, INTERRUPT_EXIT_CODE, SUCCESS_EXIT_CODE
from .main_parser import get_nb_options, get_options, print_usage
from .option_parser import build_table_parser, parse_options

__all__ = [
    "get_options",
    "print_usage",
    "get_nb_options",
    "parse_options",
    "build_table_parser",
    "SUCCESS_EXIT_CODE",
    "ERROR_EXIT_CODE",
    "INTERRUPT_EXIT_CODE",
]
