"""
nasue: command line options of the NAS UE protocol-stack process.

Example:
    from nasue import create_option_table, get_options, resolve_settings

    table = create_option_table()
    if get_options(["-trace", "a5"], table):
        settings = resolve_settings(table)
"""

from .cli import get_nb_options, get_options, print_usage
from .configs import (
    NasSettings,
    OptionIndex,
    OptionTable,
    create_option_table,
    resolve_settings,
)
from .version import __version__

__all__ = [
    "create_option_table",
    "get_options",
    "get_nb_options",
    "print_usage",
    "resolve_settings",
    "NasSettings",
    "OptionIndex",
    "OptionTable",
    "__version__",
]
