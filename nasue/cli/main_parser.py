"""Top-level NAS command line functions built on the table-driven parser."""

from collections.abc import Sequence
from typing import TextIO

from nasue.configs.options import OptionTable

from .option_parser import parse_options


def get_options(
    args: Sequence[str], table: OptionTable, prog: str | None = None
) -> bool:
    """
    Get the command line options used to run the NAS process.

    The success flag of the option parser is returned unchanged.

    :param args: Arguments following the program name
    :type args: Sequence[str]
    :param table: Option table to resolve
    :type table: OptionTable
    :param prog: Name the process was started with
    :type prog: str | None
    :return: True on success, False if the command line is invalid
    :rtype: bool
    """
    return parse_options(args, table, prog=prog)


def print_usage(
    table: OptionTable, version: str, stream: TextIO | None = None
) -> None:
    """
    Display the NAS process command line options and its version.

    :param table: Option table to describe
    :type table: OptionTable
    :param version: Version string shown after the options
    :type version: str
    :param stream: Output stream, stderr if None
    :type stream: TextIO | None
    """
    table.usage(version, stream=stream)


def get_nb_options(table: OptionTable) -> int:
    """Return the number of command line options of the NAS process."""
    return table.option_count()
