"""
Table-driven command line parser.

Builds an argparse parser from the descriptors of an option table, so the
table stays the single definition of the accepted flags. Every flag takes
exactly one following argument. A command line either resolves completely or
leaves the table untouched.
"""

import argparse
import logging
import os
from collections.abc import Collection, Sequence
from typing import NoReturn

from nasue.configs.errors import OptionResolutionError, OptionTableFrozenError
from nasue.configs.options import OptionTable

logger = logging.getLogger(__name__)


class TableArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting on errors."""

    def error(self, message: str) -> NoReturn:
        raise OptionResolutionError(message)


def _slot_dest(index: int) -> str:
    return f"option_{index}"


def _check_flag_positions(args: Sequence[str], flags: Collection[str]) -> None:
    """
    Require an exact table flag at every flag position of ``args``.

    Flags and values alternate, so abbreviated flags, ``-flag=value``
    spellings and stray tokens all land on a flag position and are rejected.

    :param args: Arguments following the program name
    :type args: Sequence[str]
    :param flags: Accepted flag names
    :type flags: Collection[str]
    :raises OptionResolutionError: If a flag position holds anything else
    """
    for position in range(0, len(args), 2):
        if args[position] not in flags:
            raise OptionResolutionError(f"unrecognized argument: {args[position]}")


def build_table_parser(table: OptionTable) -> TableArgumentParser:
    """
    Create an ArgumentParser for the flags of ``table``.

    Flags keep their single-dash spelling (``-nhost``) and no implicit ``-h``
    flag is added. Exact flag matching is enforced by :func:`parse_options`.

    :param table: Option table whose descriptors define the flags
    :type table: OptionTable
    :return: Parser storing each flag's argument under ``option_<index>``
    :rtype: TableArgumentParser
    """
    parser = TableArgumentParser(
        prog=table.process_name, add_help=False, allow_abbrev=False
    )
    for index, descriptor in enumerate(table.descriptors):
        parser.add_argument(
            descriptor.name,
            dest=_slot_dest(index),
            metavar=descriptor.argument,
            help=descriptor.usage,
            default=None,
        )
    return parser


def parse_options(
    args: Sequence[str], table: OptionTable, prog: str | None = None
) -> bool:
    """
    Resolve command line arguments into the value slots of an option table.

    Flags found in ``args`` overwrite the matching slots; all other slots
    keep their defaults. A repeated flag keeps its last value. The table is
    frozen after a successful resolution.

    :param args: Arguments following the program name
    :type args: Sequence[str]
    :param table: Unresolved option table
    :type table: OptionTable
    :param prog: Name the process was started with, replaces the table's process name
    :type prog: str | None
    :return: True if every argument was resolved, False otherwise
    :rtype: bool
    :raises OptionTableFrozenError: If the table was already resolved
    """
    if table.is_frozen:
        raise OptionTableFrozenError(
            f"Options of {table.process_name} are already resolved"
        )

    parser = build_table_parser(table)
    flags = [descriptor.name for descriptor in table.descriptors]
    try:
        _check_flag_positions(args, flags)
        namespace, extras = parser.parse_known_args(list(args))
        if extras:
            raise OptionResolutionError(f"unrecognized arguments: {' '.join(extras)}")
    except OptionResolutionError as e:
        logger.warning("Failed to resolve command line options: %s", e)
        return False

    for index in range(table.option_count()):
        value = getattr(namespace, _slot_dest(index))
        if value is not None:
            table.assign(index, value)
            logger.debug("Option %s set to %r", table.descriptor(index).name, value)

    if prog:
        table.process_name = os.path.basename(prog)
    table.freeze()
    return True
