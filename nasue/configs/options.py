"""
Option table of the NAS UE process command line.

The table holds one descriptor per command line option together with a
parallel list of resolved values. Every slot starts at its descriptor's
default, is overwritten at most once by the option parser, and is read-only
once the table has been frozen.
"""

import logging
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

from .constants import DEFAULT_PROCESS_NAME, NULL_SENTINEL
from .defaults import BuildDefaults
from .errors import OptionTableFrozenError, UnknownOptionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionDescriptor:
    """Static description of one command line option.

    :ivar name: Flag as typed on the command line, e.g. ``-trace``
    :ivar argument: Placeholder shown in the usage text, e.g. ``<mask>``
    :ivar usage: Help text shown in the usage text
    :ivar default: Value the option takes when the flag is absent
    """

    name: str
    argument: str
    usage: str
    default: str


class OptionIndex(IntEnum):
    """Stable indices of the NAS command line options, in usage order."""

    UE_ID = 0
    TRACE_LEVEL = 1
    USER_HOST = 2
    NETWORK_HOST = 3
    USER_PORT = 4
    NETWORK_PORT = 5
    DEVICE_PATH = 6
    DEVICE_PARAMS = 7


def build_option_descriptors(
    defaults: BuildDefaults | None = None,
) -> tuple[OptionDescriptor, ...]:
    """
    Build the NAS option descriptors, ordered by :class:`OptionIndex`.

    :param defaults: Build-time defaults, the compiled-in values if None
    :type defaults: BuildDefaults | None
    :return: One descriptor per option index
    :rtype: tuple[OptionDescriptor, ...]
    """
    defaults = defaults or BuildDefaults()
    return (
        OptionDescriptor("-ueid", "<ueid>", "UE identifier", defaults.ue_id),
        OptionDescriptor("-trace", "<mask>", "Logging trace level", defaults.trace_level),
        OptionDescriptor("-uhost", "<uhost>", "User app layer's hostname", NULL_SENTINEL),
        OptionDescriptor(
            "-nhost", "<nhost>", "Network layer's hostname", defaults.network_host
        ),
        OptionDescriptor(
            "-uport", "<uport>", "User app layer's port number", defaults.user_port
        ),
        OptionDescriptor(
            "-nport", "<nport>", "Network layer's port number", defaults.network_port
        ),
        OptionDescriptor("-dev", "<devpath>", "Device pathname", NULL_SENTINEL),
        OptionDescriptor("-params", "<params>", "Device attribute parameters", NULL_SENTINEL),
    )


class OptionTable:
    """
    Ordered option descriptors plus their resolved values.

    Values are addressed by :class:`OptionIndex` (or any int in range). The
    number of value slots always equals the number of descriptors and no slot
    is ever empty: it holds the default until the parser assigns a value.
    """

    def __init__(
        self,
        descriptors: tuple[OptionDescriptor, ...],
        process_name: str = DEFAULT_PROCESS_NAME,
    ) -> None:
        self.process_name = process_name
        self._descriptors = tuple(descriptors)
        self._values: list[str] = [descriptor.default for descriptor in self._descriptors]
        self._frozen = False

    def option_count(self) -> int:
        """Return the number of options in the table."""
        return len(self._descriptors)

    @property
    def descriptors(self) -> tuple[OptionDescriptor, ...]:
        return self._descriptors

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def descriptor(self, index: int) -> OptionDescriptor:
        return self._descriptors[index]

    def default(self, index: int) -> str:
        return self._descriptors[index].default

    def value(self, index: int) -> str:
        """
        Return the resolved value of an option as an opaque string.

        :param index: Option index
        :type index: int
        :return: Value given on the command line, or the option default
        :rtype: str
        """
        return self._values[index]

    def values(self) -> tuple[str, ...]:
        return tuple(self._values)

    def find(self, name: str) -> int:
        """
        Return the index of the option whose flag is ``name``.

        :param name: Flag such as ``-nhost``
        :type name: str
        :return: Option index
        :rtype: int
        :raises UnknownOptionError: If no option uses this flag
        """
        for index, descriptor in enumerate(self._descriptors):
            if descriptor.name == name:
                return index
        raise UnknownOptionError(
            f"Unknown option '{name}'. "
            f"Available options: {[d.name for d in self._descriptors]}"
        )

    def assign(self, index: int, value: str) -> None:
        """
        Overwrite the value slot of an option.

        Only the option parser writes to the table, and only before it is
        frozen.

        :param index: Option index
        :type index: int
        :param value: Argument string given on the command line
        :type value: str
        :raises OptionTableFrozenError: If the table has already been resolved
        """
        if self._frozen:
            raise OptionTableFrozenError(
                f"Cannot set {self._descriptors[index].name}: "
                f"options of {self.process_name} are already resolved"
            )
        self._values[index] = value

    def freeze(self) -> None:
        """Make the table read-only for the rest of the process lifetime."""
        self._frozen = True

    def usage_lines(self, version: str) -> list[str]:
        """
        Format the usage text, one line per option then the version line.

        :param version: Version string of the process
        :type version: str
        :return: Usage lines without trailing newlines
        :rtype: list[str]
        """
        name_width = max((len(d.name) for d in self._descriptors), default=0)
        argument_width = max((len(d.argument) for d in self._descriptors), default=0)
        lines = [
            f"{d.name:<{name_width}}  {d.argument:<{argument_width}}  {d.usage}"
            for d in self._descriptors
        ]
        lines.append(f"Version: {version}")
        return lines

    def usage(self, version: str, stream: TextIO | None = None) -> None:
        """
        Write the usage text to the diagnostic stream.

        :param version: Version string of the process
        :type version: str
        :param stream: Output stream, stderr if None
        :type stream: TextIO | None
        """
        stream = stream or sys.stderr
        for line in self.usage_lines(version):
            print(line, file=stream)

    def __repr__(self) -> str:
        return (
            f"OptionTable(process_name={self.process_name!r}, "
            f"options={self.option_count()}, frozen={self._frozen})"
        )


def create_option_table(
    process_name: str = DEFAULT_PROCESS_NAME,
    defaults: BuildDefaults | None = None,
) -> OptionTable:
    """
    Create the NAS option table with every slot at its default.

    :param process_name: Command name shown until the parser replaces it
    :type process_name: str
    :param defaults: Build-time defaults, the compiled-in values if None
    :type defaults: BuildDefaults | None
    :return: Fresh, unresolved option table
    :rtype: OptionTable
    """
    table = OptionTable(build_option_descriptors(defaults), process_name=process_name)
    logger.debug("Created option table with %d options", table.option_count())
    return table
