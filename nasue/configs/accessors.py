"""
Typed accessors over a resolved NAS option table.

Each accessor reads one value slot and returns it in its usable form. None of
them mutates the table or raises: every slot always holds at least its
default, and numeric conversions are permissive.
"""

from dataclasses import asdict, dataclass
from typing import Any

from nasue.utils.numeric import parse_decimal, parse_hex

from .constants import NULL_SENTINEL
from .options import OptionIndex, OptionTable


def get_ueid(table: OptionTable) -> int:
    """Return the UE identifier, parsed as a decimal integer."""
    return parse_decimal(table.value(OptionIndex.UE_ID))


def get_trace_level(table: OptionTable) -> int:
    """Return the logging trace mask, parsed as a hexadecimal integer."""
    return parse_hex(table.value(OptionIndex.TRACE_LEVEL))


def get_user_host(table: OptionTable) -> str:
    return table.value(OptionIndex.USER_HOST)


def get_network_host(table: OptionTable) -> str:
    return table.value(OptionIndex.NETWORK_HOST)


def get_user_port(table: OptionTable) -> str:
    """Return the user app layer port as given; callers convert it to a number."""
    return table.value(OptionIndex.USER_PORT)


def get_network_port(table: OptionTable) -> str:
    """Return the network layer port as given; callers convert it to a number."""
    return table.value(OptionIndex.NETWORK_PORT)


def get_device_path(table: OptionTable) -> str:
    return table.value(OptionIndex.DEVICE_PATH)


def get_device_params(table: OptionTable) -> str:
    return table.value(OptionIndex.DEVICE_PARAMS)


def null_to_none(value: str) -> str | None:
    """Map the ``"NULL"`` sentinel to None, leaving any other value as is."""
    return None if value == NULL_SENTINEL else value


@dataclass(frozen=True)
class NasSettings:
    """Resolved NAS process settings.

    Built once from the option table at startup and handed to whichever
    component needs it. Options left at the ``"NULL"`` sentinel are None.
    """

    ue_id: int
    trace_level: int
    user_host: str | None
    network_host: str | None
    user_port: str | None
    network_port: str | None
    device_path: str | None
    device_params: str | None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def resolve_settings(table: OptionTable) -> NasSettings:
    """
    Build the settings struct from a resolved option table.

    :param table: Option table after command line resolution
    :type table: OptionTable
    :return: Typed settings
    :rtype: NasSettings
    """
    return NasSettings(
        ue_id=get_ueid(table),
        trace_level=get_trace_level(table),
        user_host=null_to_none(get_user_host(table)),
        network_host=null_to_none(get_network_host(table)),
        user_port=null_to_none(get_user_port(table)),
        network_port=null_to_none(get_network_port(table)),
        device_path=null_to_none(get_device_path(table)),
        device_params=null_to_none(get_device_params(table)),
    )
