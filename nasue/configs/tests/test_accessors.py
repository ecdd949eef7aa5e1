"""Unit tests for nasue.configs.accessors module."""

from collections.abc import Callable

import pytest

from nasue.configs.accessors import (
    NasSettings,
    get_device_params,
    get_device_path,
    get_network_host,
    get_network_port,
    get_trace_level,
    get_ueid,
    get_user_host,
    get_user_port,
    null_to_none,
    resolve_settings,
)
from nasue.configs.constants import NULL_SENTINEL
from nasue.configs.options import OptionIndex, OptionTable, create_option_table

STRING_ACCESSORS: list[tuple[Callable[[OptionTable], str], OptionIndex]] = [
    (get_user_host, OptionIndex.USER_HOST),
    (get_network_host, OptionIndex.NETWORK_HOST),
    (get_user_port, OptionIndex.USER_PORT),
    (get_network_port, OptionIndex.NETWORK_PORT),
    (get_device_path, OptionIndex.DEVICE_PATH),
    (get_device_params, OptionIndex.DEVICE_PARAMS),
]


@pytest.fixture
def table() -> OptionTable:
    """Provide a fresh option table at its defaults."""
    return create_option_table()


class TestNumericAccessors:
    """Tests for get_ueid and get_trace_level."""

    def test_defaults(self, table: OptionTable) -> None:
        """Test numeric values of the compiled-in defaults."""
        assert get_ueid(table) == 1
        assert get_trace_level(table) == 0

    @pytest.mark.parametrize(
        "value,expected",
        [("f0", 240), ("0f", 15), ("", 0), ("g1", 0), ("1g", 1), ("AB", 171), ("ab", 171)],
    )
    def test_trace_level_is_hexadecimal(
        self, table: OptionTable, value: str, expected: int
    ) -> None:
        """Test the permissive hexadecimal trace mask."""
        table.assign(OptionIndex.TRACE_LEVEL, value)

        assert get_trace_level(table) == expected

    @pytest.mark.parametrize("value,expected", [("123", 123), ("", 0), ("ue7", 0)])
    def test_ueid_is_decimal(self, table: OptionTable, value: str, expected: int) -> None:
        """Test the permissive decimal UE identifier."""
        table.assign(OptionIndex.UE_ID, value)

        assert get_ueid(table) == expected


class TestStringAccessors:
    """Tests for the raw string accessors."""

    @pytest.mark.parametrize("accessor,index", STRING_ACCESSORS)
    def test_accessor_returns_slot_default(
        self,
        table: OptionTable,
        accessor: Callable[[OptionTable], str],
        index: OptionIndex,
    ) -> None:
        """Test that each accessor reads its own slot."""
        assert accessor(table) == table.default(index)

    @pytest.mark.parametrize("accessor,index", STRING_ACCESSORS)
    def test_accessor_returns_assigned_value(
        self,
        table: OptionTable,
        accessor: Callable[[OptionTable], str],
        index: OptionIndex,
    ) -> None:
        """Test that each accessor returns the value as given."""
        table.assign(index, "value-42")

        assert accessor(table) == "value-42"

    def test_null_defaults_are_literal_strings(self, table: OptionTable) -> None:
        """Test that options without a build default hold the NULL sentinel."""
        assert get_user_host(table) == "NULL"
        assert get_device_path(table) == "NULL"
        assert get_device_params(table) == "NULL"

    def test_accessors_are_idempotent(self, table: OptionTable) -> None:
        """Test that repeated reads return the same values."""
        table.assign(OptionIndex.TRACE_LEVEL, "a5")
        table.freeze()

        first = [get_ueid(table), get_trace_level(table), get_network_host(table)]
        second = [get_ueid(table), get_trace_level(table), get_network_host(table)]

        assert first == second
        assert table.values() == table.values()


class TestResolveSettings:
    """Tests for resolve_settings and NasSettings."""

    def test_null_to_none(self) -> None:
        """Test sentinel mapping."""
        assert null_to_none(NULL_SENTINEL) is None
        assert null_to_none("null") == "null"
        assert null_to_none("/dev/ttyUSB0") == "/dev/ttyUSB0"

    def test_resolve_settings_from_defaults(self, table: OptionTable) -> None:
        """Test the settings struct of an untouched table."""
        settings = resolve_settings(table)

        assert settings == NasSettings(
            ue_id=1,
            trace_level=0,
            user_host=None,
            network_host="localhost",
            user_port="10000",
            network_port="12000",
            device_path=None,
            device_params=None,
        )

    def test_resolve_settings_with_values(self, table: OptionTable) -> None:
        """Test typed settings from assigned values."""
        table.assign(OptionIndex.UE_ID, "3")
        table.assign(OptionIndex.TRACE_LEVEL, "f0")
        table.assign(OptionIndex.DEVICE_PATH, "/dev/ttyUSB0")

        settings = resolve_settings(table)

        assert settings.ue_id == 3
        assert settings.trace_level == 240
        assert settings.device_path == "/dev/ttyUSB0"
        assert settings.to_dict()["device_path"] == "/dev/ttyUSB0"

    def test_resolve_settings_does_not_mutate_table(self, table: OptionTable) -> None:
        """Test that building settings leaves the slots unchanged."""
        before = table.values()

        resolve_settings(table)

        assert table.values() == before
