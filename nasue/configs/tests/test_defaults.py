"""Unit tests for nasue.configs.defaults module."""

from pathlib import Path

import pytest

from nasue.configs.defaults import (
    BuildDefaults,
    defaults_path_from_env,
    load_build_defaults,
)
from nasue.configs.errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    UnknownOptionError,
)


class TestBuildDefaults:
    """Tests for BuildDefaults dataclass."""

    def test_compiled_in_values(self) -> None:
        """Test the compiled-in defaults."""
        defaults = BuildDefaults()

        assert defaults.ue_id == "1"
        assert defaults.trace_level == "0"
        assert defaults.network_host == "localhost"
        assert defaults.user_port == "10000"
        assert defaults.network_port == "12000"

    def test_with_overrides_stringifies_values(self) -> None:
        """Test that numeric overrides are stored as strings."""
        defaults = BuildDefaults().with_overrides({"network_port": 14000})

        assert defaults.network_port == "14000"
        assert defaults.user_port == "10000"

    def test_with_overrides_rejects_unknown_keys(self) -> None:
        """Test that unknown defaults are reported."""
        with pytest.raises(UnknownOptionError, match="device_path"):
            BuildDefaults().with_overrides({"device_path": "/dev/null"})


class TestLoadBuildDefaults:
    """Tests for load_build_defaults function."""

    def test_without_path_returns_base(self) -> None:
        """Test that no file keeps the compiled-in values."""
        assert load_build_defaults() == BuildDefaults()

    def test_load_ini(self, tmp_path: Path) -> None:
        """Test overrides from an INI build_defaults section."""
        path = tmp_path / "defaults.ini"
        path.write_text("[build_defaults]\nnetwork_host = 192.168.12.1\ntrace_level = ff\n")

        defaults = load_build_defaults(str(path))

        assert defaults.network_host == "192.168.12.1"
        assert defaults.trace_level == "ff"
        assert defaults.ue_id == "1"

    def test_load_ini_without_section_raises(self, tmp_path: Path) -> None:
        """Test that an INI file must have a build_defaults section."""
        path = tmp_path / "defaults.ini"
        path.write_text("[other]\nue_id = 2\n")

        with pytest.raises(ConfigParseError, match="build_defaults"):
            load_build_defaults(str(path))

    def test_load_json(self, tmp_path: Path) -> None:
        """Test overrides from a flat JSON mapping."""
        path = tmp_path / "defaults.json"
        path.write_text('{"ue_id": 4, "user_port": "10010"}')

        defaults = load_build_defaults(str(path))

        assert defaults.ue_id == "4"
        assert defaults.user_port == "10010"

    def test_load_invalid_json_raises(self, tmp_path: Path) -> None:
        """Test that JSON syntax errors are reported as parse errors."""
        path = tmp_path / "defaults.json"
        path.write_text('{"ue_id": ')

        with pytest.raises(ConfigParseError, match="Invalid JSON"):
            load_build_defaults(str(path))

    def test_load_nested_yaml(self, tmp_path: Path) -> None:
        """Test overrides from YAML nested under build_defaults."""
        path = tmp_path / "defaults.yaml"
        path.write_text("build_defaults:\n  network_host: mme.local\n  network_port: 36412\n")

        defaults = load_build_defaults(str(path))

        assert defaults.network_host == "mme.local"
        assert defaults.network_port == "36412"

    def test_load_yaml_list_raises(self, tmp_path: Path) -> None:
        """Test that a YAML document must be a mapping."""
        path = tmp_path / "defaults.yml"
        path.write_text("- ue_id\n- trace_level\n")

        with pytest.raises(ConfigParseError, match="mapping"):
            load_build_defaults(str(path))

    def test_load_yaml_with_unknown_key_raises(self, tmp_path: Path) -> None:
        """Test that unknown defaults in a file are rejected."""
        path = tmp_path / "defaults.yaml"
        path.write_text("user_host: ue.local\n")

        with pytest.raises(UnknownOptionError):
            load_build_defaults(str(path))

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test that a missing file is reported."""
        with pytest.raises(ConfigFileNotFoundError):
            load_build_defaults(str(tmp_path / "missing.ini"))

    def test_unsupported_extension_raises(self, tmp_path: Path) -> None:
        """Test that only INI, JSON and YAML files are accepted."""
        path = tmp_path / "defaults.toml"
        path.write_text("ue_id = 2\n")

        with pytest.raises(ConfigParseError, match="Unsupported"):
            load_build_defaults(str(path))


class TestDefaultsPathFromEnv:
    """Tests for defaults_path_from_env function."""

    def test_returns_path_when_set(self) -> None:
        """Test reading NAS_DEFAULTS_FILE."""
        assert defaults_path_from_env({"NAS_DEFAULTS_FILE": "/etc/nas.ini"}) == "/etc/nas.ini"

    def test_returns_none_when_unset_or_empty(self) -> None:
        """Test that an unset or empty variable means no file."""
        assert defaults_path_from_env({}) is None
        assert defaults_path_from_env({"NAS_DEFAULTS_FILE": ""}) is None

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default of reading os.environ."""
        monkeypatch.setenv("NAS_DEFAULTS_FILE", "nas.yaml")

        assert defaults_path_from_env() == "nas.yaml"
