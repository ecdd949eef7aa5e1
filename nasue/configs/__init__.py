"""
Option table and configuration for the NAS UE process.

Main components:
- OptionTable: Ordered option descriptors with their resolved values
- Accessors: Typed reads of each option (get_ueid, get_trace_level, ...)
- NasSettings: Settings struct built from a resolved table
- BuildDefaults: Build-time defaults, overridable from a defaults file
- Error classes: Specific configuration exceptions
"""

from .accessors import (
    NasSettings,
    get_device_params,
    get_device_path,
    get_network_host,
    get_network_port,
    get_trace_level,
    get_ueid,
    get_user_host,
    get_user_port,
    resolve_settings,
)
from .defaults import BuildDefaults, load_build_defaults
from .errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigParseError,
    OptionResolutionError,
    OptionTableFrozenError,
    UnknownOptionError,
)
from .options import (
    OptionDescriptor,
    OptionIndex,
    OptionTable,
    build_option_descriptors,
    create_option_table,
)

__all__ = [
    # Core classes
    'OptionDescriptor',
    'OptionIndex',
    'OptionTable',
    'NasSettings',
    'BuildDefaults',
    # Construction
    'build_option_descriptors',
    'create_option_table',
    'load_build_defaults',
    'resolve_settings',
    # Accessors
    'get_ueid',
    'get_trace_level',
    'get_user_host',
    'get_network_host',
    'get_user_port',
    'get_network_port',
    'get_device_path',
    'get_device_params',
    # Error classes
    'ConfigError',
    'ConfigFileNotFoundError',
    'ConfigParseError',
    'OptionResolutionError',
    'OptionTableFrozenError',
    'UnknownOptionError',
]
