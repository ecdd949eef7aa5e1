"""Configuration-related exception classes for the NAS option table."""


class ConfigError(Exception):
    """Base exception for configuration errors.

    All configuration-related exceptions inherit from this class,
    allowing for broad exception handling when needed.
    """


class ConfigFileNotFoundError(ConfigError):
    """Raised when a build defaults file cannot be found."""


class ConfigParseError(ConfigError):
    """Raised when a build defaults file cannot be parsed.

    Covers invalid INI/JSON/YAML syntax, a missing ``build_defaults``
    section and unsupported file extensions.
    """


class UnknownOptionError(ConfigError):
    """Raised when a flag or defaults key does not name a known option."""


class OptionTableFrozenError(ConfigError):
    """Raised when writing to an option table after it has been resolved.

    The table is populated once at process start and is read-only afterwards.
    """


class OptionResolutionError(ConfigError):
    """Raised by the option parser when the command line cannot be resolved.

    The parser converts this into a failed resolution result; it does not
    escape ``parse_options``.
    """
