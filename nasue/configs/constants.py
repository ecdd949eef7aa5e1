"""Configuration constants for the NAS UE process options."""

# Command name used until the parser sees the name the process was started with
DEFAULT_PROCESS_NAME: str = "NASprocess"

# Literal default of options that have no build-time value
NULL_SENTINEL: str = "NULL"

# Build-time defaults
DEFAULT_UE_ID: str = "1"
DEFAULT_TRACE_LEVEL: str = "0"
DEFAULT_NETWORK_HOSTNAME: str = "localhost"
DEFAULT_USER_PORT_NUMBER: str = "10000"
DEFAULT_NETWORK_PORT_NUMBER: str = "12000"

# Defaults file handling
DEFAULTS_FILE_ENV_VAR: str = "NAS_DEFAULTS_FILE"
DEFAULTS_SECTION: str = "build_defaults"
