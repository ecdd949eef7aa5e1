"""CLI-specific constants for the NAS UE process command line.

Provides shared constants used by the CLI entry point, including exit codes
and logging settings.
"""

# Standard CLI exit codes following Unix conventions
SUCCESS_EXIT_CODE: int = 0
"""Exit code indicating successful program completion."""

ERROR_EXIT_CODE: int = 1
"""Exit code indicating program failure or error condition."""

INTERRUPT_EXIT_CODE: int = 1
"""Exit code indicating program interruption by user (Ctrl+C)."""

LOG_FILE_ENV_VAR: str = "NAS_LOG_FILE"
"""Environment variable naming the log file; console only when unset."""
