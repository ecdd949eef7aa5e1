"""CLI entry point resolving the NAS UE process command line.

Builds the option table from the build defaults, resolves the command line
into it, and reports the resulting settings. An invalid command line prints
the usage text and ends the process with a non-zero exit code.
"""

import os
import sys
from collections.abc import Sequence

from nasue.cli.constants import (
    ERROR_EXIT_CODE,
    INTERRUPT_EXIT_CODE,
    LOG_FILE_ENV_VAR,
    SUCCESS_EXIT_CODE,
)
from nasue.cli.main_parser import get_options, print_usage
from nasue.cli.utils import create_main_wrapper
from nasue.configs.accessors import NasSettings, resolve_settings
from nasue.configs.constants import DEFAULT_PROCESS_NAME
from nasue.configs.defaults import defaults_path_from_env, load_build_defaults
from nasue.configs.errors import ConfigError
from nasue.configs.options import create_option_table
from nasue.utils.logging_config import configure_process_logging
from nasue.version import __version__


def load_settings(argv: Sequence[str]) -> NasSettings | None:
    """
    Resolve a full command line into NAS settings.

    :param argv: Command line, program name first
    :type argv: Sequence[str]
    :return: Resolved settings, or None after printing usage if the command line is invalid
    :rtype: NasSettings | None
    :raises ConfigError: If the build defaults file is missing or invalid
    """
    prog = argv[0] if argv else DEFAULT_PROCESS_NAME
    defaults = load_build_defaults(defaults_path_from_env())
    table = create_option_table(defaults=defaults)

    if not get_options(argv[1:], table, prog=prog):
        print_usage(table, __version__)
        return None

    settings = resolve_settings(table)
    process_logger = configure_process_logging(
        table.process_name,
        settings.trace_level,
        log_file=os.environ.get(LOG_FILE_ENV_VAR),
    )
    process_logger.info("NAS process options resolved (version %s)", __version__)
    for name, value in settings.to_dict().items():
        process_logger.info("  %s = %s", name, value)
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the NAS UE process command line.

    :param argv: Command line, program name first; sys.argv if None
    :type argv: Sequence[str] | None
    :return: Exit code (0 for success, 1 for error or interruption)
    :rtype: int
    """
    argv = list(sys.argv if argv is None else argv)
    try:
        settings = load_settings(argv)
    except KeyboardInterrupt:
        print("\n🛑 Interrupted by user")
        return INTERRUPT_EXIT_CODE
    except ConfigError as e:
        print(f"❌ Configuration error: {e}")
        print("💡 Check the build defaults file named by NAS_DEFAULTS_FILE")
        return ERROR_EXIT_CODE
    except OSError as e:
        print(f"❌ File system error: {e}")
        print("💡 Check file permissions and the log directory")
        return ERROR_EXIT_CODE

    if settings is None:
        return ERROR_EXIT_CODE
    return SUCCESS_EXIT_CODE


run_nas_main = create_main_wrapper(main)


if __name__ == "__main__":
    run_nas_main()
