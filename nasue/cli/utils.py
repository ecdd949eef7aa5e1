"""Shared utilities for CLI entry points."""

import sys
from collections.abc import Callable


def create_main_wrapper(main_func: Callable[[], int]) -> Callable[[], None]:
    """Create a main wrapper that exits with the function's return code.

    :param main_func: The main function that returns an exit code
    :type main_func: Callable[[], int]
    :return: Wrapper function that calls sys.exit
    :rtype: Callable[[], None]
    """

    def wrapper() -> None:
        sys.exit(main_func())

    return wrapper
