"""
Launch Invoker - Replace the launcher process with the chosen program.

The command line is split on whitespace with no quoting support, matching
how field codes are stripped when the catalog is built.
"""

import os
from typing import Callable, Optional

from loguru import logger

from quickrun.errors import EmptyCommandError

Executor = Callable[[str, list[str]], object]


def split_command_line(command_line: str) -> tuple[str, list[str]]:
    """
    Split a command line into program and arguments.

    Args:
        command_line: Resolved command line (e.g. "firefox  --new-window")

    Returns:
        Tuple of (program, args)

    Raises:
        EmptyCommandError: If there is no program token
    """
    tokens = command_line.split()
    if not tokens:
        raise EmptyCommandError(f"Empty command line: {command_line!r}")
    return tokens[0], tokens[1:]


class LaunchInvoker:
    """
    Hands a command line to the process-replacement call.

    Args:
        executor: Called as executor(program, argv); defaults to os.execvp
    """

    def __init__(self, executor: Optional[Executor] = None):
        self.executor = executor if executor is not None else os.execvp

    def launch(self, command_line: str) -> bool:
        """
        Execute a command line.

        Returns:
            True once the executor has been invoked (with os.execvp this
            never returns), False if the command could not be started
        """
        try:
            program, args = split_command_line(command_line)
        except EmptyCommandError as e:
            logger.error(str(e))
            return False

        logger.debug(f"Launching {program} with args {args}")
        try:
            self.executor(program, [program, *args])
        except OSError:
            logger.exception(f"Failed to launch {command_line!r}")
            return False
        return True
