import datetime
import logging
import subprocess
from typing import List, Optional

from pi_monitor.models.command_result import CommandResult
from pi_monitor.models.runcommand_error import RunCommandError, RunCommandTimeout


def run_command(
    cmd: List[str],
    raise_on_fail=True,
    timeout: Optional[float] = None,
) -> CommandResult:
    """Run a single CLI command with subprocess and returns the output"""
    """
    This function executes a single CLI command using the built-in subprocess module.
    The command is never run through a shell.

    Args:
        cmd: The command to be executed, as a list of the program and its arguments.
        timeout: The number of seconds after which the command should time out and return.
        raise_on_fail: Whether to raise an error if the command fails or not. Default is True.

    Returns:
        A CommandResult object containing the output of the command, along with a boolean indicating
        whether the command was successful or not.

    Raises:
        RunCommandError: If `raise_on_fail=True` and the command failed.
        RunCommandTimeout: If `raise_on_fail=True` and the command timed out.
        FileNotFoundError: If the executable does not exist.
    """
    with subprocess.Popen(
        cmd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    ) as proc:
        try:
            stdout, stderr = proc.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            err_msg = f"Command {cmd} timed out after {timeout} seconds"
            logging.getLogger().debug(err_msg)
            proc.kill()
            stdout, stderr = proc.communicate()
            if raise_on_fail:
                raise RunCommandTimeout(err_msg)
            return CommandResult(stdout.decode(errors="replace"), err_msg, -1)

        if raise_on_fail and proc.returncode != 0:
            raise RunCommandError(stderr.decode(errors="replace"), proc.returncode)
        return CommandResult(
            stdout.decode(errors="replace"),
            stderr.decode(errors="replace"),
            proc.returncode,
        )


def get_current_iso_timestamp() -> str:
    """Gets the current UTC time as ISO-8601 with millisecond precision and a Z suffix
    Returns:
        The timestamp string, e.g. 2025-01-31T12:00:00.000Z
    """
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
