"""
Access to the host's data sources.

Every probe reads the host through a HostSource, so tests can swap in
in-memory fixtures without touching real OS state.
"""

from typing import Optional

from pi_monitor.models.command_result import CommandResult
from pi_monitor.utils.general import run_command

COMMAND_NOT_FOUND = 127


class HostSource:
    """Reads pseudo-files and runs commands on the local host. Never raises."""

    def __init__(self, timeout: Optional[int] = None):
        self.timeout = timeout

    def read_text(self, path: str) -> Optional[str]:
        """
        Returns the full text content of the file at path, or None if it
        is missing, unreadable, or not valid UTF-8.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError):
            return None

    def run(self, args: list) -> CommandResult:
        """
        Runs args without a shell and returns a structured result.

        A missing executable is reported as return code 127 and a timeout
        as return code -1.
        """
        try:
            return run_command(args, raise_on_fail=False, timeout=self.timeout)
        except FileNotFoundError as exc:
            return CommandResult("", str(exc), COMMAND_NOT_FOUND)
        except OSError as exc:
            return CommandResult("", str(exc), -1)
