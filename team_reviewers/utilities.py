"""
Output helpers for the GitHub Actions runner.

Plain messages go to stdout as is. Warnings, errors and debug lines use the
workflow command syntax so the runner turns them into annotations.
"""

from typing import Iterable


def escape_command_data(message: str) -> str:
    """Escape a message for use as workflow command data"""
    return (
        message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    )


def info(message: str) -> None:
    print(message)


def debug(message: str) -> None:
    print(f"::debug::{escape_command_data(message)}")


def warning(message: str) -> None:
    print(f"::warning::{escape_command_data(message)}")


def set_failed(message: str) -> None:
    """
    Report a fatal error for the step.

    The runner marks the step as failed once the process exits non-zero;
    callers are responsible for the exit status.
    """
    print(f"::error::{escape_command_data(message)}")


def format_logins(logins: Iterable[str]) -> str:
    """Join logins into a stable, human readable list"""
    return ", ".join(sorted(logins))
