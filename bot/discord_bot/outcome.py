from dataclasses import dataclass
from typing import Union
from discord import app_commands



class CommandUnsuccessful(app_commands.AppCommandError):

    """
    Raised by a command that handled its own failure and wants it reported as such.

    Unlike an unexpected exception it is not wrapped in CommandInvokeError by
    discord.py, so it reaches the error handler unchanged.
    """



@dataclass(frozen=True)
class Success:
    pass


@dataclass(frozen=True)
class UnmetPrecondition:
    reason: str | None = None


@dataclass(frozen=True)
class UnknownCommand:
    reason: str | None = None


@dataclass(frozen=True)
class BadArguments:
    reason: str | None = None


@dataclass(frozen=True)
class ExecutionException:
    reason: str | None = None
    detail: BaseException | None = None


@dataclass(frozen=True)
class Unsuccessful:
    reason: str | None = None


@dataclass(frozen=True)
class Other:
    reason: str | None = None


CommandOutcome = Union[
    Success,
    UnmetPrecondition,
    UnknownCommand,
    BadArguments,
    ExecutionException,
    Unsuccessful,
    Other,
]



def classify(error: app_commands.AppCommandError) -> CommandOutcome:

    """
    Maps a discord.py application command error to its CommandOutcome.

    Checks (including cooldowns, permission and guild-only checks) become
    UnmetPrecondition; commands Discord knows about but this tree does not, or
    knows in a different shape, become UnknownCommand; argument conversion errors
    become BadArguments; exceptions raised inside a command body become
    ExecutionException carrying the original exception.

    Args:
        error (app_commands.AppCommandError): The error raised while executing.

    Returns:
        CommandOutcome: The matching failure outcome.
    """

    reason = str(error) or None

    if isinstance(error, app_commands.CheckFailure):
        return UnmetPrecondition(reason)
    if isinstance(error, (app_commands.CommandNotFound, app_commands.CommandSignatureMismatch)):
        return UnknownCommand(reason)
    if isinstance(error, app_commands.TransformerError):
        return BadArguments(reason)
    if isinstance(error, app_commands.CommandInvokeError):
        return ExecutionException(reason, error.original)
    if isinstance(error, CommandUnsuccessful):
        return Unsuccessful(reason)
    return Other(reason)
