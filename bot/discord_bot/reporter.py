import asyncio
import logging
from datetime import datetime
import discord
import utils.stats as stats
from logger import AUDIT_LOGGER, format_timestamp
from discord_bot.channels import ChannelConsumer
from discord_bot.context import InteractionContext
from discord_bot.engine import CommandResult
from discord_bot.outcome import (
    BadArguments,
    CommandOutcome,
    ExecutionException,
    Other,
    Success,
    UnknownCommand,
    UnmetPrecondition,
    Unsuccessful,
)


UNMET_PRECONDITION_MESSAGE = "Something went wrong:\n- {reason}"
UNKNOWN_COMMAND_MESSAGE = "Unknown command — try refreshing your client."
BAD_ARGUMENTS_MESSAGE = "Invalid number or arguments."
EXECUTION_EXCEPTION_MESSAGE = "Something went wrong... try again later."
NOT_EXECUTED_MESSAGE = "Command could not be executed. Try again later."

audit_logger = logging.getLogger(AUDIT_LOGGER)



def failure_message(outcome: CommandOutcome) -> str | None:

    """
    Returns the ephemeral text shown to the user for an outcome.

    Args:
        outcome (CommandOutcome): The outcome of one command execution.

    Returns:
        str | None: The message, or None for a Success (nothing is shown).

    Raises:
        TypeError: If the outcome is not one of the known variants.
    """

    if isinstance(outcome, Success):
        return None
    if isinstance(outcome, UnmetPrecondition):
        return UNMET_PRECONDITION_MESSAGE.format(reason=outcome.reason or "Unknown reason")
    if isinstance(outcome, UnknownCommand):
        return UNKNOWN_COMMAND_MESSAGE
    if isinstance(outcome, BadArguments):
        return BAD_ARGUMENTS_MESSAGE
    if isinstance(outcome, ExecutionException):
        return EXECUTION_EXCEPTION_MESSAGE
    if isinstance(outcome, (Unsuccessful, Other)):
        return NOT_EXECUTED_MESSAGE
    raise TypeError(f"Unknown command outcome: {outcome!r}")


def command_path(command) -> str:
    """'/name' for a top-level command, '/group name' for a sub-command."""
    parent = getattr(command, "parent", None)
    if parent is None:
        return f"/{command.name}"
    return f"/{parent.name} {command.name}"


def resolve_origin(session: discord.Client, guild_id: int | None) -> str:
    if guild_id is None:
        return "a DM"

    guild = session.get_guild(guild_id)
    if guild is None:
        # Installed on the user, not on a guild the bot is a member of
        return "User Install"
    return guild.name


def format_audit_line(moment: datetime, performance: str, origin: str, path: str) -> str:
    return f"{format_timestamp(moment)} | {performance} | Location: {origin} | Command: {path}"



class CommandResultReporter(ChannelConsumer):

    """
    Turns each CommandResult into an ephemeral error reply or a console audit line.

    Failures are answered through the interaction's follow-up channel when it has
    already responded, otherwise through its initial response. Exceptions raised
    by a command body are also logged with their traceback. Successful commands
    produce one audit line with the live CPU and RAM usage, where the command was
    used and its full path.

    The reporter never retries; an error while sending a reply propagates out of
    `report`.

    Attributes:
        session (discord.Client): Used to resolve guild names.
    """

    name = "command-result-reporter"

    def __init__(self, session: discord.Client, outcomes: asyncio.Queue):
        super().__init__(outcomes)
        self.session = session

    async def handle(self, result: CommandResult):
        await self.report(result.command, result.context, result.outcome)

    async def report(self, command, context: InteractionContext, outcome: CommandOutcome):
        message = failure_message(outcome)
        if message is None:
            await self.log_success(command, context)
            return

        if isinstance(outcome, ExecutionException):
            logging.error(f"Error: {outcome.detail!r}", exc_info=outcome.detail)

        await context.reply(message, ephemeral=True)

    async def log_success(self, command, context: InteractionContext):
        cpu = await stats.current_cpu_percent()
        ram = stats.current_ram_percent()

        line = format_audit_line(
            datetime.now(),
            stats.format_performance(cpu, ram),
            resolve_origin(self.session, context.guild_id),
            command_path(command),
        )
        audit_logger.info(line)
