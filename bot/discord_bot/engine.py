import asyncio
import logging
from dataclasses import dataclass
import discord
from discord import app_commands
from discord_bot.context import InteractionContext
from discord_bot.outcome import CommandOutcome, ExecutionException, Success, classify



@dataclass(frozen=True)
class CommandResult:
    command: app_commands.Command | app_commands.ContextMenu | None
    context: InteractionContext
    outcome: CommandOutcome



class ExecutionFailed(Exception):

    """
    Raised out of `CommandEngine.execute` when a command body failed and throw_on_error is set.

    The ExecutionException result is not published yet: whoever catches this
    finishes cleaning up the interaction first and then publishes it, so the
    failure reply cannot be mistaken for the placeholder being removed.
    The original exception is chained as `__cause__`.
    """

    def __init__(self, context: InteractionContext, outcome: ExecutionException):
        super().__init__(outcome.reason)
        self.context = context
        self.outcome = outcome



class CommandEngine(app_commands.CommandTree):

    """
    A CommandTree that hands interactions off to channels instead of running them itself.

    discord.py feeds every application command and autocomplete interaction to the
    client's tree. This tree only queues them on `inbound`; the dispatcher decides
    when to run each one through `execute`. Every executed command ends up as
    exactly one CommandResult on `outcomes`.

    With `throw_on_error` enabled, an exception raised inside a command body is
    raised out of `execute` as ExecutionFailed instead of being published; the
    caller cleans up after it and then publishes the carried result.

    Attributes:
        inbound (asyncio.Queue[discord.Interaction]): Interactions waiting for dispatch.
        outcomes (asyncio.Queue[CommandResult]): Results waiting to be reported.
        throw_on_error (bool): Raise command body failures out of `execute` unpublished.
    """

    def __init__(self, client: discord.Client, *, throw_on_error: bool = True, **kwargs):
        super().__init__(client, **kwargs)
        self.throw_on_error = throw_on_error
        self.inbound: asyncio.Queue[discord.Interaction] = asyncio.Queue()
        self.outcomes: asyncio.Queue[CommandResult] = asyncio.Queue()

    def _from_interaction(self, interaction: discord.Interaction) -> None:
        self.inbound.put_nowait(interaction)

    def publish(self, context: InteractionContext, outcome: CommandOutcome):
        self.outcomes.put_nowait(CommandResult(context.interaction.command, context, outcome))

    async def execute(self, context: InteractionContext):

        """ Resolves and runs the command behind an interaction.

        Args:
            context (InteractionContext): The session and interaction to run.

        Returns:
            None

        Raises:
            ExecutionFailed: A command body raised and throw_on_error is enabled.
                Its result has not been published.
        """

        interaction = context.interaction
        try:
            await self._call(interaction)
        except app_commands.AppCommandError as e:
            await self._dispatch_error(interaction, e)
            return

        if (
            interaction.type is discord.InteractionType.application_command
            and not interaction.command_failed
            and interaction.command is not None
        ):
            self.publish(context, Success())

    async def on_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError, /) -> None:
        interaction.command_failed = True

        if interaction.type is not discord.InteractionType.application_command:
            logging.warning(f"⚠️ Ignoring {type(error).__name__} for {interaction.type.name} interaction: {error}")
            return

        outcome = classify(error)
        context = InteractionContext(self.client, interaction)

        if self.throw_on_error and isinstance(outcome, ExecutionException) and outcome.detail is not None:
            raise ExecutionFailed(context, outcome) from outcome.detail

        self.publish(context, outcome)
