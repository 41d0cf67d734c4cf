import asyncio
import logging
from contextlib import suppress
import discord
from discord_bot.channels import ChannelConsumer
from discord_bot.context import InteractionContext
from discord_bot.engine import ExecutionFailed



class InteractionDispatcher(ChannelConsumer):

    """
    Runs every inbound interaction through the command engine, exactly once.

    Nothing escapes `dispatch`. When execution of an application command fails,
    the placeholder response (the "is thinking..." message left by a defer) is
    fetched and deleted so the user is not left with a stuck indicator. That
    cleanup is best effort and its own failures are ignored. A failing command
    body's result is published only after the cleanup, so the failure reply is
    never the message that gets deleted.

    Attributes:
        session (discord.Client): The bot the interactions arrive on.
        engine (CommandEngine): Resolves and runs the command for a context.
    """

    name = "interaction-dispatcher"

    def __init__(self, session: discord.Client, engine, inbound: asyncio.Queue):
        super().__init__(inbound)
        self.session = session
        self.engine = engine

    async def handle(self, interaction: discord.Interaction):
        await self.dispatch(interaction)

    async def dispatch(self, interaction: discord.Interaction):
        context = InteractionContext(self.session, interaction)
        try:
            await self.engine.execute(context)
        except ExecutionFailed as failure:
            logging.debug(f"Command of interaction {interaction.id} failed: {failure.__cause__!r}")
            await self._delete_placeholder(interaction)
            self.engine.publish(failure.context, failure.outcome)
        except Exception as e:
            logging.debug(f"Dispatch of interaction {interaction.id} failed: {e}")
            if interaction.type is discord.InteractionType.application_command:
                await self._delete_placeholder(interaction)

    @staticmethod
    async def _delete_placeholder(interaction: discord.Interaction):
        with suppress(Exception):
            message = await interaction.original_response()
            await message.delete()
