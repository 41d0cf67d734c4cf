import logging
import discord
from discord.ext import commands
from config import STATUS_INITIAL_DELAY, STATUS_INTERVAL, STATUS_MESSAGES
from discord_bot.dispatcher import InteractionDispatcher
from discord_bot.engine import CommandEngine
from discord_bot.reporter import CommandResultReporter
from utils.status import start_status_task


intents = discord.Intents.default()



class StatusBot(commands.Bot):

    """
    The Discord session: slash commands, dispatch channels and status rotation.

    Interactions reach the command tree (a CommandEngine), which queues them for
    the InteractionDispatcher; command results are queued for the
    CommandResultReporter. Both consumers and the status rotator are started by
    `setup_hook`, which runs once per process before the gateway connects.

    Attributes:
        dispatcher (InteractionDispatcher): Consumes inbound interactions.
        reporter (CommandResultReporter): Consumes command results.
        rotator (StatusRotator | None): Set once initialization has run.
        startup_notified (bool): Whether the startup notification went out.
    """

    def __init__(self, statuses=STATUS_MESSAGES, status_interval: float = STATUS_INTERVAL,
                 status_initial_delay: float = STATUS_INITIAL_DELAY):
        super().__init__(command_prefix="!", intents=intents, tree_cls=CommandEngine)
        self.statuses = tuple(statuses)
        self.status_interval = status_interval
        self.status_initial_delay = status_initial_delay

        self.dispatcher = InteractionDispatcher(self, self.tree, self.tree.inbound)
        self.reporter = CommandResultReporter(self, self.tree.outcomes)
        self.rotator = None
        self.startup_notified = False
        self._initialized = False

    async def setup_hook(self):

        """ One-time initialization, run by discord.py after login and before connecting.

        1. Registers the known slash commands globally.
        2. Starts the interaction dispatcher and the command result reporter.
        3. Starts the status rotation.

        Returns:
            None
        """

        if self._initialized:
            return
        self._initialized = True

        synced = await self.tree.sync()
        logging.info(f"✅ {len(synced)} commands registered globally.")

        self.dispatcher.start()
        self.reporter.start()

        self.rotator = start_status_task(
            self,
            self.statuses,
            interval=self.status_interval,
            initial_delay=self.status_initial_delay,
        )

    async def close(self):
        if self.rotator is not None:
            self.rotator.stop()
        await super().close()



"""
The process-wide bot instance.

Slash commands and event handlers attach to it when discord_bot.commands and
discord_bot.events are imported.
"""
bot = StatusBot()
