import asyncio
import logging
import discord
from discord.ext import tasks



class StatusCycle:

    """
    An ordered, fixed list of status strings with a circular cursor.

    Attributes:
        statuses (tuple[str, ...]): The strings to rotate through, in order.
        index (int): Position of the status that will be pushed next.
    """

    def __init__(self, statuses):
        self.statuses = tuple(statuses)
        if not self.statuses:
            raise ValueError("A status cycle needs at least one status")
        self.index = 0

    def __len__(self) -> int:
        return len(self.statuses)

    @property
    def current(self) -> str:
        return self.statuses[self.index]

    def advance(self) -> str:
        self.index = (self.index + 1) % len(self.statuses)
        return self.current


def is_connected(session: discord.Client) -> bool:
    """True while the gateway session is ready and its websocket is open."""
    if not session.is_ready() or session.is_closed():
        return False
    ws = session.ws
    return ws is not None and ws.open



class StatusRotator:

    """
    Periodically pushes the next string of a StatusCycle as the bot's custom status.

    The rotator is the only writer of the bot presence and of the cycle cursor.
    Ticks happen on a discord.ext.tasks loop: the first one after the session is
    ready plus a short delay, then one every interval. A tick while the session is
    disconnected does nothing, and a failed push is logged without stopping the
    rotation.

    Attributes:
        session (discord.Client): The live session whose presence is updated.
        cycle (StatusCycle): The statuses to rotate and the current cursor.
        initial_delay (float): Seconds to wait after ready before the first tick.
        displayed (str | None): The status last pushed successfully, if any.
    """

    def __init__(self, session: discord.Client, statuses, interval: float = 16, initial_delay: float = 1):
        self.session = session
        self.cycle = StatusCycle(statuses)
        self.initial_delay = initial_delay
        self.displayed: str | None = None

        self.loop = tasks.loop(seconds=interval)(self.tick)
        self.loop.before_loop(self._wait_for_session)

    async def _wait_for_session(self):
        await self.session.wait_until_ready()
        await asyncio.sleep(self.initial_delay)

    async def tick(self):

        """ Pushes the current status and advances the cursor, if connected.

        Returns:
            None: Disconnected ticks are skipped silently, and push errors are
                logged with the status text that was being set.
        """

        if not is_connected(self.session):
            return

        status = self.cycle.current
        try:
            await self.session.change_presence(activity=discord.CustomActivity(name=status))
            self.displayed = status
            self.cycle.advance()
        except Exception as e:
            logging.error(f"❌ Error setting status: {e} | {status}")

    def start(self):
        if not self.loop.is_running():
            self.loop.start()

    def stop(self):
        self.loop.cancel()



def start_status_task(bot: discord.Client, statuses, interval: float = 16, initial_delay: float = 1) -> StatusRotator:

    """ Creates a StatusRotator for the bot and starts its background loop.

    Args:
        bot (discord.Client): The bot instance whose custom status will rotate.
        statuses (Iterable[str]): The status strings, in display order.
        interval (float): Seconds between two pushes.
        initial_delay (float): Seconds to wait after ready before the first push.

    Returns:
        StatusRotator: The running rotator.
    """

    rotator = StatusRotator(bot, statuses, interval=interval, initial_delay=initial_delay)
    rotator.start()
    logging.info(f"🔁 Status rotation started ({len(rotator.cycle)} statuses every {interval:g}s)")
    return rotator
