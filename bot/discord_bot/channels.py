import asyncio
import logging



class ChannelConsumer:

    """
    Drains an asyncio.Queue, handling every item on its own task.

    Items never wait on each other: a slow handler (a network reply, a CPU sample)
    does not hold up the next item. A handler error that escapes is logged with
    its traceback and the consumer keeps going. `channel.join()` returns once every
    item taken so far has been fully handled.

    Attributes:
        channel (asyncio.Queue): The channel this consumer reads from.
    """

    name = "consumer"

    def __init__(self, channel: asyncio.Queue):
        self.channel = channel
        self._task: asyncio.Task | None = None
        self._pending: set[asyncio.Task] = set()

    async def handle(self, item):
        raise NotImplementedError

    async def run(self):
        while True:
            item = await self.channel.get()
            task = asyncio.create_task(self.handle(item), name=f"{self.name}-item")
            self._pending.add(task)
            task.add_done_callback(self._finished)

    def _finished(self, task: asyncio.Task):
        self._pending.discard(task)
        self.channel.task_done()

        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logging.error(f"❌ Unhandled error in {self.name}: {error}", exc_info=error)

    def start(self) -> asyncio.Task:
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run(), name=self.name)
        return self._task
