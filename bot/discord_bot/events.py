import logging
import utils.stats as stats
from discord_bot.bot import bot
from services.notifications import send_startup_notification



"""
Handles the gateway becoming ready.

This event can fire again after a reconnect; one-time initialization lives in
StatusBot.setup_hook. Every ready:
1. Logs the connected bot user.
2. Logs the CPU and RAM usage at ready.
Only the first ready:
3. Sends the startup notification to the monitoring webhook.

Returns:
    None
"""
@bot.event
async def on_ready():
    logging.info(f"✅ Online as {bot.user}")

    cpu = await stats.current_cpu_percent()
    ram = stats.current_ram_percent()
    logging.info(f"CPU at Ready: {cpu:.1f}%")
    logging.info(f"RAM at Ready: {ram:.1f}%")

    if bot.startup_notified:
        return
    bot.startup_notified = True

    await send_startup_notification(
        bot_name=str(bot.user),
        performance=stats.format_performance(cpu, ram),
        statuses=bot.statuses,
    )


@bot.event
async def on_resumed():
    logging.info("🔄 Gateway session resumed")
