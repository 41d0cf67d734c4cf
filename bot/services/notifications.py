import logging
import aiohttp
from datetime import datetime, timezone
from config import WEBHOOK_MONITORING_URL



async def send_discord_webhook(webhook_url: str | None, embed: dict):
    """Posts a single embed to a Discord webhook; never raises."""
    if not webhook_url:
        logging.debug("No monitoring webhook configured, skipping notification")
        return

    try:
        async with aiohttp.ClientSession() as session:
            payload = {"embeds": [embed]}
            async with session.post(webhook_url, json=payload) as response:
                if response.status == 204:
                    logging.info("📨 Monitoring notification sent")
                else:
                    logging.error(f"❌ Monitoring webhook error: {response.status}")
    except Exception as e:
        logging.error(f"💥 Unable to send monitoring notification: {e}")


async def send_startup_notification(bot_name: str, performance: str, statuses, webhook_url: str | None = None):

    """
    Sends a startup notification to the monitoring channel via Webhook.

    The embed carries the bot user, the resource usage measured right after the
    gateway became ready and the statuses that will be rotated. Nothing is sent
    when no monitoring URL is configured.

    Args:
        bot_name (str): Display name of the logged-in bot user.
        performance (str): Formatted CPU/RAM summary at ready.
        statuses (Iterable[str]): The rotating status strings.
        webhook_url (str | None): Overrides WEBHOOK_MONITORING_URL.

    Returns:
        None
    """

    embed = {
        "title": "✅ Bot Online",
        "description": f"**{bot_name}** connected to the gateway and registered its commands.",
        "color": 3066993,
        "fields": [
            {"name": "Performance", "value": performance, "inline": True},
            {"name": "Statuses", "value": "\n".join(statuses) or "—", "inline": True},
        ],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    await send_discord_webhook(webhook_url or WEBHOOK_MONITORING_URL, embed)
