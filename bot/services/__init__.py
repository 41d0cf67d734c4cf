from .notifications import send_discord_webhook, send_startup_notification

__all__ = [
    "send_startup_notification",
    "send_discord_webhook",
]
