import os
from dotenv import load_dotenv

load_dotenv()


class MissingTokenError(RuntimeError):
    """Raised at startup when no Discord bot token is configured."""


def require_token(token: str | None) -> str:
    if not token or not token.strip():
        raise MissingTokenError("Discord bot token not set properly.")
    return token.strip()


def parse_statuses(raw: str | None) -> tuple[str, ...]:
    """Splits a '|'-separated STATUS_MESSAGES value, dropping blank entries."""
    if not raw:
        return DEFAULT_STATUSES
    statuses = tuple(part.strip() for part in raw.split("|") if part.strip())
    return statuses or DEFAULT_STATUSES


DEFAULT_STATUSES = ("Online!", "Status 2!", "Status 3!")

DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")
WEBHOOK_MONITORING_URL = os.getenv("WEBHOOK_MONITORING_URL")

STATUS_MESSAGES = parse_statuses(os.getenv("STATUS_MESSAGES"))
STATUS_INTERVAL = float(os.getenv("STATUS_INTERVAL", 16))
STATUS_INITIAL_DELAY = float(os.getenv("STATUS_INITIAL_DELAY", 1))

LOG_FILE = os.getenv("LOG_FILE", "bot.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
