from logger import setup_logger
from config import DISCORD_TOKEN, require_token
from discord_bot.bot import bot
from discord_bot.events import *
from discord_bot.commands import *



"""
Main entry point for the Discord Bot application.

This script orchestrates the startup process by:
1. Failing fast when no bot token is configured.
2. Initializing the global logger (coloured console and log file).
3. Importing all event listeners and slash commands to register them with the bot.
4. Starting the Discord client; discord.py's own logging setup is disabled so its
   records go through our handlers.

The bot runs in a blocking loop until the process is terminated.
"""
def main():
    token = require_token(DISCORD_TOKEN)
    setup_logger()
    bot.run(token, log_handler=None)


if __name__ == "__main__":
    main()
