# bot/tests/conftest.py
"""
Shared fixtures for the bot tests.
No real Discord connection: sessions and interactions are mocked.
"""
import sys
import os
import pytest
from unittest.mock import AsyncMock, MagicMock

# Puts bot/ on the Python path so the modules can be found
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

os.environ.setdefault("DISCORD_TOKEN", "test-token")

import discord


def make_interaction(responded=False, guild_id=None, interaction_type=discord.InteractionType.application_command):
    """Helper: mocked discord.Interaction with response/follow-up channels."""
    interaction = MagicMock()
    interaction.id = 1234
    interaction.type = interaction_type
    interaction.guild_id = guild_id
    interaction.command_failed = False
    interaction.response.is_done = MagicMock(return_value=responded)
    interaction.response.send_message = AsyncMock()
    interaction.followup.send = AsyncMock()
    return interaction


def make_session(guilds=None):
    """Helper: mocked session that resolves only the given {id: name} guilds."""
    guilds = guilds or {}
    session = MagicMock()

    def get_guild(guild_id):
        if guild_id not in guilds:
            return None
        guild = MagicMock()
        guild.name = guilds[guild_id]
        return guild

    session.get_guild = MagicMock(side_effect=get_guild)
    return session


def make_tree_with_failing_command(name="explode", error=None):
    """Helper: real CommandEngine on a bare bot, with one slash command that raises."""
    from discord.ext import commands
    from discord_bot.engine import CommandEngine

    bot = commands.Bot(command_prefix="!", intents=discord.Intents.none(), tree_cls=CommandEngine)
    error = error or ValueError("kaboom")

    @bot.tree.command(name=name, description="Always fails")
    async def failing(interaction: discord.Interaction):
        raise error

    return bot.tree


def make_command_interaction(tree, name, responded=False):
    """Helper: mocked slash command interaction resolved by discord.py against the given tree."""
    interaction = make_interaction(responded=responded)
    interaction.data = {"name": name, "type": 1}
    interaction._state._command_tree = tree
    return interaction


@pytest.fixture
def interaction():
    return make_interaction()


@pytest.fixture
def session():
    return make_session()
