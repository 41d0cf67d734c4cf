# bot/tests/test_outcome.py
"""
Tests for bot/discord_bot/outcome.py

Covers:
- classify() — every discord.py error family maps to its outcome
- outcome values — frozen, compared by value, Success has no fields
"""

import pytest
import discord
from unittest.mock import MagicMock
from discord import app_commands


class TestClassify:

    def test_check_failure_is_unmet_precondition(self):
        from discord_bot.outcome import classify, UnmetPrecondition
        outcome = classify(app_commands.CheckFailure("Only admins may do this."))
        assert outcome == UnmetPrecondition("Only admins may do this.")

    def test_cooldown_is_unmet_precondition_with_reason(self):
        """Cooldown is a CheckFailure: the retry delay becomes the reason."""
        from discord_bot.outcome import classify, UnmetPrecondition
        error = app_commands.CommandOnCooldown(app_commands.Cooldown(1, 10.0), 3.0)
        outcome = classify(error)
        assert isinstance(outcome, UnmetPrecondition)
        assert "3.00s" in outcome.reason

    def test_guild_only_is_unmet_precondition(self):
        from discord_bot.outcome import classify, UnmetPrecondition
        assert isinstance(classify(app_commands.NoPrivateMessage()), UnmetPrecondition)

    def test_command_not_found_is_unknown_command(self):
        from discord_bot.outcome import classify, UnknownCommand
        assert isinstance(classify(app_commands.CommandNotFound("ghost", [])), UnknownCommand)

    def test_signature_mismatch_is_unknown_command(self):
        """Discord's copy of the command is out of date: same remedy as unknown."""
        from discord_bot.outcome import classify, UnknownCommand
        command = MagicMock()
        command.qualified_name = "status"
        assert isinstance(classify(app_commands.CommandSignatureMismatch(command)), UnknownCommand)

    def test_transformer_error_is_bad_arguments(self):
        from discord_bot.outcome import classify, BadArguments
        error = app_commands.TransformerError("abc", discord.AppCommandOptionType.integer, MagicMock())
        assert isinstance(classify(error), BadArguments)

    def test_invoke_error_is_execution_exception_with_original(self):
        from discord_bot.outcome import classify, ExecutionException
        original = ZeroDivisionError("division by zero")
        command = MagicMock()
        command.name = "stats"

        outcome = classify(app_commands.CommandInvokeError(command, original))

        assert isinstance(outcome, ExecutionException)
        assert outcome.detail is original
        assert "ZeroDivisionError" in outcome.reason

    def test_command_unsuccessful_is_unsuccessful(self):
        from discord_bot.outcome import classify, CommandUnsuccessful, Unsuccessful
        assert classify(CommandUnsuccessful("Nothing to show.")) == Unsuccessful("Nothing to show.")

    def test_any_other_error_is_other(self):
        from discord_bot.outcome import classify, Other
        assert classify(app_commands.AppCommandError("weird")) == Other("weird")

    def test_empty_message_gives_no_reason(self):
        from discord_bot.outcome import classify
        assert classify(app_commands.CheckFailure()).reason is None


class TestOutcomeValues:

    def test_outcomes_are_frozen(self):
        from dataclasses import FrozenInstanceError
        from discord_bot.outcome import BadArguments
        outcome = BadArguments("x")
        with pytest.raises(FrozenInstanceError):
            outcome.reason = "y"

    def test_variants_with_same_reason_are_not_equal(self):
        from discord_bot.outcome import Unsuccessful, Other
        assert Unsuccessful("x") != Other("x")

    def test_success_carries_no_fields(self):
        from dataclasses import fields
        from discord_bot.outcome import Success
        assert fields(Success) == ()
        assert Success() == Success()
