import discord
import utils.stats as stats
from discord import app_commands
from discord_bot.bot import bot
from discord_bot.outcome import CommandUnsuccessful


status_group = app_commands.Group(
    name="status",
    description="Inspect the rotating custom status"
)



@bot.tree.command(name="ping", description="Check the gateway latency")
async def ping(interaction: discord.Interaction):
    await interaction.response.send_message(
        f"🏓 Pong! {bot.latency * 1000:.0f} ms",
        ephemeral=True
    )


@bot.tree.command(name="stats", description="Show the bot's current CPU and RAM usage")
@app_commands.checks.cooldown(1, 10.0)
async def show_stats(interaction: discord.Interaction):

    """
    Reports the bot process's resource usage.

    Sampling the CPU takes a moment, so the response is deferred first and the
    result is delivered as a follow-up.

    Args:
        interaction (discord.Interaction): The interaction object for the slash command.

    Returns:
        None
    """

    await interaction.response.defer(thinking=True, ephemeral=True)

    cpu = await stats.current_cpu_percent()
    ram = stats.current_ram_percent()

    await interaction.followup.send(
        f"📊 {stats.format_performance(cpu, ram)}",
        ephemeral=True
    )



@status_group.command(name="current", description="Show the status currently displayed")
async def status_current(interaction: discord.Interaction):
    rotator = bot.rotator
    if rotator is None or rotator.displayed is None:
        raise CommandUnsuccessful("No status has been displayed yet.")

    await interaction.response.send_message(
        f"💬 Current status: **{rotator.displayed}**",
        ephemeral=True
    )


@status_group.command(name="list", description="List every status in the rotation")
async def status_list(interaction: discord.Interaction):

    """
    Lists the rotation in display order, marking the status that will be shown next.

    Args:
        interaction (discord.Interaction): The interaction object for the slash command.

    Returns:
        None
    """

    rotator = bot.rotator
    if rotator is None:
        raise CommandUnsuccessful("Status rotation is not running.")

    cycle = rotator.cycle
    lines = [
        f"{'➡️' if position == cycle.index else '▫️'} {status}"
        for position, status in enumerate(cycle.statuses)
    ]

    await interaction.response.send_message("\n".join(lines), ephemeral=True)


bot.tree.add_command(status_group)
