"""Achievement News Bot - Main Bot.

A Discord bot that drafts achievement-news posts for newly published
RetroAchievements sets. Exposes /genachnews as a slash command and as a
prefix command (alias: gan).
"""

import discord
from discord import app_commands
from discord.ext import commands

from logger import logger
from config import DISCORD_TOKEN, COMMAND_PREFIX

from domains.achievement_news import (
    handle_genachnews,
    COMMAND_NAME,
    COMMAND_ALIASES,
    COMMAND_DESCRIPTION,
    THROTTLE_USES,
    THROTTLE_PERIOD,
)

# Initialize bot
intents = discord.Intents.default()
intents.message_content = True
bot = commands.Bot(command_prefix=COMMAND_PREFIX, intents=intents)


@bot.event
async def on_ready():
    """Called when bot is connected and ready."""
    logger.info(f"Logged in as {bot.user}")

    # Sync slash commands with Discord
    try:
        synced = await bot.tree.sync()
        logger.info(f"Synced {len(synced)} slash commands")
    except Exception as e:
        logger.error(f"Failed to sync slash commands: {e}")


# =============================================================================
# ACHIEVEMENT NEWS COMMANDS
# =============================================================================

@bot.tree.command(name=COMMAND_NAME, description=COMMAND_DESCRIPTION)
@app_commands.describe(game_id="Game ID or game page URL (e.g., 4650)")
@app_commands.checks.cooldown(THROTTLE_USES, THROTTLE_PERIOD, key=lambda i: i.user.id)
async def cmd_genachnews(interaction: discord.Interaction, game_id: str):
    """Generate an achievement-news post template."""

    async def send(text: str):
        await interaction.response.send_message(text)

    async def edit(text: str):
        await interaction.edit_original_response(content=text)

    await handle_genachnews(game_id, interaction.user.mention, send, edit)


@bot.command(name=COMMAND_NAME, aliases=COMMAND_ALIASES, help=COMMAND_DESCRIPTION)
@commands.cooldown(THROTTLE_USES, THROTTLE_PERIOD, commands.BucketType.user)
async def prefix_genachnews(ctx: commands.Context, game_id: str = None):
    """Prefix variant of /genachnews."""
    sent = None

    async def send(text: str):
        nonlocal sent
        sent = await ctx.send(text)

    async def edit(text: str):
        await sent.edit(content=text)

    await handle_genachnews(game_id, ctx.author.mention, send, edit)


@bot.tree.error
async def on_app_command_error(interaction: discord.Interaction, error: app_commands.AppCommandError):
    """Handle slash command errors."""
    if isinstance(error, app_commands.CommandOnCooldown):
        await interaction.response.send_message(
            f"Slow down! Try again in {error.retry_after:.0f}s.", ephemeral=True
        )
        return

    logger.error(f"Slash command error: {error}")
    if not interaction.response.is_done():
        await interaction.response.send_message("Something went wrong running that command.", ephemeral=True)


@bot.event
async def on_command_error(ctx: commands.Context, error: commands.CommandError):
    """Handle prefix command errors."""
    if isinstance(error, commands.CommandOnCooldown):
        await ctx.send(f"Slow down! Try again in {error.retry_after:.0f}s.")
        return
    if isinstance(error, commands.CommandNotFound):
        return

    logger.error(f"Command error in {ctx.command}: {error}")


@bot.event
async def on_error(event, *args, **kwargs):
    """Handle errors."""
    logger.error(f"Bot error in {event}: {args}")


def main():
    """Entry point."""
    if not DISCORD_TOKEN:
        logger.error("DISCORD_TOKEN not set")
        return

    logger.info("Starting Achievement News Bot...")
    bot.run(DISCORD_TOKEN)


if __name__ == "__main__":
    main()
