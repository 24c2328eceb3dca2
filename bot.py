"""News Bot - Main Bot.

Posts the newest article for each configured topic, summarised by
Gemini, to every guild's news channel on a timer. Admins pick the
channel with /setchannel.
"""

import asyncio

import discord
from discord import app_commands
from discord.ext import commands
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from registry import channel_registry
from logger import logger
from config import DISCORD_TOKEN, PORT

from domains.news import NewsDispatcher, handle_setchannel, handle_guild_join, reply_error
from health_api.main import build_server
from jobs import register_news_dispatch

# Initialize bot - guild events and slash commands only, no message content
intents = discord.Intents.default()
bot = commands.Bot(command_prefix="/", intents=intents)

# Initialize scheduler
scheduler = AsyncIOScheduler()

# Posted-URL history lives on the dispatcher and resets on restart
dispatcher = NewsDispatcher(bot, channel_registry)

health_server = build_server(PORT)
_health_task = None


async def _serve_health():
    """Run the liveness server; a failure here must not take the bot down."""
    try:
        await health_server.serve()
    except (OSError, SystemExit) as e:
        logger.error(f"Health server stopped: {e}")


@bot.event
async def setup_hook():
    """Called once before connecting to the gateway."""
    global _health_task
    _health_task = asyncio.create_task(_serve_health())
    logger.info(f"Web server running on port {PORT}")


@bot.event
async def on_ready():
    """Called when bot is connected and ready (also after reconnects)."""
    logger.info(f"Logged in as {bot.user}")

    # Sync slash commands with Discord
    try:
        synced = await bot.tree.sync()
        logger.info(f"Synced {len(synced)} slash commands")
    except Exception as e:
        logger.error(f"Failed to sync slash commands: {e}")

    if scheduler.running:
        return

    register_news_dispatch(scheduler, dispatcher)
    scheduler.start()
    logger.info(f"Scheduler started with {len(scheduler.get_jobs())} jobs")
    logger.info(f"Bot ready - {len(channel_registry.get())} news channels registered")


@bot.event
async def on_guild_join(guild: discord.Guild):
    """Pick a default news channel when added to a server."""
    await handle_guild_join(guild, channel_registry)


@bot.tree.command(name="setchannel", description="Set the channel for news posts")
@app_commands.guild_only()
@app_commands.default_permissions(manage_guild=True)
async def cmd_setchannel(interaction: discord.Interaction):
    """Post news in the channel this command is used in."""
    await handle_setchannel(interaction, channel_registry)


@bot.tree.error
async def on_app_command_error(interaction: discord.Interaction, error: app_commands.AppCommandError):
    """Handle slash command errors."""
    logger.error(f"Command error in /{interaction.command.name if interaction.command else '?'}: {error}")
    await reply_error(interaction)


@bot.event
async def on_error(event, *args, **kwargs):
    """Handle errors."""
    logger.exception(f"Bot error in {event}: {args}")


def main():
    """Entry point."""
    if not DISCORD_TOKEN:
        logger.error("DISCORD_TOKEN not set")
        return

    logger.info("Starting News Bot...")
    bot.run(DISCORD_TOKEN)


if __name__ == "__main__":
    main()
