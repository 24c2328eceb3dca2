"""News channel commands and guild events."""

from typing import Optional

import discord

from logger import logger
from .config import GREETING

ERROR_REPLY = "❌ Error executing command"
GUILD_ONLY_REPLY = "This command can only be used in a server."


async def reply_error(interaction: discord.Interaction) -> None:
    """Tell the invoker something went wrong, unless they already got a reply."""
    if interaction.response.is_done():
        return
    try:
        await interaction.response.send_message(ERROR_REPLY, ephemeral=True)
    except discord.HTTPException as e:
        logger.error(f"Could not send error reply: {e}")


async def handle_setchannel(interaction: discord.Interaction, channel_registry) -> None:
    """Make the invoking channel this guild's news channel."""
    if interaction.guild_id is None:
        await interaction.response.send_message(GUILD_ONLY_REPLY, ephemeral=True)
        return

    try:
        channel_registry.set(interaction.guild_id, interaction.channel_id)
        await interaction.response.send_message(
            f"✅ News will now be posted in <#{interaction.channel_id}>",
            ephemeral=True
        )
        logger.info(f"/setchannel by {interaction.user} in guild {interaction.guild_id}")
    except Exception as e:
        logger.error(f"/setchannel failed in guild {interaction.guild_id}: {e}")
        await reply_error(interaction)


def pick_news_channel(guild: discord.Guild) -> Optional[discord.TextChannel]:
    """First text channel the bot can both see and post in."""
    for channel in guild.text_channels:
        permissions = channel.permissions_for(guild.me)
        if permissions.view_channel and permissions.send_messages:
            return channel
    return None


async def handle_guild_join(guild: discord.Guild, channel_registry) -> Optional[discord.TextChannel]:
    """Pick a default news channel for a newly joined guild and say hello."""
    channel = pick_news_channel(guild)
    if channel is None:
        logger.warning(f"Joined guild {guild.id} but found no channel to post in")
        return None

    try:
        channel_registry.set(guild.id, channel.id)
    except OSError as e:
        logger.error(f"Could not record news channel for guild {guild.id}: {e}")
        return None

    try:
        await channel.send(GREETING)
    except discord.HTTPException as e:
        logger.warning(f"Greeting failed in guild {guild.id}: {e}")

    logger.info(f"Joined guild {guild.id}, news channel set to #{channel.name}")
    return channel
