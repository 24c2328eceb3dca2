"""Embed formatting for news posts."""

from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import discord
from dateutil.parser import isoparse

from config import NEWS_TIMEZONE
from logger import logger
from .config import EMBED_COLOR, SUMMARY_UNAVAILABLE, UNKNOWN_SOURCE
from .types import Article

# Discord embed field limits
MAX_TITLE = 256
MAX_DESCRIPTION = 4096
MAX_AUTHOR = 256


def resolve_timezone(tz_name: str) -> ZoneInfo:
    """ZoneInfo for tz_name, or UTC if the name is unknown."""
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        logger.warning(f"Unknown timezone {tz_name!r}, using UTC: {e}")
        return ZoneInfo("UTC")


def format_published(published_at: Optional[str], tz_name: str = NEWS_TIMEZONE) -> str:
    """Render an ISO timestamp like "January 1, 2024 at 12:00 AM UTC".

    Unparseable input is returned unchanged.
    """
    if not published_at:
        return "Unknown date"

    try:
        dt = isoparse(published_at)
    except (ValueError, OverflowError, TypeError):
        return str(published_at)

    tz = resolve_timezone(tz_name)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz)
    dt = dt.astimezone(tz)

    return f"{dt:%B} {dt.day}, {dt:%Y} at {dt:%I:%M %p} {dt.tzname()}"


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit - 1] + "…"


def build_news_embed(article: Article, summary: Optional[str], heading: Optional[str] = None) -> discord.Embed:
    """Build the embed posted for one article."""
    embed = discord.Embed(
        title=_truncate(article.title, MAX_TITLE),
        url=article.url,
        description=_truncate(summary, MAX_DESCRIPTION) if summary else SUMMARY_UNAVAILABLE,
        color=EMBED_COLOR,
    )

    if heading:
        embed.set_author(name=_truncate(heading, MAX_AUTHOR))

    if article.image_url:
        embed.set_image(url=article.image_url)

    published = format_published(article.published_at)
    source = article.source_name or UNKNOWN_SOURCE
    embed.set_footer(text=f"Published: {published} | Source: {source}")

    return embed
