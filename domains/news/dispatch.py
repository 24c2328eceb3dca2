"""News dispatch cycle.

One cycle:
1. Snapshot the guild -> channel registry
2. Fetch the newest article for every topic (failures skip that topic)
3. For every registered guild, post each article it has not seen yet

Posted URLs are tracked per guild in memory for the life of the
dispatcher. A URL is marked before the send is attempted, so a failed
send is not retried on later cycles.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional

import discord

from logger import logger
from .config import TOPICS, Topic
from .formatting import build_news_embed
from .services import fetch_top_article, summarize
from .types import Article


class PostedUrls:
    """Per-guild set of article URLs already delivered."""

    def __init__(self):
        self._by_guild: dict[str, set[str]] = {}

    def mark(self, guild_id: str, url: str) -> bool:
        """Mark url as posted for guild. Returns False if it already was."""
        posted = self._by_guild.setdefault(str(guild_id), set())
        if url in posted:
            return False
        posted.add(url)
        return True


@dataclass
class CycleReport:
    """Outcome of one dispatch cycle."""

    started_at: datetime
    articles: int = 0
    sent: int = 0
    duplicates: int = 0
    failed_sends: int = 0
    failed_topics: list[str] = field(default_factory=list)
    failed_guilds: list[str] = field(default_factory=list)


class NewsDispatcher:
    """Fetches topic articles and posts them to every registered guild."""

    def __init__(
        self,
        bot,
        channel_registry,
        topics: Optional[list[Topic]] = None,
        fetch: Callable[[str], Awaitable[Optional[Article]]] = fetch_top_article,
        summarise: Callable[[str], Awaitable[Optional[str]]] = summarize,
        posted_urls: Optional[PostedUrls] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.bot = bot
        self.channel_registry = channel_registry
        self.topics = list(topics) if topics is not None else list(TOPICS)
        self.fetch = fetch
        self.summarise = summarise
        self.posted_urls = posted_urls if posted_urls is not None else PostedUrls()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def run_cycle(self) -> CycleReport:
        """Run one fetch-and-post cycle."""
        report = CycleReport(started_at=self.clock())

        # Snapshot before any fetch or send; guilds added mid-cycle wait for the next run
        channels = self.channel_registry.get()

        articles = await self._fetch_topics(report)
        report.articles = len(articles)

        if not channels:
            logger.info("News cycle: no channels registered")
            return report

        summaries: dict[str, Optional[str]] = {}

        for guild_id, channel_id in channels.items():
            channel = await self._resolve_channel(channel_id)
            if channel is None:
                logger.error(f"News cycle: could not resolve channel {channel_id} for guild {guild_id}")
                report.failed_guilds.append(guild_id)
                continue

            for topic, article in articles:
                await self._deliver(guild_id, channel, topic, article, summaries, report)

        logger.info(
            f"News cycle done: {report.sent} sent, {report.duplicates} duplicates, "
            f"{report.failed_sends} failed sends, {len(report.failed_topics)} failed topics, "
            f"{len(report.failed_guilds)} unreachable guilds"
        )
        return report

    async def _fetch_topics(self, report: CycleReport) -> list[tuple[Topic, Article]]:
        """Fetch every topic; failed or empty topics are left out."""
        results = await asyncio.gather(
            *(self.fetch(topic.query) for topic in self.topics),
            return_exceptions=True,
        )

        articles = []
        for topic, result in zip(self.topics, results):
            if isinstance(result, asyncio.CancelledError):
                raise result
            if isinstance(result, BaseException):
                logger.error(f"News fetch failed for '{topic.query}': {result}")
                report.failed_topics.append(topic.query)
                continue
            if result is None:
                continue
            articles.append((topic, result))
        return articles

    async def _resolve_channel(self, channel_id: str):
        """Look up a channel by id, from cache first then the API."""
        try:
            channel_id = int(channel_id)
        except (TypeError, ValueError):
            logger.warning(f"Invalid channel id in registry: {channel_id!r}")
            return None

        channel = self.bot.get_channel(channel_id)
        if channel is not None:
            return channel

        try:
            return await self.bot.fetch_channel(channel_id)
        except discord.DiscordException as e:
            logger.warning(f"fetch_channel({channel_id}) failed: {e}")
            return None

    async def _deliver(self, guild_id, channel, topic, article, summaries, report) -> None:
        """Post one article to one guild's channel unless already posted there."""
        if not self.posted_urls.mark(guild_id, article.url):
            report.duplicates += 1
            return

        try:
            if article.url not in summaries:
                summaries[article.url] = await self.summarise(article.summary_source)
            embed = build_news_embed(article, summaries[article.url], heading=topic.heading)
            await channel.send(embed=embed)
        except Exception as e:
            logger.error(f"Failed to post '{article.url}' in guild {guild_id}: {e}")
            report.failed_sends += 1
            return

        report.sent += 1
        logger.info(f"Posted {topic.heading} to guild {guild_id}: {article.title[:60]}")
