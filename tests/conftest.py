"""Pytest configuration and fixtures."""

import discord
import pytest
from unittest.mock import Mock, AsyncMock, patch

from domains.news.types import Article
from registry import ChannelRegistry


@pytest.fixture
def channel_registry(tmp_path):
    """A channel registry backed by a temp file."""
    return ChannelRegistry(tmp_path / "data" / "channels.json")


@pytest.fixture
def make_channel():
    """Factory for mock Discord text channels."""
    def _make(channel_id: int = 111):
        channel = Mock(id=channel_id, send=AsyncMock())
        channel.name = f"news-{channel_id}"
        return channel
    return _make


@pytest.fixture
def mock_discord_bot():
    """Create a mock Discord bot whose channel cache is `bot.channels`."""
    bot = Mock()
    bot.channels = {}
    bot.get_channel = Mock(side_effect=lambda channel_id: bot.channels.get(channel_id))
    bot.fetch_channel = AsyncMock(
        side_effect=discord.NotFound(Mock(status=404, reason="Not Found"), "Unknown Channel")
    )
    bot.user = Mock(name="NewsBot#1234")
    return bot


@pytest.fixture
def make_article():
    """Factory for articles."""
    def _make(url: str = "https://example.com/1", **kwargs):
        fields = {
            "title": "Example headline",
            "description": "Example description",
            "content": "Example content",
            "published_at": "2024-01-01T00:00:00Z",
        }
        fields.update(kwargs)
        return Article(url=url, **fields)
    return _make


@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx client."""
    with patch('httpx.AsyncClient') as mock:
        client = AsyncMock()
        mock.return_value.__aenter__.return_value = client
        yield client
