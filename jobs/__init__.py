"""Scheduled jobs."""

from .news_dispatch import register_news_dispatch

__all__ = [
    "register_news_dispatch"
]
