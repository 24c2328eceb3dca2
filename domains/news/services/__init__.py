"""News domain services."""

from .newsapi import fetch_top_article, NewsFetchError
from .gemini import summarize

__all__ = ["fetch_top_article", "NewsFetchError", "summarize"]
