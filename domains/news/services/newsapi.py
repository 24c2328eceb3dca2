"""NewsAPI client - newest article for a search query."""

from typing import Optional

import httpx

from config import NEWS_API_KEY, NEWS_LANGUAGE, HTTP_TIMEOUT_SECONDS
from logger import logger
from ..config import NEWS_API_URL
from ..types import Article


class NewsFetchError(Exception):
    """NewsAPI request failed or returned an unusable payload."""


async def fetch_top_article(query: str) -> Optional[Article]:
    """Fetch the most recently published article matching query.

    Returns None when the search has no results. Raises NewsFetchError
    on network, HTTP or payload errors.
    """
    if not NEWS_API_KEY:
        raise NewsFetchError("NEWS_API_KEY not configured")

    params = {
        "q": query,
        "sortBy": "publishedAt",
        "language": NEWS_LANGUAGE,
        "pageSize": 1,
        "apiKey": NEWS_API_KEY,
    }

    try:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as client:
            response = await client.get(NEWS_API_URL, params=params)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPError as e:
        raise NewsFetchError(f"NewsAPI request for '{query}' failed: {e}") from e
    except ValueError as e:
        raise NewsFetchError(f"NewsAPI returned invalid JSON for '{query}'") from e

    if not isinstance(data, dict):
        raise NewsFetchError(f"NewsAPI response for '{query}' is not an object")

    if data.get("status") == "error":
        raise NewsFetchError(f"NewsAPI error for '{query}': {data.get('code')} - {data.get('message')}")

    articles = data.get("articles")
    if not isinstance(articles, list):
        raise NewsFetchError(f"NewsAPI response for '{query}' has no article list")

    if not articles:
        logger.info(f"No articles for '{query}'")
        return None

    try:
        article = Article.from_api(articles[0])
    except ValueError as e:
        raise NewsFetchError(f"Malformed article for '{query}': {e}") from e

    logger.info(f"Fetched article for '{query}': {article.title[:60]}")
    return article
