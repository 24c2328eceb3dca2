"""News domain value types."""

from dataclasses import dataclass
from typing import Optional


def _text(value) -> Optional[str]:
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class Article:
    """A single NewsAPI article."""

    url: str
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    published_at: Optional[str] = None
    image_url: Optional[str] = None
    source_name: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict) -> "Article":
        """Build an Article from a NewsAPI `articles[]` item.

        Non-string text fields are dropped. Raises ValueError when the
        item has no usable url.
        """
        if not isinstance(data, dict):
            raise ValueError(f"article is {type(data).__name__}, not an object")

        url = data.get("url")
        if not isinstance(url, str) or not url.strip():
            raise ValueError(f"article has no url: {url!r}")

        source = data.get("source")
        source = source if isinstance(source, dict) else {}

        return cls(
            url=url,
            title=_text(data.get("title")) or url,
            description=_text(data.get("description")),
            content=_text(data.get("content")),
            published_at=_text(data.get("publishedAt")),
            image_url=_text(data.get("urlToImage")),
            source_name=_text(source.get("name")),
        )

    @property
    def summary_source(self) -> str:
        """Text to summarise: content, then description, then title."""
        return self.content or self.description or self.title
