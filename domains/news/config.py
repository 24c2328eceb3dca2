"""News domain configuration."""

from dataclasses import dataclass

from config import NEWS_TOPICS


@dataclass(frozen=True)
class Topic:
    """A search query polled every dispatch cycle."""

    query: str
    heading: str


DEFAULT_TOPICS = [
    Topic(query="technology", heading="🧠 Tech News"),
    Topic(query="israel iran", heading="🌍 Israel-Iran News"),
]


def parse_topics(raw: str) -> list[Topic]:
    """Parse "query|heading;query|heading" into topics.

    A missing heading falls back to the query itself.
    """
    topics = []
    for chunk in raw.split(";"):
        query, _, heading = chunk.partition("|")
        query = query.strip()
        if not query:
            continue
        topics.append(Topic(query=query, heading=heading.strip() or query))
    return topics


TOPICS = parse_topics(NEWS_TOPICS) or DEFAULT_TOPICS

# NewsAPI
NEWS_API_URL = "https://newsapi.org/v2/everything"

# Gemini
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1/models"
SUMMARY_PROMPT = "Summarize in 2 sentences:\n{text}"
GENERATION_CONFIG = {
    "temperature": 0.7,
    "candidateCount": 1,
    "maxOutputTokens": 256,
    "topP": 0.95,
    "topK": 40,
}

# Embed
SUMMARY_UNAVAILABLE = "_Summary unavailable_"
UNKNOWN_SOURCE = "Unknown"
EMBED_COLOR = 0x5865F2
GREETING = "🤖 Thanks for adding me! I'll post news here."
