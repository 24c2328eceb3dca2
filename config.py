"""Global configuration for the News Bot."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Discord
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")

# NewsAPI (newsapi.org)
NEWS_API_KEY = os.getenv("NEWS_API_KEY")
NEWS_LANGUAGE = os.getenv("NEWS_LANGUAGE", "en")

# Google Gemini - GOOGLE_API_KEY accepted for older deployments
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash-lite-001")

# Dispatch cycle
NEWS_INTERVAL_MINUTES = int(os.getenv("NEWS_INTERVAL_MINUTES", "15"))
NEWS_TIMEZONE = os.getenv("NEWS_TIMEZONE", "UTC")
NEWS_TOPICS = os.getenv("NEWS_TOPICS", "")  # "query|heading;query|heading"

# Outbound HTTP calls
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "15"))

# Liveness web server
PORT = int(os.getenv("PORT", "3000"))

# Persisted guild -> channel map
CHANNELS_FILE = Path(os.getenv("CHANNELS_FILE", Path(__file__).parent / "data" / "channels.json"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("LOG_DIR", Path(os.getenv("LOCALAPPDATA", ".")) / "news-bot" / "logs"))
LOG_DIR.mkdir(parents=True, exist_ok=True)
