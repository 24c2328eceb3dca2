"""News domain - topic articles posted to each guild's news channel."""

from .commands import handle_setchannel, handle_guild_join, reply_error
from .dispatch import NewsDispatcher, PostedUrls, CycleReport

__all__ = [
    "handle_setchannel",
    "handle_guild_join",
    "reply_error",
    "NewsDispatcher",
    "PostedUrls",
    "CycleReport",
]
