"""Guild -> news channel registry, persisted as a JSON file."""

import json
import os
from pathlib import Path

from config import CHANNELS_FILE
from logger import logger


class ChannelRegistry:
    """Maps guild ids to the channel id news is posted in.

    The whole file is read on every access and rewritten on every update.
    Assumes a single writer (this process).
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def get(self) -> dict[str, str]:
        """Return the full guild -> channel mapping.

        Missing or corrupt state is treated as "no entries yet".
        """
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read channel registry {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Channel registry {self.path} is not a JSON object, ignoring")
            return {}

        return {str(guild_id): str(channel_id) for guild_id, channel_id in data.items()}

    def set(self, guild_id, channel_id) -> None:
        """Record channel_id as the news channel for guild_id (last write wins)."""
        channels = self.get()
        channels[str(guild_id)] = str(channel_id)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp_path.write_text(json.dumps(channels, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

        logger.info(f"Channel registry: guild {guild_id} -> channel {channel_id}")


# Global registry instance
channel_registry = ChannelRegistry(CHANNELS_FILE)
