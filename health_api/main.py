"""Liveness endpoint for hosting platforms that expect an HTTP port.

Served from inside the bot process (see bot.setup_hook). Can also be
run alone with: uvicorn health_api.main:app --port 3000
"""

from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI

app = FastAPI(
    title="News Bot",
    description="Liveness endpoint for the News Bot",
    version="1.0.0"
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "News Bot",
        "message": "🤖 Discord bot is running.",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


def build_server(port: int, host: str = "0.0.0.0") -> uvicorn.Server:
    """Create a uvicorn server for the app, to be awaited in an existing loop."""
    config = uvicorn.Config(app, host=host, port=port, log_level="warning")
    return uvicorn.Server(config)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=3000)
