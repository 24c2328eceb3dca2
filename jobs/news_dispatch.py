"""News dispatch scheduled job.

Runs the news cycle on wall-clock boundaries (every 15 minutes by
default: :00, :15, :30, :45) and posts new topic articles to every
registered guild.
"""

from config import NEWS_INTERVAL_MINUTES
from logger import logger

JOB_ID = "news_dispatch"


async def news_dispatch(dispatcher):
    """Run one dispatch cycle, logging rather than raising on failure."""
    logger.debug("Running news dispatch cycle")
    try:
        await dispatcher.run_cycle()
    except Exception as e:
        logger.error(f"News dispatch cycle failed: {e}")


def register_news_dispatch(scheduler, dispatcher, minutes: int = NEWS_INTERVAL_MINUTES):
    """Register the news dispatch job with the scheduler."""
    # */N only spaces runs evenly when N divides the hour
    if minutes < 1 or 60 % minutes:
        raise ValueError(f"News interval must divide 60 minutes, got {minutes}")

    scheduler.add_job(
        news_dispatch,
        'cron',
        args=[dispatcher],
        minute=f"*/{minutes}",
        id=JOB_ID,
        max_instances=1,
        coalesce=True,
        replace_existing=True
    )
    logger.info(f"Registered news dispatch job (every {minutes} mins)")
