import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from assistant_chat.generator.errors import RunPollTimeout, StatusPollFailed

logger = logging.getLogger(__name__)

TRANSIENT_RUN_STATUSES = frozenset({"queued", "in_progress"})


async def wait_for_run(
    fetch_run: Callable[[], Awaitable[Any]],
    interval: float = 1.0,
    max_attempts: Optional[int] = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
) -> Any:
    """
    Polls a run until it leaves the transient states and returns the last run object.

    The first status check happens immediately; each further check is preceded
    by exactly one `interval` sleep. With `max_attempts` set, the loop gives up
    with RunPollTimeout once that many checks have reported a transient status.
    """
    attempts = 0
    while True:
        try:
            run = await fetch_run()
        except Exception as e:
            logger.error(f"Failed to get run status: {e}", exc_info=True)
            raise StatusPollFailed() from e
        attempts += 1

        if run.status not in TRANSIENT_RUN_STATUSES:
            logger.info(f"Run completed with status: {run.status}")
            return run

        logger.info(f"Run status: {run.status}")
        if max_attempts is not None and attempts >= max_attempts:
            logger.error(f"Giving up on run after {attempts} status checks (status: {run.status})")
            raise RunPollTimeout(attempts, run.status)
        await sleep(interval)
