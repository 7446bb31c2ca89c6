import asyncio
import logging
import random
import string
import time
from typing import Optional

import aiohttp

from .config import PING_URL, TOKEN_LENGTH, USER_AGENT
from .regions import Region

logger = logging.getLogger(__name__)

LETTERS = string.ascii_lowercase + string.ascii_uppercase

def random_string(n: int, rng: random.Random) -> str:
    return "".join(rng.choice(LETTERS) for _ in range(n))

def ping_url(code: str, rng: random.Random) -> str:
    """Ping URL for a region, with a random query value so nothing in between caches it."""
    return PING_URL.format(code=code, token=random_string(TOKEN_LENGTH, rng))

async def check_latency(
    session: aiohttp.ClientSession,
    region: Region,
    rng: random.Random,
    timeout: Optional[float] = None,
) -> None:
    """
    Time one GET against the region's ping endpoint and record it on the region.

    The elapsed time is recorded whether the request succeeds or fails; on
    failure the error is stored on the region as well. Network errors never
    propagate out of the probe.
    """
    url = ping_url(region.code, rng)
    kwargs = {"headers": {"User-Agent": USER_AGENT}}
    if timeout is not None:
        kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

    start = time.perf_counter()
    try:
        response = await session.get(url, **kwargs)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        region.record(time.perf_counter() - start, e)
        logger.debug("probe %s failed: %r", region.code, e)
        return
    region.record(time.perf_counter() - start)

    # body and status are not inspected, only drained so the connection goes back to the pool
    async with response:
        try:
            await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("reading %s response failed: %r", region.code, e)
