import asyncio
import logging
import math
import random
from typing import Awaitable, Callable, Iterable, Optional

import aiohttp

from .latency import check_latency
from .regions import REGIONS, Region, RegionDescriptor, fresh_regions

logger = logging.getLogger(__name__)

Probe = Callable[[aiohttp.ClientSession, Region, random.Random, Optional[float]], Awaitable[None]]

def _latency_key(region: Region) -> tuple[bool, float]:
    avg = region.latency()
    # regions without samples go last
    return (math.isnan(avg), 0.0 if math.isnan(avg) else avg)

def sort_by_latency(regions: list[Region]) -> list[Region]:
    """Sort regions in place, fastest mean first. Stable, so ties keep their order."""
    regions.sort(key=_latency_key)
    return regions

async def _run_rounds(
    session: aiohttp.ClientSession,
    regions: list[Region],
    repeats: int,
    probe: Probe,
    rng: random.Random,
    timeout: Optional[float],
) -> None:
    for n in range(1, repeats + 1):
        # one probe per region; gather is the barrier between rounds
        coros = [probe(session, region, rng, timeout) for region in regions]
        await asyncio.gather(*coros)
        logger.debug("round %d/%d done for %d regions", n, repeats, len(regions))

async def calc_latency(
    repeats: int,
    *,
    regions: Optional[Iterable[RegionDescriptor]] = None,
    probe: Probe = check_latency,
    rng: Optional[random.Random] = None,
    timeout: Optional[float] = None,
    session: Optional[aiohttp.ClientSession] = None,
) -> list[Region]:
    """
    Probe every region `repeats` times and return them sorted by mean latency.

    Rounds run one after another; within a round all regions are probed
    concurrently. The returned list is the one that was probed, sorted in place.
    """
    results = fresh_regions(REGIONS if regions is None else regions)
    rng = rng or random.Random()

    if session is not None:
        await _run_rounds(session, results, repeats, probe, rng, timeout)
    else:
        async with aiohttp.ClientSession() as own_session:
            await _run_rounds(own_session, results, repeats, probe, rng, timeout)

    return sort_by_latency(results)

def rank_regions(repeats: int = 1, **kwargs) -> list[Region]:
    """Blocking wrapper around calc_latency for callers without an event loop."""
    return asyncio.run(calc_latency(repeats, **kwargs))
