import pytest
import os
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Environment variables for testing
os.environ.setdefault("AWSPING_LOG_LEVEL", "DEBUG")

from awsping.regions import Region


class FixedProbe:
    """Fake probe that records a fixed latency (ms) per region code."""

    def __init__(self, latencies_ms: dict[str, float], fail: set[str] = frozenset()):
        self.latencies_ms = latencies_ms
        self.fail = fail
        self.calls: list[str] = []

    async def __call__(self, session, region: Region, rng, timeout=None):
        self.calls.append(region.code)
        error = ConnectionRefusedError(region.code) if region.code in self.fail else None
        region.record(self.latencies_ms[region.code] / 1000.0, error)


@pytest.fixture
def fixed_probe():
    return FixedProbe
