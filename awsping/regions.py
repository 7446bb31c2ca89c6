import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

@dataclass(frozen=True)
class RegionDescriptor:
    name: str         # "US-East (Virginia)"
    code: str         # "us-east-1"

REGIONS: tuple[RegionDescriptor, ...] = (
    RegionDescriptor(name="US-East (Virginia)", code="us-east-1"),
    RegionDescriptor(name="US-West (California)", code="us-west-1"),
    RegionDescriptor(name="US-West (Oregon)", code="us-west-2"),
    RegionDescriptor(name="Asia Pacific (Mumbai)", code="ap-south-1"),
    RegionDescriptor(name="Asia Pacific (Seoul)", code="ap-northeast-2"),
    RegionDescriptor(name="Asia Pacific (Singapore)", code="ap-southeast-1"),
    RegionDescriptor(name="Asia Pacific (Sydney)", code="ap-southeast-2"),
    RegionDescriptor(name="Asia Pacific (Tokyo)", code="ap-northeast-1"),
    RegionDescriptor(name="Europe (Ireland)", code="eu-west-1"),
    RegionDescriptor(name="Europe (Frankfurt)", code="eu-central-1"),
    RegionDescriptor(name="South America (São Paulo)", code="sa-east-1"),
)

@dataclass
class Region:
    """One AWS region and the round-trip durations measured against it."""
    name: str
    code: str
    latencies: list[float] = field(default_factory=list)  # seconds, one per probe
    error: Optional[BaseException] = None

    def record(self, elapsed: float, error: Optional[BaseException] = None) -> None:
        # the error is the last round's, not accumulated
        self.latencies.append(elapsed)
        self.error = error

    def samples_ms(self) -> list[float]:
        return [seconds * 1000.0 for seconds in self.latencies]

    def latency(self) -> float:
        """Mean latency in ms, failed probes included. NaN when nothing was recorded."""
        if not self.latencies:
            return math.nan
        return sum(self.samples_ms()) / len(self.latencies)

def fresh_regions(descriptors: Iterable[RegionDescriptor] = REGIONS) -> list[Region]:
    return [Region(name=d.name, code=d.code) for d in descriptors]
