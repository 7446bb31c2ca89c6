#!/usr/bin/env python3
"""
Example of using awsping as a library instead of the CLI.
Probes every region three times and prints each region's samples next to its mean.
"""

import anyio

from awsping.ranking import calc_latency

async def main():
    print("Probing AWS regions (3 rounds)...")
    regions = await calc_latency(3, timeout=5.0)

    for i, region in enumerate(regions):
        samples = ", ".join(f"{ms:.1f}" for ms in region.samples_ms())
        status = "ok" if region.error is None else f"last error: {region.error}"
        print(f"{i:2} {region.code:15} avg={region.latency():8.2f} ms  [{samples}]  {status}")

    print(f"\nFastest: {regions[0].name}")

if __name__ == "__main__":
    anyio.run(main)
