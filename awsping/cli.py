import logging

import typer

from .config import load_settings
from .ranking import rank_regions
from .regions import Region

app = typer.Typer(help="Check latency to AWS regions")

OUT_FMT = "{:>5} {:<30} {:>20}"

def format_table(regions: list[Region]) -> list[str]:
    """Header plus one row per region, in the order given."""
    lines = [OUT_FMT.format("", "Region", "Latency")]
    for i, region in enumerate(regions):
        ms = "%.2f ms" % region.latency()
        lines.append(OUT_FMT.format(i, region.name, ms))
    return lines

def main(
    repeats: int = typer.Option(1, min=1, clamp=True, help="Number of repeats"),
):
    """Measure latency to every region and print them fastest first."""
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    regions = rank_regions(repeats, timeout=settings.timeout)

    for line in format_table(regions):
        print(line)

app.command()(main)

if __name__ == "__main__":
    app()
