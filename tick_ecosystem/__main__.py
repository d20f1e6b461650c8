"""Headless ecosystem run.

Runs a seeded world for a fixed number of ticks and prints the
population table at regular intervals.

Run: python -m tick_ecosystem --ticks 3000 --seed 7
"""
from __future__ import annotations

import argparse
import logging
import sys

from tick_ecosystem.config import WorldConfig
from tick_ecosystem.engine import Engine
from tick_ecosystem.species import CATALOG
from tick_ecosystem.world import World


def format_statistics(world: World) -> str:
    stats = world.statistics()
    cells = [
        f"{name}={s.total} (m{s.males}/f{s.females})" for name, s in stats.items()
    ]
    return (
        f"t={world.time:8.1f}  animals={world.animal_count:4d}  "
        f"vegetation={world.vegetation_count:4d}  " + "  ".join(cells)
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tick_ecosystem",
        description="Run the predator/prey/vegetation simulation without a display.",
    )
    p.add_argument("--ticks", type=int, default=3000, help="Number of ticks to run")
    p.add_argument("--tps", type=int, default=60, help="Ticks per simulated time unit")
    p.add_argument("--seed", type=int, default=None, help="RNG seed (random if omitted)")
    p.add_argument("--speed", type=float, default=1.0, help="Speed multiplier (0.5 - 5.0)")
    p.add_argument("--report-every", type=int, default=300, help="Ticks between reports")
    p.add_argument("--width", type=float, default=800.0)
    p.add_argument("--height", type=float, default=600.0)
    p.add_argument(
        "--disable", action="append", default=[], choices=sorted(CATALOG),
        metavar="SPECIES", help="Species to leave out of the initial stocking",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log births, meals and deaths")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    world = World(WorldConfig(width=args.width, height=args.height), seed=args.seed, populate=False)
    for name in args.disable:
        world.toggle_species(name, False)
    world.reset()
    world.set_speed(args.speed)

    engine = Engine(world, tps=args.tps)
    report_every = max(1, args.report_every)
    ticks = 0

    def report(w: World) -> None:
        nonlocal ticks
        ticks += 1
        if ticks % report_every == 0:
            print(format_statistics(w))
        if w.animal_count == 0:
            engine.request_stop()

    engine.on_start(lambda w: print(f"seed={w.seed}\n{format_statistics(w)}"))
    engine.on_tick(report)
    engine.on_stop(lambda w: print(f"final {format_statistics(w)}"))
    engine.run(args.ticks)
    return 0


if __name__ == "__main__":
    sys.exit(main())
