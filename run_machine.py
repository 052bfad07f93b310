#!/usr/bin/env python3
"""Run the machine once from the command line and print its log.

Usage:
    python run_machine.py 42                # full theatrics, random run
    python run_machine.py 42 --seed 7       # reproducible run
    python run_machine.py 42 --no-gravity   # skip the artificial delays

Exit code is 0 when a verdict was reached, 1 when the machine jammed.
"""
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from models.result import MachineResult
from pipeline import machine
from settings import Settings

logger = logging.getLogger("run_machine")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("number", help="The value to analyse")
    parser.add_argument("--seed", type=int, default=None, help="Seed the random generator")
    parser.add_argument("--no-gravity", action="store_true", dest="no_gravity",
                        help="Disable gravity and thinking delays")
    args = parser.parse_args(argv)

    overrides: dict = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.no_gravity:
        overrides.update(gravity_min_ms=0, gravity_max_ms=0, think_delay_ms=0)
    settings = Settings(**overrides)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    logger.info("=== Running the machine on %r ===", args.number)
    result = machine.run(args.number, settings)
    print(format_result(result))
    if result.failed:
        logger.info("=== Jammed: %s ===", result.error)
    else:
        logger.info("=== Done: %s ===", result.verdict)
    return 1 if result.failed else 0


def format_result(result: MachineResult) -> str:
    lines = [f"[{e.time}] [{e.level}] {e.message}" for e in result.logs]
    lines.append("")
    lines.append(result.output)
    return "\n".join(lines)


if __name__ == "__main__":
    sys.exit(main())
