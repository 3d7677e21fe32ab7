"""Shot calculator CLI — carry, club suggestion and club analysis.

Usage:
    uv run python scripts/shot_calc.py carry --speed 120 --spin 6000 --vla 20 --material rough
    uv run python scripts/shot_calc.py suggest --target 150 --material fairway --elevation 5
    uv run python scripts/shot_calc.py analyze --club "7 Iron" --material sand --increments 6
    uv run python scripts/shot_calc.py optimal --speed 120 --max-vla 18
    uv run python scripts/shot_calc.py --db other.db -v suggest --target 95 --material rough

The trajectory dataset and strategy names come from GSP_* environment
variables (or ``.env``); ``--db`` overrides GSP_TRAJECTORY_DB.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from gsp_calculator.config import load_config  # noqa: E402
from gsp_calculator.errors import GspCalculatorError  # noqa: E402
from gsp_calculator.shots.engine import ShotEngine  # noqa: E402


def _add_conditions(p: argparse.ArgumentParser) -> None:
    p.add_argument("--material", required=True, help="Ground material, e.g. fairway, rough, sand")
    p.add_argument("--up-down-lie", type=float, default=0.0, help="Degrees, + = ball above feet")
    p.add_argument("--right-left-lie", type=float, default=0.0, help="Degrees, + = pushes right")
    p.add_argument("--elevation", type=float, default=0.0, help="Metres, + = uphill target")
    p.add_argument("--altitude", type=float, default=0.0, help="Feet above sea level")


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Golf shot carry calculator")
    ap.add_argument("--db", default=None, help="SQLite trajectory dataset path")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log search details")
    sub = ap.add_subparsers(dest="command", required=True)

    carry = sub.add_parser("carry", help="Carry for a given launch")
    carry.add_argument("--speed", type=float, required=True, help="Ball speed in mph")
    carry.add_argument("--spin", type=float, required=True, help="Back spin in rpm")
    carry.add_argument("--vla", type=float, required=True, help="Vertical launch angle")
    _add_conditions(carry)

    suggest = sub.add_parser("suggest", help="Club and launch for a target carry")
    suggest.add_argument("--target", type=float, required=True, help="Target carry in metres")
    _add_conditions(suggest)

    analyze = sub.add_parser("analyze", help="Carry across a club's speed range")
    analyze.add_argument("--club", required=True, help='Club name, e.g. "7 Iron" or "54°"')
    analyze.add_argument("--increments", type=int, default=5, help="Power steps (>= 2)")
    _add_conditions(analyze)

    optimal = sub.add_parser("optimal", help="Longest-carrying measured flight at a speed")
    optimal.add_argument("--speed", type=float, required=True, help="Ball speed in mph")
    optimal.add_argument("--max-vla", type=float, default=None, help="Preferred VLA cap")
    return ap


def _run(engine: ShotEngine, args: argparse.Namespace):
    if args.command == "optimal":
        return engine.optimal_trajectory(args.speed, args.max_vla)
    conditions = dict(
        material=args.material,
        up_down_lie=args.up_down_lie,
        right_left_lie=args.right_left_lie,
        elevation=args.elevation,
        altitude=args.altitude,
    )
    if args.command == "carry":
        return engine.calculate_carry(args.speed, args.spin, args.vla, **conditions)
    if args.command == "suggest":
        return engine.suggest_shot(args.target, **conditions)
    return engine.analyze_club(args.club, increments=args.increments, **conditions)


def main() -> None:
    args = _build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config()
    if args.db:
        config = dataclasses.replace(config, db_path=args.db)

    try:
        engine = ShotEngine.from_config(config)
    except GspCalculatorError as exc:
        print(f"  [!] {exc}", file=sys.stderr)
        sys.exit(2)

    try:
        result = _run(engine, args)
    except GspCalculatorError as exc:
        print(f"  [!] {type(exc).__name__}: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        engine.close()

    if dataclasses.is_dataclass(result):
        print(json.dumps(dataclasses.asdict(result), indent=2))
    else:
        print(result.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
