#!/usr/bin/env python3
"""SpaceAce - command-line entry point.

Manages one campaign file: generate a galaxy, move the crew around it, roll
dice and inspect the roll history.
"""

import argparse
import logging
import sys

from .engine import DiceEngine, initialize_galaxy, move_to, roll_dice
from .engine.rolls import recent_rolls
from .engine.sectors import discoverable_sectors
from .models import Campaign, DieType, HexCoordinate, RollMode, Sector
from .utils import HOME_SECTOR_ID, RNG_SEED_DEFAULT, hex_distance, hex_spiral, hex_to_key
from .utils.serialization import load_campaign, save_campaign

logger = logging.getLogger(__name__)

DEFAULT_CAMPAIGN_FILE = "campaign.json"


def cmd_new(args: argparse.Namespace) -> int:
    campaign = initialize_galaxy(Campaign(seed=args.seed))
    path = save_campaign(campaign, args.file)
    print(f"New galaxy with {len(campaign.sectors)} sectors (seed {args.seed}) saved to {path}")
    return 0


def cmd_map(args: argparse.Namespace) -> int:
    campaign = _load(args.file)
    if not campaign.sectors:
        print("The galaxy is empty.")
        return 0

    origin = _origin(campaign)
    by_key = {hex_to_key(s.coordinate): s for s in campaign.sectors.values()}
    radius = max(hex_distance(s.coordinate, origin) for s in campaign.sectors.values())

    for hex in hex_spiral(origin, radius):
        sector = by_key.get(hex_to_key(hex))
        if sector is None:
            continue
        marker = "*" if sector.id == campaign.current_sector else " "
        print(f"{marker} {str(hex):>10}  {_describe(sector, reveal=args.all)}")

    reachable = discoverable_sectors(campaign)
    if reachable:
        print(f"\n{len(reachable)} unexplored sectors lie next to known space.")
    return 0


def cmd_move(args: argparse.Namespace) -> int:
    campaign = _load(args.file)
    sector = _find_sector(campaign, args.sector)
    if sector is None:
        print(f"Error: no sector named or identified by '{args.sector}'")
        return 1

    discovered = move_to(campaign, sector.id)
    save_campaign(campaign, args.file)
    print(f"Travelled to {sector.name} {sector.coordinate}")
    for sector_id in discovered:
        found = campaign.sectors[sector_id]
        print(f"  Discovered {found.name} ({found.type.value}{', dangerous' if found.is_dangerous else ''})")
    return 0


def cmd_roll(args: argparse.Namespace) -> int:
    campaign = _load(args.file)
    engine = DiceEngine()
    logger.debug(f"Randomness source: {engine.randomness_source}")
    try:
        roll = roll_dice(campaign, engine, args.die, args.mode, args.mod or [], note=args.note)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    save_campaign(campaign, args.file)

    detail = f" [rolled: {', '.join(str(r) for r in roll.results)}]" if roll.results else ""
    modifiers = f" (base {roll.base_result}, modifiers {roll.modifiers})" if roll.modifiers else ""
    print(f"{roll.die_type.value} {roll.mode.value}: {roll.result}{detail}{modifiers}")
    return 0


def cmd_odds(args: argparse.Namespace) -> int:
    check = DiceEngine.validate_roll_params(args.die, args.mode, args.mod or [])
    if not check.valid:
        print(f"Error: {check.error}")
        return 1
    p = DiceEngine.calculate_success_probability(args.target, args.die, args.mode, args.mod or [])
    print(f"Chance to reach {args.target} on {args.die} ({args.mode}): {p:.1%}")
    return 0


def cmd_history(args: argparse.Namespace) -> int:
    campaign = _load(args.file)
    rolls = recent_rolls(campaign, args.limit)
    if not rolls:
        print("No rolls yet.")
    for roll in rolls:
        note = f"  {roll.note}" if roll.note else ""
        print(f"{roll.timestamp:%Y-%m-%d %H:%M}  {roll.die_type.value:>3} {roll.mode.value:<12} {roll.result:>3}{note}")
    return 0


def _load(filepath: str) -> Campaign:
    try:
        return load_campaign(filepath)
    except FileNotFoundError:
        print(f"Error: File {filepath} not found. Run 'spaceace new' first.")
        sys.exit(1)
    except ValueError as e:
        print(f"Error loading campaign: {e}")
        sys.exit(1)


def _origin(campaign: Campaign) -> HexCoordinate:
    home = campaign.sectors.get(HOME_SECTOR_ID)
    if home is not None:
        return home.coordinate
    return next(iter(campaign.sectors.values())).coordinate


def _find_sector(campaign: Campaign, query: str) -> Sector | None:
    if query in campaign.sectors:
        return campaign.sectors[query]
    for sector in campaign.sectors.values():
        if sector.name.lower() == query.lower():
            return sector
    return None


def _describe(sector: Sector, reveal: bool = False) -> str:
    if not sector.is_discovered and not reveal:
        return "??? unknown space"
    danger = " [DANGER]" if sector.is_dangerous else ""
    hidden = "" if sector.is_discovered else " (unexplored)"
    return f"{sector.name} - {sector.type.value}{danger}{hidden}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spaceace",
        description="Campaign companion: galaxy map, dice and roll history",
    )
    parser.add_argument(
        "--file",
        default=DEFAULT_CAMPAIGN_FILE,
        help="Campaign file (relative paths are stored under ./state)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    new = subparsers.add_parser("new", help="Generate a new galaxy")
    new.add_argument("--seed", type=int, default=RNG_SEED_DEFAULT, help="Galaxy generation seed")
    new.set_defaults(func=cmd_new)

    show = subparsers.add_parser("map", help="List sectors from the home sector outward")
    show.add_argument("--all", action="store_true", help="Reveal undiscovered sectors")
    show.set_defaults(func=cmd_map)

    move = subparsers.add_parser("move", help="Travel to a sector (by ID or name)")
    move.add_argument("sector")
    move.set_defaults(func=cmd_move)

    die_choices = [d.value for d in DieType]
    mode_choices = [m.value for m in RollMode]

    roll = subparsers.add_parser("roll", help="Roll a die and record it")
    roll.add_argument("die", nargs="?", choices=die_choices, default=DieType.D20.value)
    roll.add_argument("--mode", choices=mode_choices, default=RollMode.NORMAL.value)
    roll.add_argument("--mod", type=int, action="append", help="Modifier (repeatable)")
    roll.add_argument("--note", help="Note stored with the roll")
    roll.set_defaults(func=cmd_roll)

    odds = subparsers.add_parser("odds", help="Chance of meeting a target number")
    odds.add_argument("target", type=int)
    odds.add_argument("--die", choices=die_choices, default=DieType.D20.value)
    odds.add_argument("--mode", choices=mode_choices, default=RollMode.NORMAL.value)
    odds.add_argument("--mod", type=int, action="append", help="Modifier (repeatable)")
    odds.set_defaults(func=cmd_odds)

    history = subparsers.add_parser("history", help="Show recent rolls")
    history.add_argument("--limit", type=int, default=10)
    history.set_defaults(func=cmd_history)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
