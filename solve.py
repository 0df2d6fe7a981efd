#!/usr/bin/env python
"""
TFT Team Composition Solver.

Usage:
    # Level 8 region team with a Demacia emblem
    python solve.py --strategy RegionRyze --slots 8 --emblem Demacia=1

    # Bronze-for-life team built around Vi
    python solve.py --strategy BronzeLife --slots 8 --champion tft16_vi
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from src.core.constants import DEFAULT_SEARCH_BUDGET, DEFAULT_TEAM_SLOTS
from src.data.loaders import get_champion_by_id, load_champions
from src.data.models.strategy import Strategy
from src.optimizer import CompSolver


def parse_emblem(value: str) -> tuple[str, int]:
    """Parse ``Trait=count`` (count defaults to 1)."""
    trait, _, count = value.partition("=")
    try:
        return trait, int(count) if count else 1
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid emblem count: {value}")


def main():
    parser = argparse.ArgumentParser(
        description="TFT Team Composition Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Two Demacia emblems at level 9:
        python solve.py --slots 9 --emblem Demacia=2

    Start from Galio and Garen:
        python solve.py --champion tft16_galio --champion tft16_garen
        """,
    )

    parser.add_argument(
        "--strategy",
        type=Strategy,
        choices=list(Strategy),
        default=Strategy.REGION_RYZE,
        help="Strategy to optimize (default: RegionRyze)",
    )
    parser.add_argument(
        "--slots",
        type=int,
        default=DEFAULT_TEAM_SLOTS,
        help=f"Team size in board slots (default: {DEFAULT_TEAM_SLOTS})",
    )
    parser.add_argument(
        "--emblem",
        type=parse_emblem,
        action="append",
        default=[],
        help="Emblem as Trait=count, repeatable",
    )
    parser.add_argument(
        "--champion",
        action="append",
        default=[],
        help="Champion id to start the team with, repeatable",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=5,
        help="Number of teams to print (default: 5)",
    )
    parser.add_argument(
        "--budget",
        type=int,
        default=DEFAULT_SEARCH_BUDGET,
        help=f"Search budget in expansions (default: {DEFAULT_SEARCH_BUDGET})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log search statistics"
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    initial_team = []
    for champion_id in args.champion:
        champion = get_champion_by_id(champion_id)
        if champion is None:
            parser.error(f"Unknown champion: {champion_id}")
        initial_team.append(champion)

    emblems: dict[str, int] = {}
    for trait, count in args.emblem:
        emblems[trait] = emblems.get(trait, 0) + count

    solver = CompSolver(search_budget=args.budget)
    try:
        teams = solver.solve(load_champions(), emblems, args.slots, args.strategy, initial_team)
    except ValueError as e:
        parser.error(str(e))

    print(f"\n=== {args.strategy.value} | {args.slots} slots ===")
    if not teams:
        print("No teams found.")
        return

    for rank, team in enumerate(teams[: args.top], 1):
        print(f"\n#{rank} Score: {team.difficulty} | StrategyVal: {team.strategy_value} ({team.strategy_name})")
        print(f"  Synergies: {', '.join(team.active_synergies)}")
        print(f"  Units: {', '.join(c.name for c in team.champions)}")


if __name__ == "__main__":
    main()
