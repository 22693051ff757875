from __future__ import annotations

import argparse
import logging
from typing import Sequence

from season_stats.cli import leaderboard, player, teams


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Season stats CLI (teams, leaderboards, player lookups)."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log dataset loading details.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    teams_parser = subparsers.add_parser(
        "teams", help="List team codes with loaded batting or pitching data"
    )
    teams.configure_parser(teams_parser)

    leaderboard_parser = subparsers.add_parser(
        "leaderboard", help="Top-N players by a metric with optional qualifier and position"
    )
    leaderboard.configure_parser(leaderboard_parser)

    player_parser = subparsers.add_parser(
        "player", help="Selected batting or pitching columns for one player"
    )
    player.configure_parser(player_parser)

    opts = parser.parse_args(args)
    logging.basicConfig(level=logging.DEBUG if opts.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if opts.command == "teams":
        teams.main_from_parsed(opts)
    elif opts.command == "leaderboard":
        leaderboard.main_from_parsed(opts)
    elif opts.command == "player":
        player.main_from_parsed(opts)
    else:
        parser.error(f"Unknown command {opts.command}")


if __name__ == "__main__":
    main()
