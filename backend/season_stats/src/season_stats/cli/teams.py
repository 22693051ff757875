from __future__ import annotations

import argparse
from typing import Sequence

from season_stats import queries
from season_stats.cli.common import add_dataset_arguments, dataset_from_args

TEAM_NAMES: dict[str, str] = {
    "ARI": "Arizona Diamondbacks",
    "ATL": "Atlanta Braves",
    "BAL": "Baltimore Orioles",
    "BOS": "Boston Red Sox",
    "CHC": "Chicago Cubs",
    "CIN": "Cincinnati Reds",
    "CLE": "Cleveland Guardians",
    "COL": "Colorado Rockies",
    "CWS": "Chicago White Sox",
    "DET": "Detroit Tigers",
    "HOU": "Houston Astros",
    "KC": "Kansas City Royals",
    "LAA": "Los Angeles Angels",
    "LAD": "Los Angeles Dodgers",
    "MIA": "Miami Marlins",
    "MIL": "Milwaukee Brewers",
    "MIN": "Minnesota Twins",
    "NYM": "New York Mets",
    "NYY": "New York Yankees",
    "OAK": "Oakland Athletics",
    "PHI": "Philadelphia Phillies",
    "PIT": "Pittsburgh Pirates",
    "SD": "San Diego Padres",
    "SEA": "Seattle Mariners",
    "SF": "San Francisco Giants",
    "STL": "St. Louis Cardinals",
    "TB": "Tampa Bay Rays",
    "TEX": "Texas Rangers",
    "TOR": "Toronto Blue Jays",
    "WSH": "Washington Nationals",
}


def configure_parser(parser: argparse.ArgumentParser) -> None:
    add_dataset_arguments(parser)
    parser.add_argument(
        "--names",
        action="store_true",
        help="Show the full team name next to each abbreviation.",
    )
    parser.add_argument(
        "--sort",
        choices=["abbr", "name"],
        default="abbr",
        help="Sort output by abbreviation (default) or team name (implies --names).",
    )


def _sorted_teams(codes: list[str], sort: str) -> list[tuple[str, str]]:
    labelled = [(code, TEAM_NAMES.get(code, code)) for code in codes]
    key = (lambda t: t[1]) if sort == "name" else (lambda t: t[0])
    return sorted(labelled, key=key)


def main_from_parsed(args: argparse.Namespace) -> None:
    codes = queries.teams(dataset_from_args(args))["teams"]
    show_names = args.names or args.sort == "name"
    for abbr, name in _sorted_teams(codes, args.sort):
        print(f"{abbr} - {name}" if show_names else abbr)


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="List teams with loaded season data.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
