from __future__ import annotations

import argparse
from typing import Sequence

from season_stats import queries
from season_stats.cli.common import add_dataset_arguments, add_format_argument, dataset_from_args, print_result


def _filter_pair(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"filter must look like field=value, got '{raw}'")
    return key.strip(), value.strip()


def configure_parser(parser: argparse.ArgumentParser) -> None:
    add_dataset_arguments(parser)
    parser.add_argument("--table", choices=["batting", "pitching"], required=True)
    parser.add_argument("--player", required=True, help="Player name (case-insensitive, exact).")
    parser.add_argument("--columns", nargs="+", required=True, help='Columns to return, e.g. HR RBI "OPS+".')
    parser.add_argument("--team", default=queries.DEFAULT_TEAM, help=f"Team code (default {queries.DEFAULT_TEAM}).")
    parser.add_argument("--scope", choices=["team", "league"], default="team")
    parser.add_argument(
        "--filter",
        dest="filters",
        action="append",
        type=_filter_pair,
        default=[],
        help="Exact-match filter field=value; repeatable.",
    )
    add_format_argument(parser)


def main_from_parsed(args: argparse.Namespace) -> None:
    result = queries.get_player_stats(
        dataset_from_args(args),
        table=args.table,
        player=args.player,
        columns=args.columns,
        scope=args.scope,
        team=args.team,
        filters=dict(args.filters) or None,
    )
    print_result(result, args.format)


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Show selected stats for one player.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
