from __future__ import annotations

import argparse
from typing import Sequence

from season_stats import queries
from season_stats.cli.common import add_dataset_arguments, add_format_argument, dataset_from_args, print_result


def _limit(raw: str) -> int:
    value = int(raw)
    if not 1 <= value <= queries.MAX_LIMIT:
        raise argparse.ArgumentTypeError(f"limit must be between 1 and {queries.MAX_LIMIT}")
    return value


def configure_parser(parser: argparse.ArgumentParser) -> None:
    add_dataset_arguments(parser)
    parser.add_argument("--table", choices=["batting", "pitching"], required=True)
    parser.add_argument("--metric", required=True, help='Metric name, e.g. "OPS+", "FIP", "SO/BB" or "most valuable".')
    parser.add_argument("--direction", choices=["asc", "desc"], default="desc")
    parser.add_argument("--limit", type=_limit, default=10, help=f"Rows to return (1-{queries.MAX_LIMIT}, default 10).")
    parser.add_argument("--team", default=queries.DEFAULT_TEAM, help=f"Team code (default {queries.DEFAULT_TEAM}).")
    parser.add_argument("--scope", choices=["team", "league"], default="team")
    parser.add_argument("--min-pa", type=float, default=None, help="Batting qualifier: minimum plate appearances.")
    parser.add_argument("--min-ip", type=float, default=None, help="Pitching qualifier: minimum innings pitched.")
    parser.add_argument("--position", default=None, help='Batting position filter, e.g. "2B", "OF", "utility".')
    add_format_argument(parser)


def main_from_parsed(args: argparse.Namespace) -> None:
    qualifier = None
    if args.min_pa is not None or args.min_ip is not None:
        qualifier = queries.Qualifier(min_pa=args.min_pa, min_ip=args.min_ip)
    result = queries.leaderboard(
        dataset_from_args(args),
        table=args.table,
        metric=args.metric,
        direction=args.direction,
        limit=args.limit,
        team=args.team,
        scope=args.scope,
        qualifier=qualifier,
        position=args.position,
    )
    print_result(result, args.format)


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Top-N players by a batting or pitching metric.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
