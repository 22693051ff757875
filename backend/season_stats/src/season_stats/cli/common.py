from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, TextIO

import pandas as pd

from season_stats.dataset import SeasonDataset, load_season
from season_stats.paths import season_root


def add_dataset_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--season-root",
        default=None,
        help="Directory containing one subdirectory per team (default: $SEASON_ROOT or data/<season>).",
    )
    parser.add_argument("--season", default=None, help="Season folder under data/ (default: 2025).")


def add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=["table", "csv", "json"],
        default="table",
        help="Output format (default: table).",
    )


def dataset_from_args(args: argparse.Namespace) -> SeasonDataset:
    dataset = getattr(args, "dataset", None)
    if dataset is not None:
        return dataset
    root = season_root(getattr(args, "season", None), getattr(args, "season_root", None))
    return load_season(root)


def print_result(result: Dict[str, Any], fmt: str, out: TextIO | None = None, err: TextIO | None = None) -> None:
    out = out or sys.stdout
    err = err or sys.stderr
    for warning in result.get("warnings", []):
        print(f"[season-stats] {warning}", file=err)

    rows = result.get("rows", [])
    if fmt == "json":
        print(json.dumps(result, indent=2), file=out)
        return
    if not rows:
        print("[season-stats] No matching rows.", file=err)
        return
    df = pd.DataFrame(rows)
    if fmt == "csv":
        out.write(df.to_csv(index=False))
    else:
        print(df.to_string(index=False, na_rep="-"), file=out)
