"""Command line entry point for the disjoint sets library."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .proximity import ProximityConfig
from .runner import GroupingConfig, cluster_points_file, group_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Group connected records with a union-find structure.")
    parser.add_argument("input", type=Path, help="Path to the input CSV or Excel file")
    parser.add_argument("output", type=Path, help="Path where the grouped results will be written")
    parser.add_argument(
        "--mode",
        choices=("edges", "points"),
        default="edges",
        help="Group an edge list (edges) or cluster coordinate rows by distance (points)",
    )
    parser.add_argument("--source-column", default="source", help="Edge source column (default: source)")
    parser.add_argument("--target-column", default="target", help="Edge target column (default: target)")
    parser.add_argument("--columns", nargs="+", help="Coordinate columns for points mode (default: all)")
    parser.add_argument(
        "--metric",
        default=os.getenv("DISJOINT_SETS_METRIC", "euclidean"),
        help="Distance metric for points mode (default: euclidean)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        help="Link every pair of points at most this far apart (default: DISJOINT_SETS_THRESHOLD)",
    )
    parser.add_argument(
        "--no-threshold",
        action="store_true",
        help="Ignore DISJOINT_SETS_THRESHOLD and link without a distance limit",
    )
    parser.add_argument("--max-links", type=int, help="Link only this many of the closest pairs")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Do not print progress messages")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    if args.mode == "edges":
        grouping_config = GroupingConfig(
            source_column=args.source_column,
            target_column=args.target_column,
            verbose=not args.quiet,
        )
        result = group_file(args.input, args.output, grouping_config)
    else:
        try:
            proximity_config = ProximityConfig(
                metric=args.metric,
                threshold=args.threshold,
                max_links=args.max_links,
                use_tqdm=not args.disable_tqdm,
                verbose=not args.quiet,
            )
            if args.no_threshold:
                proximity_config.threshold = None
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return 1
        result = cluster_points_file(args.input, args.output, args.columns, proximity_config)

    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
