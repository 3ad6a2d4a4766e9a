"""Convenience helpers for grouping tabular data end-to-end."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .grouping import group_members
from .proximity import ProximityClusterer, ProximityConfig, ProximityResult
from .structures import DisjointSets


@dataclass
class GroupingConfig:
    """Configuration parameters for grouping an edge table."""

    source_column: str = "source"
    target_column: str = "target"
    verbose: bool = True


@dataclass
class GroupingResult:
    """Result bundle returned by :func:`group_edges`."""

    dataframe: pd.DataFrame
    sets: DisjointSets[str]
    groups: Dict[str, List[str]] = field(default_factory=dict)


def group_edges(dataframe: pd.DataFrame, config: GroupingConfig | None = None) -> GroupingResult:
    """Union every source/target row and return one row per node with its group."""

    config = config or GroupingConfig()
    for column in (config.source_column, config.target_column):
        if column not in dataframe.columns:
            raise KeyError(f"Column '{column}' not found in dataframe")

    t0 = time.time()
    sources = dataframe[config.source_column].fillna("").astype(str).str.strip()
    targets = dataframe[config.target_column].fillna("").astype(str).str.strip()

    sets: DisjointSets[str] = DisjointSets()
    for source, target in zip(sources, targets):
        if source:
            sets.add(source)
        if target:
            sets.add(target)
        if source and target:
            sets.union(source, target)

    nodes = list(sets)
    result = pd.DataFrame(
        {
            "node": nodes,
            "group": [sets.find(node) for node in nodes],
            "group_size": [sets.set_size(node) for node in nodes],
        }
    )
    if config.verbose:
        print(f"   Grouped {len(nodes)} nodes from {len(dataframe)} edges into {sets.set_count()} groups.")
        print(f"   Done in {time.time() - t0:.2f}s")
    return GroupingResult(dataframe=result, sets=sets, groups=group_members(sets))


def cluster_points(
    dataframe: pd.DataFrame,
    columns: Sequence[str] | None = None,
    config: ProximityConfig | None = None,
) -> tuple[pd.DataFrame, ProximityResult]:
    """Cluster the rows of `dataframe` by the coordinates in `columns`."""

    columns = list(columns or dataframe.columns)
    missing = [column for column in columns if column not in dataframe.columns]
    if missing:
        raise KeyError(f"Column '{missing[0]}' not found in dataframe")

    points = dataframe[columns].astype(float).to_numpy()
    result = ProximityClusterer(config).cluster(points)
    df = dataframe.copy()
    df["group"] = [result.sets.find(index) for index in range(len(df))]
    df["group_size"] = [result.sets.set_size(index) for index in range(len(df))]
    return df, result


def group_file(
    input_path: str | Path,
    output_path: str | Path,
    config: Optional[GroupingConfig] = None,
) -> GroupingResult | None:
    """Group the edge table at `input_path` and write one row per node."""

    config = config or GroupingConfig()
    dataframe = _load_or_report(Path(input_path), as_text=True)
    if dataframe is None:
        return None

    try:
        result = group_edges(dataframe, config)
        save_table(result.dataframe, output_path)
    except (KeyError, ValueError) as exc:
        print(f"ERROR: {exc}")
        return None
    if config.verbose:
        print(f"   Results saved to '{output_path}'")
    return result


def cluster_points_file(
    input_path: str | Path,
    output_path: str | Path,
    columns: Sequence[str] | None = None,
    config: Optional[ProximityConfig] = None,
) -> ProximityResult | None:
    """Cluster the point table at `input_path` and write it back with group columns."""

    config = config or ProximityConfig()
    dataframe = _load_or_report(Path(input_path), as_text=False)
    if dataframe is None:
        return None

    try:
        annotated, result = cluster_points(dataframe, columns, config)
        save_table(annotated, output_path)
    except (KeyError, ValueError) as exc:
        print(f"ERROR: {exc}")
        return None
    if config.verbose:
        print(f"   Results saved to '{output_path}'")
    return result


def load_table(path: str | Path, as_text: bool = True) -> pd.DataFrame:
    path = Path(path)
    dtype = str if as_text else None
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=dtype)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path, dtype=dtype)
    raise ValueError(f"Unsupported file format: '{suffix}'")


def save_table(dataframe: pd.DataFrame, output_path: str | Path) -> None:
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")


def _load_or_report(path: Path, as_text: bool) -> pd.DataFrame | None:
    try:
        return load_table(path, as_text=as_text)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{path}'.")
        return None
    except pd.errors.EmptyDataError:
        print(f"ERROR: Input file '{path}' is empty.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{path}'. Please provide a CSV or Excel file.")
        return None
