"""Aggregation and display of benchmark timings."""

import polars as pl
from rich.table import Table

import collext as cx

from ._registery import BENCHMARKS, Benchmark, Row, collect_raw_timings


def select_benchmarks(category: str | None) -> cx.Seq[Benchmark]:
    """Registered benchmarks, optionally restricted to one category."""
    return cx.Seq(
        tuple(b for b in BENCHMARKS if category is None or b.category == category)
    )


def run_pipeline(benchmarks: cx.Seq[Benchmark]) -> pl.DataFrame:
    """Time the benchmarks and aggregate the median time per call."""
    if benchmarks.is_empty():
        msg = "No benchmarks registered!"
        raise ValueError(msg)
    return collect_raw_timings(benchmarks).into(_compute_all_stats)


def _compute_all_stats(raw_rows: tuple[Row, ...]) -> pl.DataFrame:
    """Compute median stats from raw timings."""
    return (
        pl.LazyFrame(
            raw_rows,
            schema=list(Row._fields),
            orient="row",
        )
        .group_by("category", "name", "size")
        .agg(
            pl.col("time").median().alias("median"),
            pl.len().alias("runs"),
        )
        .sort("category", "name", "size")
        .collect()
    )


def to_table(stats: pl.DataFrame) -> Table:
    """Render aggregated stats as a rich table, times in microseconds."""
    table = Table(title="collext benchmarks")
    for column in ("Category", "Name", "Size", "Runs", "Median (µs)"):
        table.add_column(column, justify="right" if column != "Name" else "left")
    for row in stats.iter_rows(named=True):
        table.add_row(
            row["category"],
            row["name"],
            str(row["size"]),
            str(row["runs"]),
            f"{row['median'] * 1_000_000:.2f}",
        )
    return table
