import timeit
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, Final, NamedTuple, Self

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

import collext as cx

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 1
MIN_RUNS: Final = 20
SIZES: Final = (256, 512, 1024, 2048)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def from_fn(cls, fn: BenchFn, size: int) -> Self:
        """Estimate number of runs needed for benchmark variant."""
        warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        est = int(TARGET_BENCH_SEC / 2 / max(warmup_time, 1e-9) / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


@dataclass(slots=True)
class Benchmark:
    """A benchmarked function, and the data generator feeding it."""

    category: str
    name: str
    func: Callable[[Any], object]
    gen: Callable[[cx.Iter[int]], Any]
    sizes: tuple[int, ...] = SIZES

    def variants(self) -> cx.Seq[Variant]:
        """Build one timed variant per data size."""

        def _variant(size: int) -> Variant:
            data = self.gen(cx.Iter.from_(range(size)))
            return Variant.from_fn(partial(self.func, data), size)

        return cx.Seq(tuple(map(_variant, self.sizes)))


class Row(NamedTuple):
    """Raw row of timing data, time is per call, in seconds."""

    category: str
    name: str
    size: int
    run_idx: int
    time: float


BENCHMARKS: list[Benchmark] = []


def bench[P](
    *, gen: Callable[[cx.Iter[int]], P] = lambda size: size.collect()
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks with multiple data sizes."""

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        BENCHMARKS.append(
            Benchmark(func.__qualname__.split(".")[0], func.__name__, func, gen)
        )
        return func

    return decorator


def collect_raw_timings(benchmarks: cx.Seq[Benchmark]) -> cx.Seq[Row]:
    """Collect raw timing data for all benchmarks. Stats computed at the end."""
    CONSOLE.print("Estimating runs...", style="bold white")
    planned = cx.Seq(tuple((b, b.variants()) for b in benchmarks))
    total_runs = sum(v.n_runs for _, variants in planned for v in variants)
    CONSOLE.print(
        f"Found {benchmarks.length()} benchmarks, {total_runs} total runs",
        style="bold white",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        f = partial(_run_variant, progress, task)
        return cx.Seq(
            tuple(
                row
                for bench, variants in planned
                for variant in variants
                for row in f(variant, bench)
            )
        )


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    variant: Variant,
    bench: Benchmark,
) -> cx.Iter[Row]:
    def _update_progress(run_idx: int, fn: BenchFn) -> Row:
        progress.update(
            task,
            description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
        )
        time_taken = timeit.timeit(fn, number=CALLS_BY_RUN) / CALLS_BY_RUN
        progress.advance(task)
        return Row(bench.category, bench.name, variant.size, run_idx, time_taken)

    return cx.Iter(
        _update_progress(run_idx, variant.fn) for run_idx in range(variant.n_runs)
    )
