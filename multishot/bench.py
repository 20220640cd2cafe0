"""
Benchmark harness: run every (engine, input, repetition) and record timings.

A suite is a named list of tasks. Each task is run, timed, and turned into
one CSV row:

    search:       searcher,mode,repeat,input_size,elapsed_seconds,result
    integration:  integrator,precision,iterations,elapsed_seconds,result

Tasks are plain dataclasses holding names, not callables, so they can be
shipped to worker processes. In parallel mode each worker returns the
result of its own task and the pool hands results back in task order, so
nothing is shared between workers. A task that raises aborts the run.
"""

import csv
import os
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from itertools import product
from typing import Callable, Union

from .core.dyadic import ZERO
from .domains import make_integrand, make_problem
from .integrate import get_integrator
from .search import BESPOKE, get_searcher
from .visualization import format_search_result


# Naive search is not run past this board size: it would not finish in
# any reasonable time.
NAIVE_SEARCH_LIMIT = 10


@dataclass
class BenchConfig:
    """
    parallel:     use a process pool instead of running tasks one by one
    jobs:         pool size in parallel mode
    repetitions:  how many times each task is repeated
    output_dir:   where the per-suite CSV files go
    verbose:      print progress
    """
    parallel: bool = True
    jobs: int = 6
    repetitions: int = 11
    output_dir: str = "data"
    verbose: bool = True


@dataclass(frozen=True)
class QueensTask:
    searcher: str
    mode: str             # "one" or "all"
    repeat: bool          # True: n_queens, False: n_queens_no_repeat
    size: int

    @property
    def name(self):
        return f"{self.searcher} {self.mode} n={self.size}"


@dataclass(frozen=True)
class IntegrationTask:
    integrator: str
    integrand: str        # "id", "square" or "logistic"
    precision: int
    iterations: int = 1

    @property
    def name(self):
        return f"{self.integrator} {self.integrand} k={self.precision} n={self.iterations}"


Task = Union[QueensTask, IntegrationTask]


@dataclass
class TaskResult:
    task: Task
    result: str
    elapsed: float

    def to_csv_row(self) -> list:
        t = self.task
        elapsed = f"{self.elapsed:f}"
        if isinstance(t, QueensTask):
            repeat = "true" if t.repeat else "false"
            return [t.searcher, t.mode, repeat, str(t.size), elapsed, self.result]
        return [t.integrator, str(t.precision), str(t.iterations), elapsed, self.result]


@dataclass
class Suite:
    """A named group of tasks whose results share one output file."""
    filename: str
    tasks: list = field(default_factory=list)


def timed(fn: Callable):
    """Run fn() and return (result, wall-clock seconds)."""
    t0 = time.perf_counter()
    result = fn()
    return result, time.perf_counter() - t0


# ── Single tasks ─────────────────────────────────────────────────────────────

def run_queens(searcher: str, mode: str, size: int, repeat: bool = False):
    """Solve n queens once; returns the raw witness, witness list or None."""
    if mode not in ("one", "all"):
        raise ValueError(f"unknown mode {mode!r}; expected 'one' or 'all'")
    if searcher == "bespoke":
        return BESPOKE["find_" + mode](size)
    engine = get_searcher(searcher)
    problem = make_problem("repeat" if repeat else "no-repeat", size)
    return engine["find_" + mode](problem)


def run_integration(integrator: str, integrand: str, precision: int, iterations: int = 1):
    """Integrate once; returns the canonical Dyadic."""
    engine = get_integrator(integrator)
    return engine["integrate"](precision, make_integrand(integrand, iterations))


def _skipped(task: Task) -> bool:
    if isinstance(task, QueensTask):
        return task.searcher == "naive" and task.size > NAIVE_SEARCH_LIMIT
    return (task.integrator == "naive" and task.integrand == "logistic"
            and task.precision == 15 and task.iterations > 3)


def run_task(task: Task) -> TaskResult:
    """Run and time one task. Skipped tasks report an empty result in 0s."""
    if isinstance(task, QueensTask):
        if _skipped(task):
            empty = None if task.mode == "one" else []
            return TaskResult(task, format_search_result(task.mode, empty), 0.0)
        value, elapsed = timed(lambda: run_queens(
            task.searcher, task.mode, task.size, task.repeat))
        return TaskResult(task, format_search_result(task.mode, value), elapsed)

    if _skipped(task):
        return TaskResult(task, str(ZERO), 0.0)
    value, elapsed = timed(lambda: run_integration(
        task.integrator, task.integrand, task.precision, task.iterations))
    return TaskResult(task, str(value), elapsed)


# ── Task preparation ─────────────────────────────────────────────────────────

def prepare_queens(searchers, mode: str, repeat: bool, sizes) -> list:
    """Every (size, searcher) pair, size-major."""
    return [QueensTask(searcher, mode, repeat, size)
            for size, searcher in product(sizes, searchers)]


def prepare_integration(integrators, integrand: str, inputs) -> list:
    """Every ((precision, iterations), integrator) pair, input-major."""
    return [IntegrationTask(integrator, integrand, precision, iterations)
            for (precision, iterations), integrator in product(inputs, integrators)]


def default_suites() -> list:
    """The full experiment grid: five suites, one CSV file each."""
    searchers = ["naive", "berger", "pruned", "eff", "bespoke"]
    integrators = ["naive", "berger", "pruned", "eff"]
    return [
        Suite("queens.one.csv", prepare_queens(searchers, "one", False, [20, 24, 28])),
        Suite("queens.all.csv", prepare_queens(searchers, "all", False, [8, 10, 12])),
        Suite("integration.id.csv", prepare_integration(integrators, "id", [(20, 1)])),
        Suite("integration.square.csv", prepare_integration(
            integrators, "square", [(14, 1), (17, 1), (20, 1)])),
        Suite("integration.logistic.csv", prepare_integration(
            integrators, "logistic", [(15, n) for n in range(1, 6)])),
    ]


# ── Runners ──────────────────────────────────────────────────────────────────

def run_sequential(tasks, verbose: bool = False) -> list:
    results = []
    for i, task in enumerate(tasks):
        result = run_task(task)
        results.append(result)
        if verbose:
            print(f"  [{i + 1}/{len(tasks)}] {task.name}: {result.result} "
                  f"({result.elapsed:.3f}s)")
    return results


def run_parallel(tasks, jobs: int, verbose: bool = False) -> list:
    """Results come back in task order whatever order the workers finish in."""
    if jobs < 1:
        raise ValueError(f"jobs must be at least 1, got {jobs}")
    with ProcessPoolExecutor(max_workers=jobs) as pool:
        results = list(pool.map(run_task, tasks))
    if verbose:
        print(f"  {len(results)} tasks finished on {jobs} workers")
    return results


def run_suites(suites, config: BenchConfig) -> dict:
    """
    Run each suite with every task repeated config.repetitions times
    (repetitions adjacent), and write one CSV file per suite.

    Returns {filename: [TaskResult, ...]}.
    """
    os.makedirs(config.output_dir, exist_ok=True)
    all_results = {}
    for suite in suites:
        tasks = [task for task in suite.tasks for _ in range(config.repetitions)]
        if config.verbose:
            mode = f"parallel, {config.jobs} jobs" if config.parallel else "sequential"
            print(f"\n--- {suite.filename}: {len(tasks)} tasks ({mode}) ---")
        if config.parallel:
            results = run_parallel(tasks, config.jobs, verbose=config.verbose)
        else:
            results = run_sequential(tasks, verbose=config.verbose)
        path = os.path.join(config.output_dir, suite.filename)
        export_csv(results, path)
        if config.verbose:
            print(f"  Results written to {path}")
        all_results[suite.filename] = results
    return all_results


def export_csv(results, path: str):
    with open(path, "w", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        for result in results:
            writer.writerow(result.to_csv_row())
