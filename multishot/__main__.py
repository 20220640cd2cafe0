"""
CLI entry point. Run as:
    python -m multishot queens <searcher> <one|all> <n> [repeat|no-repeat]
    python -m multishot integrate <integrator> <id|square|logistic> <m> [n]
    python -m multishot bench [--sequential | --parallel [--njobs N]] [--repetitions N]
"""

import argparse
import sys

from .bench import BenchConfig, default_suites, run_integration, run_queens, run_suites, timed
from .domains import INTEGRANDS, PROBLEMS
from .integrate import INTEGRATORS
from .search import SEARCHERS
from .visualization import format_search_result, print_board, print_results


# Engines recurse once per digit or board row; the default limit is too
# tight for the benchmark sizes.
RECURSION_LIMIT = 20000

USAGE = (
    "multishot queens <naive|berger|pruned|eff|bespoke> <one|all> <n> [repeat|no-repeat]\n"
    "       multishot integrate <naive|berger|pruned|eff> <id|square|logistic> <m> [n]\n"
    "       multishot bench [--sequential | --parallel [--njobs <num>]] [--repetitions <num>]"
)


class UsageParser(argparse.ArgumentParser):
    """Bad input prints the usage line to stdout and exits with status 1."""

    def error(self, message):
        print(f"usage: {USAGE}")
        print(f"error: {message}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageParser(prog="multishot", usage=USAGE,
                         description="Generic search and exact integration, four ways")
    commands = parser.add_subparsers(dest="command", required=True)

    queens = commands.add_parser("queens", usage=USAGE, help="Solve n queens")
    queens.add_argument("searcher", type=str.lower,
                        choices=list(SEARCHERS) + ["bespoke"])
    queens.add_argument("mode", type=str.lower, choices=["one", "all"])
    queens.add_argument("n", type=int)
    queens.add_argument("encoding", type=str.lower, nargs="?",
                        choices=list(PROBLEMS), default="no-repeat",
                        help="Problem encoding (default no-repeat)")
    queens.add_argument("--board", action="store_true",
                        help="Draw the witness found in 'one' mode")

    integrate = commands.add_parser("integrate", usage=USAGE,
                                    help="Integrate an example function over [0, 1]")
    integrate.add_argument("integrator", type=str.lower, choices=list(INTEGRATORS))
    integrate.add_argument("integrand", type=str.lower, choices=list(INTEGRANDS))
    integrate.add_argument("m", type=int, help="Precision: result within 2^-m")
    integrate.add_argument("n", type=int, nargs="?", default=1,
                           help="Logistic map iterations (default 1)")

    bench = commands.add_parser("bench", usage=USAGE, help="Run the benchmark suites")
    runner = bench.add_mutually_exclusive_group()
    runner.add_argument("--sequential", dest="parallel", action="store_false",
                        help="Run tasks one at a time")
    runner.add_argument("--parallel", dest="parallel", action="store_true",
                        help="Run tasks on a process pool (default)")
    bench.set_defaults(parallel=True)
    bench.add_argument("--njobs", type=int, default=6, help="Pool size (default 6)")
    bench.add_argument("--repetitions", type=int, default=11,
                       help="Times each task is repeated (default 11)")
    bench.add_argument("--out", type=str, default="data", help="Output directory")
    bench.add_argument("--quiet", action="store_true", help="Less output")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))

    if args.command == "queens":
        if args.n < 0:
            parser.error(f"board size must be non-negative, got {args.n}")
        value, elapsed = timed(lambda: run_queens(
            args.searcher, args.mode, args.n, repeat=args.encoding == "repeat"))
        print(format_search_result(args.mode, value))
        print(f"{elapsed:f}")
        if args.board and args.mode == "one" and value is not None:
            print_board(value)
        return

    if args.command == "integrate":
        if args.m < 0 or args.n < 0:
            parser.error("precision and iterations must be non-negative")
        value, elapsed = timed(lambda: run_integration(
            args.integrator, args.integrand, args.m, args.n))
        print(value)
        print(f"{elapsed:f}")
        return

    config = BenchConfig(
        parallel=args.parallel,
        jobs=args.njobs,
        repetitions=args.repetitions,
        output_dir=args.out,
        verbose=not args.quiet,
    )
    if config.jobs < 1 or config.repetitions < 1:
        parser.error("--njobs and --repetitions must be at least 1")
    results = run_suites(default_suites(), config)
    if config.verbose:
        for suite_results in results.values():
            print_results(suite_results)


if __name__ == "__main__":
    main()
