"""Run the makespan schedulers on a job dataset and report their schedules."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from tabulate import tabulate

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT / "src"))

from makespan_scheduler import solve_exact, solve_lpt, solve_multifit, solve_ptas  # noqa: E402
from makespan_scheduler.ptas import DEFAULT_EPSILON  # noqa: E402
from makespan_scheduler.utils import format_schedule, load_tasks, processing_times  # noqa: E402

ALGORITHMS = ("exact", "lpt", "multifit", "ptas")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--dataset",
        default="dataset_9.csv",
        help="Dataset filename or absolute path (default: dataset_9.csv)",
    )
    parser.add_argument(
        "--machines",
        type=int,
        default=3,
        help="Number of identical machines",
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=DEFAULT_EPSILON,
        help=f"PTAS accuracy, strictly between 0 and 1 (default: {DEFAULT_EPSILON})",
    )
    parser.add_argument(
        "--algorithms",
        nargs="+",
        choices=ALGORITHMS,
        default=list(ALGORITHMS),
        help="Schedulers to run (the exact solver is exponential in the job count)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Optional output JSON path (defaults to results/<dataset>_schedules.json)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log search progress")
    return parser.parse_args(argv)


def resolve_dataset_path(dataset_arg: str) -> Path:
    dataset_path = Path(dataset_arg)
    if not dataset_path.is_absolute() and not dataset_path.exists():
        dataset_path = ROOT / "data" / "datasets" / dataset_arg
    if not dataset_path.exists():
        raise FileNotFoundError(f"Dataset not found: {dataset_path}")
    return dataset_path


def run_schedulers(p, machines: int, epsilon: float, algorithms) -> dict:
    solvers = {
        "exact": lambda: solve_exact(p, machines),
        "lpt": lambda: solve_lpt(p, machines),
        "multifit": lambda: solve_multifit(p, machines),
        "ptas": lambda: solve_ptas(p, machines, epsilon),
    }
    return {name: solvers[name]() for name in algorithms}


def summary_table(results: dict) -> str:
    optimum = results.get("exact", {}).get("makespan")
    rows = []
    for name, res in results.items():
        ratio = res["makespan"] / optimum if optimum else None
        rows.append((name, res["makespan"], ratio, res["loads"]))
    return tabulate(rows, headers=("algorithm", "makespan", "ratio", "loads"), floatfmt=".3f")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    dataset_path = resolve_dataset_path(args.dataset)
    tasks = load_tasks(dataset_path)
    p = processing_times(tasks)

    results = run_schedulers(p, args.machines, args.epsilon, args.algorithms)

    print(summary_table(results))
    if "ptas" in results:
        print(f"\nPTAS schedule (target {results['ptas']['target']}):")
        print(format_schedule(results["ptas"], p))

    payload = {
        "dataset": dataset_path.name,
        "num_tasks": len(tasks),
        "config": {"machines": args.machines, "epsilon": args.epsilon},
        "processing_times": p,
        "results": results,
    }

    output_path = Path(args.output) if args.output else ROOT / "results" / f"{dataset_path.stem}_schedules.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, indent=2))

    print(f"Results saved to {output_path}")


if __name__ == "__main__":
    main()
