import numpy as np
from tabulate import tabulate
from typing import Sequence


def machine_loads(p: Sequence[int], assignment: Sequence[int], M: int):
    """Sum the processing times landing on each of the M machines."""
    if len(assignment) != len(p):
        raise ValueError(
            f"Assignment covers {len(assignment)} jobs but the instance has {len(p)}."
        )

    loads = np.zeros(M, dtype=np.int64)
    for i, m in enumerate(assignment):
        if not 0 <= m < M:
            raise ValueError(f"Job {i} assigned to machine {m}, expected 0 <= machine < {M}.")
        loads[m] += p[i]

    return [int(l) for l in loads]


def build_schedule(p: Sequence[int], assignment: Sequence[int], M: int):
    """
    Turn a per-job machine assignment into the result dict every solver returns:
    the assignment itself, the per-machine loads and the resulting makespan.
    """
    loads = machine_loads(p, assignment, M)
    return {
        "assignment": [int(m) for m in assignment],
        "loads": loads,
        "makespan": max(loads) if loads else 0,
    }


def machine_jobs(p: Sequence[int], assignment: Sequence[int], M: int):
    jobs = [[] for _ in range(M)]
    for i, m in enumerate(assignment):
        jobs[m].append(int(p[i]))
    return jobs


def format_schedule(result: dict, p: Sequence[int], tablefmt: str = "simple") -> str:
    """Render one row per machine with its jobs and load."""
    loads = result["loads"]
    per_machine = machine_jobs(p, result["assignment"], len(loads))
    rows = [
        (machine, " ".join(str(t) for t in jobs) or "-", load)
        for machine, (jobs, load) in enumerate(zip(per_machine, loads))
    ]
    return tabulate(rows, headers=("machine", "jobs", "load"), tablefmt=tablefmt)
