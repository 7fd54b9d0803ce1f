from itertools import product
from typing import Sequence

from .utils.schedule import build_schedule
from .utils.validation import check_instance


def solve_exact(p: Sequence[int], M: int = 3):
    """
    Brute-force optimum for the M-machine makespan problem.

    Every one of the M**n assignments is tried, so this is only usable as a
    reference for small n. Among equally good assignments the first one in
    enumeration order is returned.
    """
    check_instance(p, M)
    n = len(p)
    best_makespan = float("inf")
    best_assignment = None

    for assignment in product(range(M), repeat=n):
        loads = [0] * M
        for i, m in enumerate(assignment):
            loads[m] += p[i]

        makespan = max(loads)

        if makespan < best_makespan:
            best_makespan = makespan
            best_assignment = assignment

    return build_schedule(p, best_assignment, M)


def exact_makespan(p: Sequence[int], M: int) -> int:
    return solve_exact(p, M)["makespan"]
