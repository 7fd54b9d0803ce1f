import heapq
from typing import Sequence

from .utils.schedule import build_schedule
from .utils.validation import check_instance


def list_schedule(p: Sequence[int], loads: list, assignment: list, jobs: Sequence[int]):
    """
    Place the jobs with indices ``jobs`` one after another on the machine with
    the lowest current load (lowest index on ties). ``loads`` and
    ``assignment`` are updated in place.
    """
    for i in jobs:
        machine = min(range(len(loads)), key=lambda m: loads[m])
        loads[machine] += p[i]
        assignment[i] = machine


def solve_lpt(p: Sequence[int], M: int = 2):
    """
    Longest Processing Time first: jobs in descending order, each one to the
    least loaded machine. Worst case 4/3 - 1/(3M) times the optimum.
    """
    check_instance(p, M)
    order = sorted(range(len(p)), key=lambda i: p[i], reverse=True)

    heap = [(0, m) for m in range(M)]
    assignment = [0] * len(p)

    for i in order:
        load, machine = heapq.heappop(heap)
        assignment[i] = machine
        heapq.heappush(heap, (load + p[i], machine))

    return build_schedule(p, assignment, M)


def lpt_makespan(p: Sequence[int], M: int) -> int:
    return solve_lpt(p, M)["makespan"]
