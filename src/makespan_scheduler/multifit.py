import logging
from typing import Optional, Sequence

from .utils.schedule import build_schedule
from .utils.validation import check_instance

logger = logging.getLogger('makespan_scheduler.multifit')


def first_fit_decreasing(p: Sequence[int], M: int, capacity: int) -> Optional[list]:
    """
    Try to pack jobs, already sorted in descending order, onto M machines of
    the given capacity, each job going to the first machine it fits on.

    Returns the machine index for every job, or None if some job fits nowhere.
    """
    loads = [0] * M
    machines = []

    for t in p:
        for m in range(M):
            if loads[m] + t <= capacity:
                loads[m] += t
                machines.append(m)
                break
        else:
            return None

    return machines


def solve_multifit(p: Sequence[int], M: int = 2):
    """
    MultiFit: binary search for the smallest capacity at which first fit
    decreasing packs every job onto M machines.
    """
    check_instance(p, M)
    if not p:
        return build_schedule(p, [], M)

    order = sorted(range(len(p)), key=lambda i: p[i], reverse=True)
    sorted_p = [p[i] for i in order]

    total = sum(sorted_p)
    lb = max(-(-total // M), sorted_p[0])
    ub = total
    # everything fits on the first machine at capacity == total
    packing = first_fit_decreasing(sorted_p, M, total)

    while lb <= ub:
        guess = lb + (ub - lb) // 2
        candidate = first_fit_decreasing(sorted_p, M, guess)
        logger.debug("capacity %d %s", guess, "fits" if candidate is not None else "fails")

        if candidate is not None:
            packing = candidate
            ub = guess - 1
        else:
            lb = guess + 1

    assignment = [0] * len(p)
    for i, m in zip(order, packing):
        assignment[i] = m

    return build_schedule(p, assignment, M)


def multifit_makespan(p: Sequence[int], M: int) -> int:
    return solve_multifit(p, M)["makespan"]
