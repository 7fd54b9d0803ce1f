"""
Polynomial-time approximation scheme for makespan on identical machines.

For a target makespan T, jobs longer than epsilon * T are "large". Their sizes
are rounded into ceil(1 / epsilon**2) classes of equal width covering
(epsilon * T, T], which leaves a constant number of distinct sizes, and a
dynamic program over per-class counts finds the fewest bins of capacity T
holding all of them. A binary search finds the smallest T for which the bin
count does not exceed the number of machines. The packing at that T is then
mapped back onto the real jobs and the small jobs are spread over the least
loaded machines, giving a makespan of at most (1 + epsilon) times the optimum.

All class arithmetic is exact (fractions.Fraction), so the class a job is
counted in and the class it is later looked up in always agree.
"""

import logging
import math
from collections import deque
from fractions import Fraction
from itertools import product
from typing import Sequence

from .greedy import list_schedule
from .utils.schedule import build_schedule, format_schedule
from .utils.validation import check_epsilon, check_instance

DEFAULT_EPSILON = 0.3

logger = logging.getLogger('makespan_scheduler.ptas')


def _as_fraction(epsilon) -> Fraction:
    # the decimal text keeps 0.3 as 3/10 rather than its binary expansion
    if isinstance(epsilon, Fraction):
        return epsilon
    return Fraction(str(epsilon))


def _subtract(a: tuple, b: tuple) -> tuple:
    return tuple(x - y for x, y in zip(a, b))


class SizeClasses:
    """Rounding of large job sizes at one target makespan T."""

    def __init__(self, epsilon: Fraction, T: int):
        self.epsilon = epsilon
        self.T = T
        self.count = math.ceil(1 / epsilon**2)
        self.threshold = epsilon * T
        self.width = (1 - epsilon) * T / self.count
        self.left_edges = [self.threshold + i * self.width for i in range(self.count)]

    def is_large(self, t: int) -> bool:
        return t > self.threshold

    def index(self, t: int) -> int:
        """Class of a large job; a size on a class boundary belongs to the lower class."""
        q, rem = divmod(t - self.threshold, self.width)
        return q - 1 if rem == 0 else q

    def counts(self, large_jobs) -> tuple:
        counts = [0] * self.count
        for t in large_jobs:
            counts[self.index(t)] += 1
        return tuple(counts)

    def fits(self, configuration: tuple) -> bool:
        size = sum(c * edge for c, edge in zip(configuration, self.left_edges))
        return 0 < size <= self.T


class ConfigurationTable:
    """
    Memoized minimum number of capacity-T bins for a vector of per-class job
    counts. Each entry also keeps the first configuration reaching the
    minimum so a packing can be read back without searching again.

    A table is only valid for the SizeClasses it was built with.
    """

    def __init__(self, classes: SizeClasses):
        self.classes = classes
        self._table = {(0,) * classes.count: (0, None)}

    def configurations(self, remaining: tuple):
        """All non-empty bin contents that fit in T, last class counting fastest."""
        for conf in product(*(range(c + 1) for c in remaining)):
            if self.classes.fits(conf):
                yield conf

    def min_bins(self, remaining: tuple):
        remaining = tuple(remaining)
        if remaining in self._table:
            return self._table[remaining][0]

        best = math.inf
        best_conf = None
        for conf in self.configurations(remaining):
            bins = self.min_bins(_subtract(remaining, conf))
            if bins < best:
                best = bins
                best_conf = conf

        self._table[remaining] = (1 + best, best_conf)
        return 1 + best

    def allocation(self, remaining: tuple) -> list:
        """Bin contents of a minimum packing, one configuration per bin."""
        remaining = tuple(remaining)
        self.min_bins(remaining)

        result = []
        while any(remaining):
            conf = self._table[remaining][1]
            result.append(conf)
            remaining = _subtract(remaining, conf)
        return result


def _min_machines(p: Sequence[int], classes: SizeClasses):
    large = [t for t in p if classes.is_large(t)]
    return ConfigurationTable(classes).min_bins(classes.counts(large))


def solve_ptas(p: Sequence[int], M: int = 2, epsilon: float = DEFAULT_EPSILON):
    """
    Schedule the jobs with makespan at most (1 + epsilon) times the optimum.

    Besides the usual assignment, loads and makespan, the result holds the
    target makespan the search settled on, the number of size classes and the
    rounded bin configurations placed on the first machines.
    """
    check_instance(p, M)
    check_epsilon(epsilon)
    eps = _as_fraction(epsilon)
    n = len(p)

    if n == 0:
        result = build_schedule(p, [], M)
        result.update({"target": 0, "epsilon": epsilon, "size_classes": 0, "configurations": []})
        return result

    total = sum(p)
    lower = max(-(-total // M), max(p))
    upper = 2 * lower

    while lower < upper:
        T = (lower + upper) // 2
        bins = _min_machines(p, SizeClasses(eps, T))
        logger.debug("target %d needs %s machines for its large jobs", T, bins)

        if bins <= M:
            upper = T
        else:
            lower = T + 1

    T = upper
    classes = SizeClasses(eps, T)
    large = [i for i in range(n) if classes.is_large(p[i])]
    small = [i for i in range(n) if not classes.is_large(p[i])]

    configurations = ConfigurationTable(classes).allocation(classes.counts(p[i] for i in large))

    pool = [deque() for _ in range(classes.count)]
    for i in large:
        pool[classes.index(p[i])].append(i)

    loads = [0] * M
    assignment = [0] * n
    for machine, conf in enumerate(configurations):
        for cls, count in enumerate(conf):
            for _ in range(count):
                i = pool[cls].popleft()
                assignment[i] = machine
                loads[machine] += p[i]

    list_schedule(p, loads, assignment, small)

    result = build_schedule(p, assignment, M)
    result.update(
        {
            "target": T,
            "epsilon": epsilon,
            "size_classes": classes.count,
            "configurations": [list(conf) for conf in configurations],
        }
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "target %d, %d large and %d small jobs\n%s",
            T,
            len(large),
            len(small),
            format_schedule(result, p),
        )

    return result


def ptas_makespan(p: Sequence[int], M: int, epsilon: float = DEFAULT_EPSILON) -> int:
    return solve_ptas(p, M, epsilon)["makespan"]
