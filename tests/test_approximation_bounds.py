from fractions import Fraction

import numpy as np
import pytest

from makespan_scheduler import exact_makespan, lpt_makespan, multifit_makespan, ptas_makespan


def random_instances(count: int, seed: int, max_jobs: int = 8, max_machines: int = 4, max_time: int = 30):
    rng = np.random.default_rng(seed)
    for _ in range(count):
        n = int(rng.integers(1, max_jobs + 1))
        M = int(rng.integers(1, max_machines + 1))
        p = [int(t) for t in rng.integers(1, max_time + 1, size=n)]
        yield p, M


@pytest.mark.parametrize("p, M", list(random_instances(40, seed=7)))
def test_heuristics_never_beat_the_optimum(p, M):
    optimum = exact_makespan(p, M)

    assert optimum <= lpt_makespan(p, M)
    assert optimum <= multifit_makespan(p, M)
    assert optimum <= ptas_makespan(p, M, 0.3)


@pytest.mark.parametrize("p, M", list(random_instances(40, seed=11)))
def test_lpt_bound(p, M):
    optimum = exact_makespan(p, M)
    assert 3 * M * lpt_makespan(p, M) <= (4 * M - 1) * optimum


@pytest.mark.parametrize("epsilon", [0.25, 0.3, 0.5])
@pytest.mark.parametrize("p, M", list(random_instances(25, seed=23)))
def test_ptas_bound(p, M, epsilon):
    optimum = exact_makespan(p, M)
    assert ptas_makespan(p, M, epsilon) <= (1 + Fraction(str(epsilon))) * optimum


@pytest.mark.parametrize("p, M", list(random_instances(20, seed=31, max_time=1000)))
def test_single_machine_gets_everything(p, M):
    total = sum(p)
    assert exact_makespan(p, 1) == total
    assert lpt_makespan(p, 1) == total
    assert multifit_makespan(p, 1) == total
    assert ptas_makespan(p, 1, 0.3) == total


@pytest.mark.parametrize("p, M", list(random_instances(20, seed=43)))
def test_enough_machines_for_one_job_each(p, M):
    machines = len(p) + M
    assert lpt_makespan(p, machines) == max(p)
    assert multifit_makespan(p, machines) == max(p)
