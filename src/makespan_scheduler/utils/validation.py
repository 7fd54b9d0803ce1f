from numbers import Integral
from typing import Sequence


def check_instance(p: Sequence[int], M: int):
    """Reject machine counts below one and non-positive or non-integer job times."""
    if isinstance(M, bool) or not isinstance(M, Integral) or M < 1:
        raise ValueError(f"Machine count must be a positive integer, got {M!r}.")

    for idx, t in enumerate(p):
        if isinstance(t, bool) or not isinstance(t, Integral):
            raise ValueError(f"Processing time of job {idx} must be an integer, got {t!r}.")
        if t <= 0:
            raise ValueError(f"Processing time of job {idx} must be positive, got {t}.")


def check_epsilon(epsilon: float):
    if not 0 < epsilon < 1:
        raise ValueError(f"epsilon must lie strictly between 0 and 1, got {epsilon!r}.")
