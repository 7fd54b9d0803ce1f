"""Top-level package for the identical-machine makespan scheduling toolkit."""

__all__ = [
    "solve_exact",
    "exact_makespan",
    "solve_lpt",
    "lpt_makespan",
    "solve_multifit",
    "multifit_makespan",
    "solve_ptas",
    "ptas_makespan",
]

_MODULES = {
    "solve_exact": "exact_solver",
    "exact_makespan": "exact_solver",
    "solve_lpt": "greedy",
    "lpt_makespan": "greedy",
    "solve_multifit": "multifit",
    "multifit_makespan": "multifit",
    "solve_ptas": "ptas",
    "ptas_makespan": "ptas",
}


def __getattr__(name):
    if name in _MODULES:
        from importlib import import_module

        return getattr(import_module(f".{_MODULES[name]}", __name__), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
