"""Utility helpers for dataset loading, input validation and schedule bookkeeping."""

__all__ = [
    "load_tasks",
    "processing_times",
    "build_schedule",
    "machine_loads",
    "machine_jobs",
    "format_schedule",
    "check_instance",
    "check_epsilon",
]


def __getattr__(name):
    if name in ("load_tasks", "processing_times"):
        from . import dataset_loader

        return getattr(dataset_loader, name)
    if name in ("build_schedule", "machine_loads", "machine_jobs", "format_schedule"):
        from . import schedule

        return getattr(schedule, name)
    if name in ("check_instance", "check_epsilon"):
        from . import validation

        return getattr(validation, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
