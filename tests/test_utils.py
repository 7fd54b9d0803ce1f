from pathlib import Path

import pytest

from makespan_scheduler.utils import (
    build_schedule,
    check_epsilon,
    format_schedule,
    load_tasks,
    machine_jobs,
    machine_loads,
    processing_times,
)


def test_build_schedule():
    res = build_schedule([4, 2, 5], [1, 0, 1], 3)
    assert res == {"assignment": [1, 0, 1], "loads": [2, 9, 0], "makespan": 9}


def test_machine_loads_rejects_bad_assignments():
    with pytest.raises(ValueError):
        machine_loads([1, 2], [0], 2)
    with pytest.raises(ValueError):
        machine_loads([1, 2], [0, 2], 2)


def test_machine_jobs():
    assert machine_jobs([4, 2, 5], [1, 0, 1], 3) == [[2], [4, 5], []]


def test_format_schedule_lists_every_machine():
    p = [4, 2, 5]
    table = format_schedule(build_schedule(p, [1, 0, 1], 3), p)
    lines = table.splitlines()

    assert "machine" in lines[0] and "load" in lines[0]
    assert len(lines) == 2 + 3
    assert "4 5" in lines[3]
    assert lines[4].split()[1] == "-"


def test_check_epsilon_accepts_open_interval():
    check_epsilon(0.5)
    with pytest.raises(ValueError):
        check_epsilon(1.0)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "jobs.csv"
    path.write_text(text)
    return path


def test_load_tasks(tmp_path):
    tasks = load_tasks(_write(tmp_path, "job,p_i\n1,4\n2,6\n3,6\n"))

    assert [task["job"] for task in tasks] == [1, 2, 3]
    assert processing_times(tasks) == [4, 6, 6]


def test_load_tasks_ignores_extra_columns(tmp_path):
    tasks = load_tasks(_write(tmp_path, "job,p_i,priority_w\n1,4,1\n2,6,3\n"))
    assert processing_times(tasks) == [4, 6]


def test_load_tasks_empty_dataset(tmp_path):
    assert load_tasks(_write(tmp_path, "job,p_i\n")) == []


@pytest.mark.parametrize(
    "text",
    [
        "job,p\n1,4\n",
        "job,p_i\n1,0\n",
        "job,p_i\n1,-3\n",
        "job,p_i\n1,2.5\n",
        "job,p_i\n1,\n2,3\n",
    ],
)
def test_load_tasks_rejects_bad_datasets(tmp_path, text):
    with pytest.raises(ValueError):
        load_tasks(_write(tmp_path, text))


def test_load_tasks_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_tasks(tmp_path / "missing.csv")
