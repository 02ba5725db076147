import pytest

from mlfqsim.models import LevelConfiguration, SchedulingMode, Task
from mlfqsim.scheduler import algorithm_scheme, execute_mlfq

RR = SchedulingMode.ROUND_ROBIN


def _sample_tasks():
    return [
        Task("P1", 7, 0, 1, 3),
        Task("P2", 3, 0, 1, 1),
        Task("P3", 12, 0, 1, 5),
        Task("P4", 1, 0, 1, 2),
        Task("P5", 5, 0, 1, 4),
        Task("P6", 9, 0, 1, 1),
    ]


def _staggered_tasks():
    return [
        Task("A", 6, 0, 1, 1),
        Task("B", 2, 2, 1, 2),
        Task("C", 15, 3, 1, 3),
        Task("D", 4, 3, 1, 1),
        Task("E", 8, 10, 1, 5),
    ]


def test_scheme_a_levels():
    assert algorithm_scheme("A") == (
        LevelConfiguration(RR, 1),
        LevelConfiguration(RR, 3),
        LevelConfiguration(RR, 4),
        LevelConfiguration(SchedulingMode.SHORTEST_FIRST, 0),
    )


def test_scheme_b_ends_with_stcf():
    assert algorithm_scheme("B")[3].strategy is SchedulingMode.SHORTEST_REMAINING


def test_scheme_c_is_all_round_robin():
    assert [c.time_slice for c in algorithm_scheme("C")] == [3, 5, 6, 20]
    assert all(c.strategy is RR for c in algorithm_scheme("C"))


def test_scheme_is_case_insensitive():
    assert algorithm_scheme("b") == algorithm_scheme("B")


def test_unknown_scheme_raises():
    with pytest.raises(ValueError):
        algorithm_scheme("D")


def test_execute_unknown_scheme_raises():
    with pytest.raises(ValueError):
        execute_mlfq(_sample_tasks(), "Z")


def test_empty_input_gives_empty_result():
    assert execute_mlfq([], "A") == []


@pytest.mark.parametrize("algorithm", ["A", "B", "C"])
def test_lone_task_runs_without_waiting(algorithm):
    task = Task("solo", 5, 4, 1, 2)
    [result] = execute_mlfq([task], algorithm)
    assert result.start_moment == task.arrival_moment
    assert result.finish_moment == task.arrival_moment + task.service_duration
    assert result.delay_accumulated == 0
    assert result.time_left == 0


def test_short_task_stays_at_top_level():
    [result] = execute_mlfq([Task("x", 1, 0, 3, 1)], "A")
    assert result.tier == 1


def test_long_task_sinks_to_bottom_level():
    [result] = execute_mlfq([Task("x", 30, 0, 1, 1)], "A")
    assert result.tier == 4


@pytest.mark.parametrize("algorithm", ["A", "B", "C", "a"])
def test_input_is_not_modified(algorithm):
    tasks = _sample_tasks()
    before = [Task(**vars(t)) for t in tasks]
    execute_mlfq(tasks, algorithm)
    assert tasks == before


@pytest.mark.parametrize("algorithm", ["A", "B", "C"])
@pytest.mark.parametrize("factory", [_sample_tasks, _staggered_tasks])
def test_result_invariants(algorithm, factory):
    tasks = factory()
    results = execute_mlfq(tasks, algorithm)
    assert [t.identifier for t in results] == [t.identifier for t in tasks]
    for original, done in zip(tasks, results):
        assert done.priority == original.priority
        assert done.time_left == 0
        assert 1 <= done.tier <= 4
        assert original.arrival_moment <= done.start_moment < done.finish_moment
        assert done.finish_moment - done.arrival_moment == done.service_duration + done.delay_accumulated


@pytest.mark.parametrize("algorithm", ["A", "B", "C"])
def test_cpu_never_idles_when_work_is_ready(algorithm):
    tasks = _sample_tasks()
    results = execute_mlfq(tasks, algorithm)
    assert max(t.finish_moment for t in results) == sum(t.service_duration for t in tasks)
    finishes = [t.finish_moment for t in results]
    assert len(set(finishes)) == len(finishes)


@pytest.mark.parametrize("algorithm", ["A", "B", "C"])
def test_idle_gap_before_late_arrival(algorithm):
    tasks = [Task("early", 2, 0, 1, 1), Task("late", 3, 10, 1, 1)]
    early, late = execute_mlfq(tasks, algorithm)
    assert early.finish_moment == early.service_duration
    assert late.start_moment == late.arrival_moment
    assert late.finish_moment == late.arrival_moment + late.service_duration


def test_negative_arrival_rejected():
    with pytest.raises(ValueError):
        execute_mlfq([Task("x", 3, -1, 1, 1)], "A")


def test_zero_duration_rejected():
    with pytest.raises(ValueError):
        execute_mlfq([Task("x", 0, 0, 1, 1)], "B")