"""Tests for the search tracer."""

from src.utils.trace import Tracer, get_tracer, reset_tracer, enable_tracing


def test_tracer_captures_steps(tmp_path):
    reset_tracer()
    tracer = get_tracer()

    tracer.log_propagation(removed=4)
    tracer.log_branch((0, 1), 1, domain_size=2, stack_size=0)
    tracer.log_contradiction("row 0: no color left for r0c2", cell=(0, 1), value=1)
    tracer.log_branch((0, 1), 0, domain_size=2, stack_size=0)
    tracer.log_solution_found(solutions_found=1)
    tracer.log_stop("solution limit", solutions_found=1)

    summary = tracer.summary()
    assert summary["total_steps"] == 6
    assert summary["num_branches"] == 2
    assert summary["num_contradictions"] == 1
    assert summary["num_solutions"] == 1
    assert tracer.steps[1].cell == "r0c1"

    output_path = tmp_path / "trace.csv"
    tracer.to_csv(output_path)
    lines = output_path.read_text().splitlines()
    assert lines[0].startswith("timestamp,step_number,action_type,cell,value")
    assert len(lines) == 7


def test_disabled_tracer_records_nothing():
    reset_tracer()
    enable_tracing(False)
    get_tracer().log_solution_found(1)
    assert get_tracer().steps == []
    reset_tracer()


def test_independent_tracer_instances():
    first, second = Tracer(), Tracer()
    first.log_solution_found(1)
    assert len(first.steps) == 1
    assert second.steps == []
