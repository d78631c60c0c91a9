from __future__ import annotations

import pytest

from attendance_tracker.workers.model import Worker
from attendance_tracker.workers.roster import (
    add_worker,
    can_submit_new_worker,
    daily_wage,
    delete_worker,
    edit_salary,
    mark_absent,
    mark_present,
    parse_new_salary,
    reset_attendance,
    total_salary,
    update_worker,
)


def test_add_worker_appends_with_no_attendance(three_workers):
    out = add_worker(three_workers, "  Gopal ", 600)

    assert len(out) == len(three_workers) + 1
    assert out[-1] == Worker("Gopal", 600, 0)
    assert out[:3] == three_workers


@pytest.mark.parametrize(
    "name,salary",
    [
        ("", 500),
        ("   ", 500),
        ("Gopal", 0),
        ("Gopal", -10),
        ("Sita", 999),
        (" Sita ", 999),
    ],
)
def test_add_worker_ignores_invalid_or_duplicate(three_workers, name, salary):
    assert add_worker(three_workers, name, salary) == three_workers


def test_update_worker_replaces_only_the_match(three_workers):
    out = update_worker(three_workers, "Sita", mark_present)

    assert out[1] == Worker("Sita", 400, 6)
    assert out[0] == three_workers[0]
    assert out[2] == three_workers[2]


def test_update_worker_unknown_name_is_noop(three_workers):
    assert update_worker(three_workers, "Nobody", mark_present) == three_workers


def test_update_worker_ignores_rename(three_workers):
    out = update_worker(three_workers, "Ravi", lambda w: Worker("Raju", w.monthly_salary, w.days_present))

    assert out == three_workers


def test_delete_worker_keeps_relative_order(three_workers):
    out = delete_worker(three_workers, "Sita")

    assert [w.name for w in out] == ["Ravi", "Lakshmi"]
    assert delete_worker(out, "Sita") == out


def test_mark_present_then_absent_returns_to_baseline():
    for days in (0, 1, 7):
        w = Worker("A", 300, days)
        assert mark_absent(mark_present(w)).days_present == days


def test_mark_absent_clamps_at_zero():
    w = Worker("A", 300, 0)
    assert mark_absent(w) == w


def test_reset_attendance_keeps_salaries():
    roster = (Worker("Ravi", 500, 3), Worker("Sita", 400, 5))

    assert reset_attendance(roster) == (Worker("Ravi", 500, 0), Worker("Sita", 400, 0))


@pytest.mark.parametrize(
    "text",
    ["", "abc", "12x", "-40", None, "1_000", "99999999999999999999", "2147483648", "\u0663\u0660\u0660"],
)
def test_edit_salary_keeps_previous_value_on_bad_input(text):
    w = Worker("A", 450, 2)
    assert edit_salary(w, text) == w


def test_edit_salary_applies_number():
    assert edit_salary(Worker("A", 450, 2), "900") == Worker("A", 900, 2)
    assert edit_salary(Worker("A", 450, 2), " +2147483647 ") == Worker("A", 2147483647, 2)


@pytest.mark.parametrize("salary,wage", [(500, 16), (29, 0), (30, 1), (450, 15), (0, 0)])
def test_daily_wage_truncates(salary, wage):
    assert daily_wage(Worker("A", salary)) == wage


def test_total_salary_uses_truncated_daily_wage():
    assert total_salary(Worker("A", 500, 3)) == 48


def test_new_worker_form_helpers():
    assert parse_new_salary("5a0b0") == 500
    assert parse_new_salary("") == 0
    assert parse_new_salary("5\u06630") == 50
    assert can_submit_new_worker("Gopal", "600")
    assert not can_submit_new_worker(" ", "600")
    assert not can_submit_new_worker("Gopal", "abc")
