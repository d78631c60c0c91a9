from __future__ import annotations

from attendance_tracker.payroll.calculator.base import PayrollCalculator
from attendance_tracker.payroll.service import PayrollReportService
from attendance_tracker.workers.model import Worker


class FlatRateCalculator(PayrollCalculator):
    def daily_wage(self, worker: Worker) -> int:
        return 10


def test_report_rows_follow_roster_order(three_workers):
    report = PayrollReportService().build_roster_report(three_workers)

    assert [r["name"] for r in report.rows] == ["Ravi", "Sita", "Lakshmi"]
    assert report.rows[0] == {
        "name": "Ravi",
        "monthly_salary": 500,
        "daily_wage": 16,
        "days_present": 3,
        "total_salary": 48,
    }
    # 16*3 + 13*5 + 15*2
    assert report.total_payable == 143


def test_report_uses_injected_calculator(three_workers):
    report = PayrollReportService(calculator=FlatRateCalculator()).build_roster_report(three_workers)

    assert report.total_payable == 10 * (3 + 5 + 2)


def test_report_for_empty_roster():
    report = PayrollReportService().build_roster_report(())

    assert report.rows == []
    assert report.total_payable == 0
