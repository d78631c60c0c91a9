from attendance_tracker.payroll.calculator.standard_calculator import StandardPayrollCalculator
from attendance_tracker.workers.model import Worker


def test_standard_calculator_truncates_daily_wage():
    calc = StandardPayrollCalculator()

    assert calc.daily_wage(Worker("A", monthly_salary=500)) == 16
    assert calc.total_salary(Worker("A", monthly_salary=500, days_present=10)) == 160


def test_standard_calculator_custom_month_length():
    calc = StandardPayrollCalculator(days_per_month=26)

    assert calc.daily_wage(Worker("A", monthly_salary=520)) == 20
