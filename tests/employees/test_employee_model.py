import math

import pytest

from src.payroll_system.payroll_system.employees.factory import EmployeeFactory
from src.payroll_system.payroll_system.employees.model import Employee


def test_full_time_display_shows_salary_as_entered():
    e = EmployeeFactory().full_time(employee_id="E1", name="Jane Doe", salary=30000)

    assert e.get_id() == "E1"
    assert e.display() == "Employee: Jane Doe (ID: E1)\nFixed Monthly Salary: Php 30000\n\n"


def test_part_time_salary_is_wage_times_hours():
    e = EmployeeFactory().part_time(employee_id="E2", name="John Roe", hourly_wage=100, hours_worked=160)

    assert e.salary == 16000
    assert e.hourly_wage == pytest.approx(100)
    assert e.display() == (
        "Employee: John Roe (ID: E2)\n"
        "Hourly Wage: Php 100\n"
        "Hours Worked: 160\n"
        "Total Salary: Php 16000\n\n"
    )


def test_part_time_derived_wage_recomputes_for_fractional_rates():
    e = EmployeeFactory().part_time(employee_id="P1", name="Ann", hourly_wage=62.35, hours_worked=7.5)

    assert e.salary == pytest.approx(62.35 * 7.5)
    assert e.hourly_wage == pytest.approx(62.35)
    assert "Hourly Wage: Php 62.35\n" in e.display()


def test_part_time_with_zero_hours_has_no_derivable_wage():
    e = EmployeeFactory().part_time(employee_id="P2", name="Ann", hourly_wage=50, hours_worked=0)

    assert e.salary == 0
    assert math.isnan(e.hourly_wage)
    assert "Hourly Wage: Php nan\n" in e.display()


def test_contractual_salary_is_rate_times_projects():
    e = EmployeeFactory().contractual(employee_id="C1", name="Max Power", payment_per_project=2500.5, projects_completed=4)

    assert e.salary == pytest.approx(10002)
    assert e.payment_per_project == pytest.approx(2500.5)
    assert e.display() == (
        "Employee: Max Power (ID: C1)\n"
        "Contract Payment Per Project: Php 2500.5\n"
        "Projects Completed: 4\n"
        "Total Salary: Php 10002\n\n"
    )


def test_display_uses_given_currency_and_six_significant_digits():
    e = EmployeeFactory().full_time(employee_id="E9", name="Big Boss", salary=1234567)

    assert e.display(currency="USD") == "Employee: Big Boss (ID: E9)\nFixed Monthly Salary: USD 1.23457e+06\n\n"


def test_records_are_immutable():
    e = EmployeeFactory().full_time(employee_id="E1", name="Jane Doe", salary=1)

    with pytest.raises(AttributeError):
        e.salary = 2


def test_base_employee_is_abstract():
    with pytest.raises(TypeError):
        Employee(employee_id="E1", name="Jane", salary=1.0)
