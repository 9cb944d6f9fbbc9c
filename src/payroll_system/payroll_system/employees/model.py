from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..common.formatting import format_money, format_number
from ..core.constants import DEFAULT_CURRENCY


@dataclass(frozen=True)
class Employee(ABC):
    """Domain entity: an employee with pay already computed for the period.

    Note: `salary` is the total pay, computed once when the record is built
    (see EmployeeFactory). Per-unit rates are derived back from it for display.
    """

    employee_id: str
    name: str
    salary: float

    def get_id(self) -> str:
        return self.employee_id

    def _heading(self) -> str:
        return f"Employee: {self.name} (ID: {self.employee_id})"

    @abstractmethod
    def display_lines(self, currency: str = DEFAULT_CURRENCY) -> list[str]:
        raise NotImplementedError

    def display(self, currency: str = DEFAULT_CURRENCY) -> str:
        """Report block for this record, closed by a blank line."""
        return "\n".join(self.display_lines(currency)) + "\n\n"


@dataclass(frozen=True)
class FullTimeEmployee(Employee):
    """Fixed monthly salary."""

    def display_lines(self, currency: str = DEFAULT_CURRENCY) -> list[str]:
        return [
            self._heading(),
            f"Fixed Monthly Salary: {format_money(self.salary, currency)}",
        ]


@dataclass(frozen=True)
class PartTimeEmployee(Employee):
    """Paid hourly wage x hours worked."""

    hours_worked: float

    @property
    def hourly_wage(self) -> float:
        # Zero hours leave nothing to divide by; the rate is unknown.
        if not self.hours_worked:
            return math.nan
        return self.salary / self.hours_worked

    def display_lines(self, currency: str = DEFAULT_CURRENCY) -> list[str]:
        return [
            self._heading(),
            f"Hourly Wage: {format_money(self.hourly_wage, currency)}",
            f"Hours Worked: {format_number(self.hours_worked)}",
            f"Total Salary: {format_money(self.salary, currency)}",
        ]


@dataclass(frozen=True)
class ContractualEmployee(Employee):
    """Paid a fixed amount per completed project."""

    projects_completed: int

    @property
    def payment_per_project(self) -> float:
        return self.salary / self.projects_completed

    def display_lines(self, currency: str = DEFAULT_CURRENCY) -> list[str]:
        return [
            self._heading(),
            f"Contract Payment Per Project: {format_money(self.payment_per_project, currency)}",
            f"Projects Completed: {self.projects_completed}",
            f"Total Salary: {format_money(self.salary, currency)}",
        ]
