from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..core.constants import DEFAULT_CURRENCY, REPORT_HEADER
from ..core.exceptions import DuplicateEmployeeError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository


class PayrollService:
    """Use case: keep the payroll collection and render the payroll report."""

    def __init__(
        self,
        employees: EmployeeRepository,
        *,
        writer: Optional[Callable[[str], None]] = None,
        currency: str = DEFAULT_CURRENCY,
    ):
        self._employees = employees
        self._write = writer or (lambda text: print(text, end=""))
        self._currency = currency

    def is_id_unique(self, employee_id: str) -> bool:
        return not self._employees.exists(employee_id)

    def add_employee(self, employee: Employee) -> bool:
        """Store the record, or discard it with a notice if its id is taken.

        Callers normally check is_id_unique() first; this is the second gate.
        """
        try:
            self._employees.add(employee)
        except DuplicateEmployeeError as e:
            self._write(f"{e}\n")
            return False
        return True

    def employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def render_report(self) -> str:
        parts = [REPORT_HEADER + "\n"]
        parts.extend(e.display(self._currency) for e in self._employees.list_all())
        return "".join(parts)

    def display_report(self) -> None:
        self._write(self.render_report())
