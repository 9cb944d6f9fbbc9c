from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import DuplicateEmployeeError
from .model import Employee
from .repository import EmployeeRepository


class InMemoryEmployeeRepository(EmployeeRepository):
    """Ordered in-process store; records live as long as the repository."""

    def __init__(self):
        self._employees: list[Employee] = []

    def add(self, employee: Employee) -> None:
        if self.exists(employee.get_id()):
            raise DuplicateEmployeeError(employee.get_id())
        self._employees.append(employee)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        for e in self._employees:
            if e.get_id() == employee_id:
                return e
        return None

    def exists(self, employee_id: str) -> bool:
        return self.get_by_id(employee_id) is not None

    def list_all(self) -> Sequence[Employee]:
        return tuple(self._employees)

    def count(self) -> int:
        return len(self._employees)
