from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employee records.

    Note (DIP): the payroll service depends on this interface, not on a concrete store.
    """

    def add(self, employee: Employee) -> None:
        """Store a record. Raises DuplicateEmployeeError if its id is taken."""

        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def exists(self, employee_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """All records in insertion order."""

        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
