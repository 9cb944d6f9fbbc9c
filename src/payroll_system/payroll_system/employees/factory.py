from __future__ import annotations

from dataclasses import dataclass

from .model import ContractualEmployee, FullTimeEmployee, PartTimeEmployee


@dataclass
class EmployeeFactory:
    """Factory Pattern: build each employee variant from validated raw fields.

    Total pay is computed here, once; records never recompute it.
    """

    def full_time(self, *, employee_id: str, name: str, salary: float) -> FullTimeEmployee:
        return FullTimeEmployee(employee_id=employee_id, name=name, salary=float(salary))

    def part_time(self, *, employee_id: str, name: str, hourly_wage: float, hours_worked: float) -> PartTimeEmployee:
        return PartTimeEmployee(
            employee_id=employee_id,
            name=name,
            salary=float(hourly_wage) * float(hours_worked),
            hours_worked=float(hours_worked),
        )

    def contractual(
        self,
        *,
        employee_id: str,
        name: str,
        payment_per_project: float,
        projects_completed: int,
    ) -> ContractualEmployee:
        return ContractualEmployee(
            employee_id=employee_id,
            name=name,
            salary=float(payment_per_project) * int(projects_completed),
            projects_completed=int(projects_completed),
        )
