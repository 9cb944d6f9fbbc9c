from __future__ import annotations

from ..container import Container
from ..core.constants import (
    PROMPT_HOURLY_WAGE,
    PROMPT_HOURS_WORKED,
    PROMPT_ID,
    PROMPT_NAME,
    PROMPT_PAYMENT_PER_PROJECT,
    PROMPT_PROJECTS_COMPLETED,
    PROMPT_SALARY,
)
from ..menu import Menu


def register(menu: Menu, container: Container) -> None:
    prompter = container.prompter
    factory = container.employee_factory
    payroll = container.payroll_service

    def _read_identity() -> tuple[str, str]:
        employee_id = prompter.read_unique_id(payroll.is_id_unique, PROMPT_ID)
        name = prompter.read_name(PROMPT_NAME)
        return employee_id, name

    @menu.option(1, "Full-time Employee")
    def add_full_time():
        employee_id, name = _read_identity()
        salary = prompter.read_non_negative_float(PROMPT_SALARY)
        payroll.add_employee(factory.full_time(employee_id=employee_id, name=name, salary=salary))

    @menu.option(2, "Part-time Employee")
    def add_part_time():
        employee_id, name = _read_identity()
        hourly_wage = prompter.read_non_negative_float(PROMPT_HOURLY_WAGE)
        hours_worked = prompter.read_non_negative_float(PROMPT_HOURS_WORKED)
        payroll.add_employee(
            factory.part_time(employee_id=employee_id, name=name, hourly_wage=hourly_wage, hours_worked=hours_worked)
        )

    @menu.option(3, "Contractual Employee")
    def add_contractual():
        employee_id, name = _read_identity()
        payment_per_project = prompter.read_non_negative_float(PROMPT_PAYMENT_PER_PROJECT)
        projects_completed = prompter.read_positive_int(PROMPT_PROJECTS_COMPLETED)
        payroll.add_employee(
            factory.contractual(
                employee_id=employee_id,
                name=name,
                payment_per_project=payment_per_project,
                projects_completed=projects_completed,
            )
        )
