from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from .common.console import Console
from .common.prompts import Prompter
from .core.constants import DEFAULT_CURRENCY
from .employees.factory import EmployeeFactory
from .employees.memory_repository import InMemoryEmployeeRepository
from .menu import Menu
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    console: Console
    prompter: Prompter

    employees_repo: InMemoryEmployeeRepository
    employee_factory: EmployeeFactory

    payroll_service: PayrollService
    menu: Menu


def build_container(
    *,
    currency: str = DEFAULT_CURRENCY,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Container:
    console = Console(stdin=stdin, stdout=stdout)
    prompter = Prompter(console)

    employees_repo = InMemoryEmployeeRepository()
    employee_factory = EmployeeFactory()

    payroll_service = PayrollService(employees_repo, writer=console.write, currency=currency)
    menu = Menu(console, prompter)

    return Container(
        console=console,
        prompter=prompter,
        employees_repo=employees_repo,
        employee_factory=employee_factory,
        payroll_service=payroll_service,
        menu=menu,
    )
