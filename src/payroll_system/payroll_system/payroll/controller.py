from __future__ import annotations

from ..container import Container
from ..menu import Menu


def register(menu: Menu, container: Container) -> None:
    @menu.option(4, "Display Payroll Report")
    def display_report():
        container.payroll_service.display_report()
