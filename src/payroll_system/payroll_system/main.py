from __future__ import annotations

import importlib
import sys
from typing import Optional, TextIO

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_CURRENCY
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll


def create_app(*, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    debug = bool(getattr(settings, "DEBUG", False))
    currency = str(getattr(settings, "CURRENCY", DEFAULT_CURRENCY))

    container = build_container(currency=currency, stdin=stdin, stdout=stdout)

    if debug:
        container.console.write_line(f"[payroll-system] settings={settings_module} currency={currency}")

    register_employees(container.menu, container)
    register_payroll(container.menu, container)

    return container


def main() -> int:
    container = create_app()
    try:
        container.menu.run()
    except EOFError:
        # Input closed without choosing Exit.
        return 0
    except KeyboardInterrupt:
        container.console.write_line()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
