from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .common.console import Console
from .common.prompts import Prompter
from .core.constants import EXIT_NOTICE, MENU_TITLE, MSG_INVALID_CHOICE, PROMPT_CHOICE


@dataclass(frozen=True)
class MenuOption:
    number: int
    label: str
    handler: Callable[[], None]


class Menu:
    """Interactive menu loop: show options, read a choice, dispatch, repeat.

    Feature controllers add their options with `option()` the way web
    controllers register routes. The exit option is always listed last.
    """

    def __init__(self, console: Console, prompter: Prompter, *, exit_label: str = "Exit"):
        self._console = console
        self._prompter = prompter
        self._exit_label = exit_label
        self._options: dict[int, MenuOption] = {}

    def option(self, number: int, label: str):
        def decorator(handler: Callable[[], None]):
            if number in self._options:
                raise ValueError(f"Menu option {number} already registered")
            self._options[number] = MenuOption(number=number, label=label, handler=handler)
            return handler

        return decorator

    @property
    def exit_number(self) -> int:
        return max(self._options, default=0) + 1

    def render(self) -> str:
        lines = [MENU_TITLE]
        lines.extend(f"{o.number} - {o.label}" for o in sorted(self._options.values(), key=lambda o: o.number))
        lines.append(f"{self.exit_number} - {self._exit_label}")
        return "\n".join(lines) + "\n"

    def dispatch(self, choice: int) -> bool:
        """Run one choice. Returns False once the operator chose to exit."""
        if choice == self.exit_number:
            self._console.write_line(EXIT_NOTICE)
            return False

        selected = self._options.get(choice)
        if not selected:
            self._console.write_line(MSG_INVALID_CHOICE)
            return True

        selected.handler()
        return True

    def run(self) -> None:
        while True:
            self._console.write(self.render())
            choice = self._prompter.read_positive_int(PROMPT_CHOICE)
            if not self.dispatch(choice):
                return
