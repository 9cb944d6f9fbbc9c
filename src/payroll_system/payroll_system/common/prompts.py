from __future__ import annotations

from typing import Callable

from ..core.constants import MSG_DUPLICATE_ID_RETRY
from ..core.exceptions import ValidationError
from .console import Console
from .validators import parse_non_negative_float, parse_positive_int, require_name, require_non_empty


class Prompter:
    """Loop-until-valid prompts.

    Every read consumes a whole line, so a rejected entry is discarded together
    with whatever followed it on that line. There is no cancel path: each method
    returns only once the operator typed an acceptable value.
    """

    def __init__(self, console: Console):
        self._console = console

    def _read_until_valid(self, prompt: str, parse: Callable[[str], object]):
        while True:
            raw = self._console.read_line(prompt)
            try:
                return parse(raw)
            except ValidationError as e:
                self._console.write_line(str(e))

    def read_string(self, prompt: str) -> str:
        return self._read_until_valid(prompt, require_non_empty)

    def read_name(self, prompt: str) -> str:
        return self._read_until_valid(prompt, require_name)

    def read_non_negative_float(self, prompt: str) -> float:
        return self._read_until_valid(prompt, parse_non_negative_float)

    def read_positive_int(self, prompt: str) -> int:
        return self._read_until_valid(prompt, parse_positive_int)

    def read_unique_id(self, is_unique: Callable[[str], bool], prompt: str) -> str:
        while True:
            employee_id = self.read_string(prompt)
            if is_unique(employee_id):
                return employee_id
            self._console.write_line(MSG_DUPLICATE_ID_RETRY)
