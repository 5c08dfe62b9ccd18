"""A text progress bar drawn with backspace characters."""

from __future__ import annotations

import math
import sys
from typing import TextIO

_BAR_WIDTH = 50


class ProgressBar:
    """Progress bar for a loop of a known number of cycles.

    Each call to :meth:`update` marks one finished cycle. The bar is redrawn
    in place by writing backspaces, so nothing else should be printed to
    the same stream while it runs.
    """

    def __init__(
        self,
        n_cycles: int = 0,
        show_bar: bool = True,
        output: TextIO | None = None,
    ) -> None:
        self.n_cycles = n_cycles
        self.show_bar = show_bar
        self.output = output if output is not None else sys.stderr
        self.done_char = "#"
        self.todo_char = " "
        self.opening_bracket_char = "["
        self.closing_bracket_char = "]"
        self.reset()

    def reset(self) -> None:
        """Start counting from zero so the bar can be used again."""
        self._progress = 0
        self._update_is_called = False
        self._last_perc = 0

    def set_niter(self, niter: int) -> None:
        """Set the number of cycles; it must be positive."""
        if niter <= 0:
            raise ValueError(
                "progressbar::set_niter: number of iterations null or negative"
            )
        self.n_cycles = niter

    def _percentage(self) -> int:
        if self.n_cycles == 1:
            return 100
        return int(self._progress * 100.0 / (self.n_cycles - 1))

    def update(self) -> None:
        """Record one finished cycle and redraw."""
        if self.n_cycles == 0:
            raise RuntimeError("progressbar::update: number of cycles not set")

        parts: list[str] = []
        if not self._update_is_called:
            if self.show_bar:
                parts.append(self.opening_bracket_char)
                parts.append(self.todo_char * _BAR_WIDTH)
                parts.append(self.closing_bracket_char + " 0%")
            else:
                parts.append("0%")
        self._update_is_called = True

        perc = self._percentage()
        if perc < self._last_perc:
            self.output.write("".join(parts))
            return

        if perc == self._last_perc + 1:
            if perc <= 10:
                parts.append(f"\b\b{perc}%")
            elif perc <= 100:
                parts.append(f"\b\b\b{perc}%")

        if self.show_bar and perc % 2 == 0:
            parts.append("\b" * len(self.closing_bracket_char))
            if perc < 10:
                parts.append("\b" * 3)
            elif perc < 100:
                parts.append("\b" * 4)
            elif perc == 100:
                parts.append("\b" * 5)

            half = math.trunc((perc - 1) / 2)
            parts.append("\b" * len(self.todo_char) * (_BAR_WIDTH - half))
            parts.append(self.todo_char if perc == 0 else self.done_char)
            parts.append(self.todo_char * max(0, _BAR_WIDTH - half - 1))
            parts.append(f"{self.closing_bracket_char} {perc}%")

        self._last_perc = perc
        self._progress += 1
        self.output.write("".join(parts))
        self.output.flush()