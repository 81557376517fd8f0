"""
Terminal layer
Purpose: line-oriented prompting and output over a rich Console. Keeps
console concerns out of the controllers so the session loops can be unit
tested with a scripted fake.

Model output is printed as plain text: no markup, no :emoji: codes and no
re-wrapping of long lines.
"""

from __future__ import annotations
import logging
from typing import Optional

from rich.console import Console

logger = logging.getLogger(__name__)


class ConsoleTerminal:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _print(self, text: str, style: Optional[str] = None) -> None:
        self.console.print(
            text,
            style=style,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def ask(self, prompt: str) -> str:
        """Print the prompt, block for one line, return it trimmed."""
        return self.console.input(prompt, markup=False, emoji=False).strip()

    def read_until(self, sentinel: str) -> list[str]:
        """
        Collect raw lines until one equals the sentinel (sentinel excluded).
        Leading indentation is kept so pasted code survives intact.
        """
        lines: list[str] = []
        while True:
            line = self.console.input("", markup=False, emoji=False)
            if line.strip() == sentinel:
                break
            lines.append(line.rstrip())
        logger.debug("Collected %d line(s) before %r", len(lines), sentinel)
        return lines

    def show(self, text: str = "") -> None:
        self._print(text)

    def banner(self, title: str, body: str, *, width: int = 80) -> None:
        rule = "=" * width
        self.show()
        self.show(rule)
        self._print(title, style="bold")
        self.show(rule)
        self.show(body)

    def framed(self, text: str, *, width: int = 60) -> None:
        rule = "=" * width
        self.show(rule)
        self.show(text)
        self.show(rule)

    def warn(self, text: str) -> None:
        self._print(f"⚠️  {text}", style="yellow")

    def error(self, text: str) -> None:
        self._print(f"❌ {text}", style="bold red")
