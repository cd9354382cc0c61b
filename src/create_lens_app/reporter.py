"""Terminal output for the scaffolding pipeline."""

from __future__ import annotations

from typing import Optional, Protocol

from rich.console import Console
from rich.status import Status

from .utils import console as default_console


class Reporter(Protocol):
    """What the pipeline needs from the terminal."""

    @property
    def progress_active(self) -> bool: ...

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def progress_start(self, message: Optional[str] = None) -> None: ...

    def progress_update(self, message: str) -> None: ...

    def progress_stop(self) -> None: ...


class ConsoleReporter:
    """Reporter backed by a rich console and spinner."""

    def __init__(
        self, console: Optional[Console] = None, text: str = "Creating codebase"
    ) -> None:
        self._console = console or default_console
        self._status = Status(text, console=self._console)
        self._active = False

    @property
    def progress_active(self) -> bool:
        return self._active

    def info(self, message: str) -> None:
        self._console.print(message, highlight=False)

    def success(self, message: str) -> None:
        self._console.print(f"[bold green]Success![/bold green] {message}", highlight=False)

    def error(self, message: str) -> None:
        self._console.print(message, style="bold red", highlight=False)

    def progress_start(self, message: Optional[str] = None) -> None:
        if message is not None:
            self._status.update(message)
        if not self._active:
            self._status.start()
            self._active = True

    def progress_update(self, message: str) -> None:
        self._status.update(message)

    def progress_stop(self) -> None:
        if self._active:
            self._status.stop()
            self._active = False
