"""A fixed printing procedure whose printing step varies by printer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Printer:
    """Runs the print procedure, handing the changing steps to ``printer``."""

    worker_mark: str = ""
    printer: Optional["Printer"] = None

    def load_drive(self) -> None:
        print("init print drive")

    def unload_drive(self) -> None:
        print("unload drive")

    def set_mark(self, mark: str) -> None:
        """Set the task mark, passing it on to the attached printer."""
        self.worker_mark = mark
        if self.printer is not None:
            self.printer.set_mark(mark)

    def print_job(self) -> None:
        """Print, then let the attached printer print."""
        print(f"print with task mark: {self.worker_mark}")
        if self.printer is not None:
            self.printer.print_job()

    def do_print_work(self) -> None:
        """The fixed procedure: load, set, print, unload."""
        self.load_drive()
        self.set_mark(self.worker_mark)
        self.print_job()
        self.unload_drive()


@dataclass
class PDF(Printer):
    """Prints to a PDF file."""

    output: str = ""

    def set_mark(self, mark: str) -> None:
        """Record the task mark for the PDF job."""
        super().set_mark(mark)

    def print_job(self) -> None:
        print(f"print to PDF ,save to {self.output}")


@dataclass
class DevicePrinter(Printer):
    """Prints on paper; quality 1, 2, 3 is high, middle, low."""

    quality: int = 0

    def set_mark(self, mark: str) -> None:
        """Record the task mark for the paper job."""
        super().set_mark(mark)

    def print_job(self) -> None:
        print(f"print to Paper ,with quality: {self.quality}")