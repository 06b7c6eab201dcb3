"""
Console output for the interactive steps.
"""
from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)


class Task:
    """
    Progress of a single step, shown as a spinner while it runs.
    """
    def __init__(self, title: str):
        self.title = title
        self.result: Optional[str] = None
        self.skipped = False

    def message(self, text: str):
        """Prints an indented detail line under the running step."""
        console.print(f"  [dim]│[/dim] {text}")

    def done(self, text: str):
        """Sets the line printed when the step succeeds."""
        self.result = text

    def skip(self, text: str):
        """Marks the step as finished without doing its work."""
        self.result = text
        self.skipped = True


@contextmanager
def task(title: str, failure: str) -> Iterator[Task]:
    """
    Runs a step under a spinner.

    On success prints the step's result (or its title), on error prints
    ``failure`` and re-raises.
    """
    with console.status(f"[cyan]{title}[/cyan]", spinner="dots"):
        current = Task(title)
        try:
            yield current
        except Exception:
            console.print(f"[red]✖[/red] {failure}")
            raise

    result = current.result or title
    if current.skipped:
        console.print(f"[yellow]●[/yellow] {result}")
    else:
        console.print(f"[green]✔[/green] {result}")


def highlight(value) -> str:
    """Formats a value for emphasis inside a message."""
    return f"[cyan]{escape(str(value))}[/cyan]"
