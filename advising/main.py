"""
Interactive advising shell.

A thin menu loop over CatalogStore:

    1. Load data structure from file
    2. Print an alphanumeric list of all courses
    3. Print course information (title and prerequisites)
    9. Exit
"""
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule

from .catalog import CatalogStore, QueryStatus
from .config import CatalogConfig
from .core.exceptions import CatalogException

NOT_READY_MESSAGE = "Please load data first (Option 1)."


class AdvisingShell:
    """
    One interactive session holding a single CatalogStore.

    Input comes from ``input_func`` and all output goes through a rich
    Console, so the shell can be driven by scripted input in tests.
    """

    def __init__(self, store: Optional[CatalogStore] = None,
                 console: Optional[Console] = None,
                 input_func: Callable[[str], str] = input,
                 config: Optional[CatalogConfig] = None):
        if config is None:
            config = store.config if store is not None else CatalogConfig()
        self.config = config
        self.console = console or Console(emoji=False, highlight=False)
        self.store = store or CatalogStore(self.config)
        self.input_func = input_func

        self._actions = {
            "1": self.load_file,
            "2": self.print_course_list,
            "3": self.print_course_info,
        }

    def run(self) -> None:
        """Show the menu until the user exits or input runs out."""
        while True:
            self.print_menu()
            choice = self._prompt("Enter your choice (1, 2, 3, or 9): ")
            if choice is None:
                self.console.print("\nInput stream closed. Exiting.")
                return

            choice = choice.strip()
            if choice == "9":
                self.console.print("[bold]👋 Goodbye![/bold]")
                return

            action = self._actions.get(choice)
            if action is None:
                self.print_error("Invalid selection. Please enter 1, 2, 3, or 9.")
                self.console.print()
                continue

            if action() is False:
                self.console.print("\nInput stream closed. Exiting.")
                return

    def print_menu(self) -> None:
        self.console.print(Panel(
            "1. Load data structure from file\n"
            "2. Print an alphanumeric list of all courses\n"
            "3. Print course information (title and prerequisites)\n"
            "9. Exit",
            title=f"[bold blue]{escape(self.config.menu_title)}[/bold blue]",
            box=box.DOUBLE,
            expand=False,
        ))

    def load_file(self) -> bool:
        """Menu option 1. Returns False when input ends."""
        filename = self._prompt(
            "Enter the course data filename (e.g., courses.csv): ")
        if filename is None:
            return False

        filename = filename.strip()
        if not filename:
            self.print_error("Error: filename cannot be empty.")
            self.console.print()
            return True

        try:
            result = self.store.load(filename)
        except CatalogException as e:
            self.print_error(f"Error: {escape(str(e))}")
            self.console.print()
            return True

        self.print_success(result.summary())
        self.console.print(
            f"File \"{escape(self.store.source)}\" loaded successfully.")
        self.console.print()
        return True

    def print_course_list(self) -> bool:
        """Menu option 2."""
        listing = self.store.list_all()
        if listing.status is QueryStatus.NOT_READY:
            self.print_info(NOT_READY_MESSAGE)
            return True

        self.console.print()
        self.console.print(Rule("ABCU Computer Science Course List (sorted)"))
        for course in listing.courses:
            self.console.print(escape(str(course)))
        self.console.print(Rule())
        self.console.print(f"Total: {listing.total} course(s)")
        self.console.print()
        return True

    def print_course_info(self) -> bool:
        """Menu option 3. Returns False when input ends."""
        raw = self._prompt("Enter a course number to look up (e.g., CSCI200): ")
        if raw is None:
            return False

        result = self.store.lookup(raw)
        if result.status is QueryStatus.NOT_READY:
            self.print_info(NOT_READY_MESSAGE)
            return True
        if result.status is QueryStatus.EMPTY_IDENTIFIER:
            self.print_error("Error: course number cannot be empty.")
            self.console.print()
            return True
        if result.status is QueryStatus.NOT_FOUND:
            self.print_error(
                f"Course \"{escape(result.course_id)}\" was not found. "
                "Be sure you typed the correct course number (e.g., CSCI200).")
            self.console.print()
            return True

        self.console.print()
        self.console.print(
            f"[bold]{escape(result.course_id)}[/bold]: {escape(result.title)}")

        if not result.prerequisites:
            self.console.print("Prerequisites: None")
            self.console.print()
            return True

        self.console.print("Prerequisites:")
        for prereq in result.prerequisites:
            if prereq.resolved:
                self.console.print(
                    f"  - {escape(prereq.course_id)}: {escape(prereq.title)}")
            else:
                self.console.print(
                    f"  - {escape(prereq.course_id)} [dim](title not found in file)[/dim]")
        self.console.print()
        return True

    def print_success(self, message: str) -> None:
        self.console.print(f"[bold green]✓[/bold green] {escape(message)}")

    def print_info(self, message: str) -> None:
        self.console.print(f"[bold cyan]ℹ[/bold cyan] {escape(message)}")

    def print_error(self, message: str) -> None:
        # Callers escape user data themselves
        self.console.print(f"[bold red]✗[/bold red] {message}")

    def _prompt(self, prompt: str) -> Optional[str]:
        """Read one line of input, or None on EOF / Ctrl+C."""
        try:
            return self.input_func(prompt)
        except (EOFError, KeyboardInterrupt):
            return None


def main():
    """Main entry point of the application."""
    AdvisingShell().run()


if __name__ == "__main__":
    main()
