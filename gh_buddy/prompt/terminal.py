"""Line-based interactive prompts on the terminal."""

import typer

from gh_buddy.prompt.exceptions import InvalidSelectionError


class TerminalPrompter:
    """Asks the user for confirmations, free text and choices from a list."""

    def confirm(self, message: str, default: bool) -> bool:
        """Ask a yes/no question; an empty answer gives the default."""
        return typer.confirm(message, default=default)

    def input(self, message: str, default: str = "") -> str:
        """Ask for free text; an empty answer gives the default."""
        answer: str = typer.prompt(message, default=default, show_default=bool(default))
        return answer.strip() or default

    def select(self, message: str, options: list[str]) -> int:
        """Ask the user to pick one of the options and return its index."""
        typer.echo(message)
        for position, option in enumerate(options, start=1):
            typer.echo(f"  [{position}] {option}")
        answer: str = typer.prompt("Choose an option", default="", show_default=False)
        answer = answer.strip()
        try:
            position = int(answer)
        except ValueError:
            raise InvalidSelectionError(answer) from None
        if not 1 <= position <= len(options):
            raise InvalidSelectionError(answer)
        return position - 1
