"""
Console narration for demo output.

Every pattern operation reports what it did by printing one line. The
Narrator wraps a Rich Console so those lines print as plain text (Rich
markup is disabled, so "[DEBUG] ..." prints literally) and keeps a record
of everything it printed, which the runner and tests read back.
"""

from rich.console import Console


class Narrator:
    """Prints demo lines to a console and remembers them."""

    def __init__(self, console: Console | None = None) -> None:
        """
        Initialize narrator.

        Args:
            console: Rich Console to print to (creates default if None)
        """
        self.console = console if console is not None else Console()
        self._lines: list[str] = []

    def say(self, text: str) -> None:
        """Print one plain line."""
        self._lines.append(text)
        self.console.print(text, markup=False, highlight=False, emoji=False)

    def blank(self) -> None:
        """Print an empty separator line."""
        self.say("")

    def heading(self, title: str, style: str = "bold magenta") -> None:
        """
        Print a rule with a title.

        Headings are decoration and are not part of the recorded lines.
        """
        self.console.rule(f"[{style}]{title}[/{style}]")

    @property
    def lines(self) -> list[str]:
        """Lines printed via say(), oldest first."""
        return list(self._lines)

    def clear(self) -> None:
        """Forget recorded lines."""
        self._lines = []


def default_narrator() -> Narrator:
    """Build a narrator on a console configured from settings."""
    from pattern_catalog.settings import get_settings

    settings = get_settings()
    console = Console(
        no_color=not settings.color,
        width=settings.width,
    )
    return Narrator(console=console)
