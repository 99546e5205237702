from typing import Iterable, Optional

from rich.console import Console

from league.models.standing import Standing

# Team names and parse messages are printed verbatim
stdout_console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)
stderr_console = Console(
    stderr=True, highlight=False, markup=False, emoji=False, soft_wrap=True
)


def write_standings(
    standings: Iterable[Standing], console: Optional[Console] = None
) -> int:
    """Prints one rendered line per standing, flushing after each line.

    Returns:
        The number of lines written.
    """
    console = console or stdout_console
    count = 0
    for standing in standings:
        console.print(standing.render())
        console.file.flush()
        count += 1
    return count


def write_error(message: str, console: Optional[Console] = None) -> None:
    """Prints an error message prefixed with ERROR."""
    console = console or stderr_console
    console.print(f"ERROR: {message}")
