import io

import pytest
from rich.console import Console


@pytest.fixture
def string_console():
    """A rich console writing to an in-memory buffer."""
    buffer = io.StringIO()
    console = Console(
        file=buffer, highlight=False, markup=False, emoji=False, soft_wrap=True
    )
    return console, buffer
