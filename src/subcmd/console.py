"""Rich consoles bound to explicit streams.

There is no module-level console: output always goes to a stream taken
from the :class:`~subcmd.core.models.Environment` snapshot, so tests and
embedding programs can redirect it.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console


def console_for(stream: TextIO) -> Console:
    """Create a console that writes *stream* verbatim.

    Markup, highlighting and emoji codes are off so usage text such as
    ``[default]`` or ``[name]`` is never interpreted, and soft wrapping
    keeps long lines intact.
    """
    return Console(
        file=stream,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
