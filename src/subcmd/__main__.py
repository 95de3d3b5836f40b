"""Allow ``python -m subcmd`` invocation.

Runs the bundled ``greet`` example program, exactly like the ``greet``
console script.
"""

from __future__ import annotations

from subcmd.cli.app import cli

if __name__ == "__main__":
    cli()
