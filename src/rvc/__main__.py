"""Allow ``python -m rvc`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m rvc`` behaves identically to the ``rvc`` console
script.
"""

from __future__ import annotations

from rvc.cli.app import cli

if __name__ == "__main__":
    cli()
