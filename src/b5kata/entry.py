"""Console script entry point.

Lives at package level, outside ``adapters``, so that the CLI adapter never
imports the composition root itself; production wiring is handed in here.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``b5kata`` CLI with production services and return its exit code."""
    return cli_main(argv, services_factory=build_production)


__all__ = ["main"]
