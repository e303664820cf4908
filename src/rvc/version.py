"""Single source of truth for the rvc version string."""

from __future__ import annotations

__version__: str = "0.3.0"
