"""zeus-core — route and documentation extraction for backend source trees."""

from __future__ import annotations

__version__ = "0.1.0"

from zeus_core.scanner.engine import generate_output_json, scan  # noqa: E402
from zeus_core.snapshot import persist  # noqa: E402

__all__ = ["__version__", "generate_output_json", "persist", "scan"]
