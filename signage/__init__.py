"""Top-level package for the birthday signage runtime.

Subpackages cover configuration, the roster data source, the rotation engine
that drives the display, telemetry and the renderer interfaces. Each one is
import-safe on its own so tests can exercise them in isolation.
"""

__all__: list[str] = []
