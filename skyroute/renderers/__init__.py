"""Mini README: Renderer handoff subsystem.

Re-exports the sink abstraction and registry. The package is divided into
``base`` for the abstract class, ``registry`` for plugin management, and
``providers`` for the built-in sinks.
"""

from .base import FrameSink
from .registry import FrameSinkRegistry, REGISTRY
from . import providers  # noqa: F401  # ensure built-in sinks register on import

__all__ = ["FrameSink", "FrameSinkRegistry", "REGISTRY"]
