"""Mini README: Export utilities for renderer handoff.

Exposes the frozen per-frame snapshot and the GeoJSON feature builders the
external map renderer consumes.
"""

from .snapshot import MODEL_ID, RenderSnapshot, initial_feature

__all__ = ["MODEL_ID", "RenderSnapshot", "initial_feature"]
