"""Mini README: Built-in frame sink implementations.

New sinks should export a subclass of ``FrameSink`` and call
``REGISTRY.register`` during module import to keep the system discoverable.
"""

from .jsonl import JsonLinesSink
from .recording import RecordingSink

__all__ = ["JsonLinesSink", "RecordingSink"]
