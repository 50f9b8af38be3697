"""Mini README: Sink registry enabling pluggable renderer integrations.

Structure:
    * FrameSinkRegistry - maps sink identifiers to ``FrameSink`` classes and
      instantiates them with keyword options.

Built-in sinks register themselves on import; external packages can call
``REGISTRY.register`` with their own subclasses.
"""

from __future__ import annotations

import inspect
from typing import Any, Dict, Iterable, Type

from .base import FrameSink
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class FrameSinkRegistry:
    """Simple registry for mapping sink identifiers to classes."""

    def __init__(self) -> None:
        self._sinks: Dict[str, Type[FrameSink]] = {}

    def register(self, sink: Type[FrameSink]) -> None:
        """Register a new sink class with the registry."""

        identifier = sink.sink_name.lower()
        LOGGER.debug("Registering sink '%s'", identifier)
        self._sinks[identifier] = sink

    def available_sinks(self) -> Iterable[str]:
        """Return sorted sink identifiers."""

        return sorted(self._sinks.keys())

    def create(self, identifier: str, **options: Any) -> FrameSink:
        """Instantiate the sink matching ``identifier``.

        Options are checked against the sink constructor's keyword parameters
        so a misspelt option fails with ``ValueError`` naming the sink.
        """

        sink_cls = self._sinks.get(identifier.lower())
        if not sink_cls:
            raise KeyError(f"Unknown frame sink '{identifier}'")
        parameters = inspect.signature(sink_cls).parameters
        open_ended = any(p.kind is inspect.Parameter.VAR_KEYWORD for p in parameters.values())
        unknown = sorted(set(options) - set(parameters))
        if unknown and not open_ended:
            raise ValueError(
                f"Sink '{identifier}' does not accept option(s): {', '.join(unknown)}"
            )
        LOGGER.info("Creating sink '%s' with options %s", identifier, sorted(options))
        return sink_cls(**options)


REGISTRY = FrameSinkRegistry()
