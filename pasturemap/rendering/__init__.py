"""Mini README: Rendering package.

Defines the sink interface map front-ends implement and the ``MapSession``
that feeds them fresh updates, deferring work until a sink is ready.
"""

from .session import MapSession
from .sink import InMemoryRenderSink, RenderSink

__all__ = ["InMemoryRenderSink", "MapSession", "RenderSink"]
