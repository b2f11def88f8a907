"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph core and the external
encoders and renderers, so both can be swapped in tests.
"""

from .rendering import MapRendererPort
from .serialization import GraphSerializerPort

__all__ = [
    "GraphSerializerPort",
    "MapRendererPort",
]
