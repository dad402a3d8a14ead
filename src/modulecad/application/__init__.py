"""Application layer - use cases and orchestration."""

from .commands import GenerateDrawingCommand
from .dtos import DrawingOutput
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "DrawingOutput",
    "GenerateDrawingCommand",
    "ServiceFactory",
    "get_factory",
    "reset_factory",
    "set_factory",
]
