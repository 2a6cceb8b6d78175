from .bus import MessageBus
from .protocols import Renderer

__all__ = ["MessageBus", "Renderer"]
