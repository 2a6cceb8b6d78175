__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from pathlib import Path

from stubwright.needle import needle
from .messaging.bus import MessageBus

# Packaged templates act as defaults; project overrides win.
needle.add_root(Path(__file__).parent / "assets")

bus = MessageBus()

__all__ = ["bus", "MessageBus"]
