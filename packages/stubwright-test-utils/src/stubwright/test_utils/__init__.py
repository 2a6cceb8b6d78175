from .bus import SpyBus
from .needle import MockNeedle
from .workspace import WorkspaceFactory
from .fs import RecordingFileSystem
from .helpers import create_test_app, make_class

__all__ = [
    "SpyBus",
    "MockNeedle",
    "WorkspaceFactory",
    "RecordingFileSystem",
    "create_test_app",
    "make_class",
]
