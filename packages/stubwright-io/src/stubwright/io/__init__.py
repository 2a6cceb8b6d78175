__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .interfaces import ManifestHandler, FileSystemAdapter
from .adapters.manifest_handlers import YamlManifestHandler, JsonManifestHandler
from .descriptor_loader import DescriptorLoader
from .writer import RealFileSystem, WriteReconciler, split_records

__all__ = [
    "ManifestHandler",
    "FileSystemAdapter",
    "YamlManifestHandler",
    "JsonManifestHandler",
    "DescriptorLoader",
    "RealFileSystem",
    "WriteReconciler",
    "split_records",
]
