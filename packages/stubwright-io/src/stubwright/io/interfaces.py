from pathlib import Path
from typing import Any, List, Protocol


class ManifestHandler(Protocol):
    """
    Protocol for descriptor manifest formats (YAML, JSON, ...).
    """

    def match(self, path: Path) -> bool:
        """Returns True if this handler can parse the given file."""
        ...

    def load(self, path: Path) -> Any:
        """
        Parses the file into plain Python data.

        Raises:
            DescriptorError: If the file cannot be read or parsed.
        """
        ...


class FileSystemAdapter(Protocol):
    def remove(self, path: Path) -> None: ...
    def make_dirs(self, path: Path) -> None: ...
    def create(self, path: Path) -> None: ...
    def write_records(self, path: Path, records: List[str], terminator: str) -> None: ...
