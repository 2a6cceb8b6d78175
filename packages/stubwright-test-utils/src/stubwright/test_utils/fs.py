from pathlib import Path
from typing import Dict, List, Tuple


class RecordingFileSystem:
    """
    In-memory FileSystemAdapter that records every call in order.
    """

    def __init__(self):
        self.calls: List[Tuple[str, Path]] = []
        self.files: Dict[Path, str] = {}

    def remove(self, path: Path) -> None:
        self.calls.append(("remove", path))
        self.files.pop(path, None)

    def make_dirs(self, path: Path) -> None:
        self.calls.append(("make_dirs", path))

    def create(self, path: Path) -> None:
        self.calls.append(("create", path))
        self.files[path] = ""

    def write_records(self, path: Path, records: List[str], terminator: str) -> None:
        self.calls.append(("write_records", path))
        self.files[path] = "".join(record + terminator for record in records)
