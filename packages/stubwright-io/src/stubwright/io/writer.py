from pathlib import Path
from typing import List, Optional

from stubwright.spec import WriteBatch
from .interfaces import FileSystemAdapter


class RealFileSystem:
    def remove(self, path: Path) -> None:
        if path.exists():
            path.unlink()

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def create(self, path: Path) -> None:
        path.touch(exist_ok=False)

    def write_records(self, path: Path, records: List[str], terminator: str) -> None:
        # newline="" so the terminator reaches the disk untranslated.
        with path.open("w", encoding="utf-8", newline="") as f:
            for record in records:
                f.write(record)
                f.write(terminator)


def split_records(text: str) -> List[str]:
    """
    Splits a body on "\\n" into the records written to disk.

    Trailing empty records are dropped, so a body ending in one or more
    newlines does not produce blank lines at the end of the file. A body with
    no newline at all is a single record, even when empty. Carriage returns
    are not separators: "\\r\\n" bodies keep a stray "\\r" on every record.
    """
    if "\n" not in text:
        return [text]
    records = text.split("\n")
    while records and records[-1] == "":
        records.pop()
    return records


class WriteReconciler:
    """
    Writes every body of a WriteBatch to its index-aligned target.

    Each target is deleted, its parent directories created, an empty file
    created and the body written record by record. There is no rollback: a
    failure leaves earlier targets of the batch on disk.
    """

    def __init__(
        self,
        fs: Optional[FileSystemAdapter] = None,
        record_terminator: str = "\n",
    ):
        self.fs = fs or RealFileSystem()
        self.record_terminator = record_terminator

    def reconcile(self, batch: WriteBatch) -> List[Path]:
        batch.validate()

        written: List[Path] = []
        # Bounded by the shared length of both sequences, never by an
        # aggregate of the two.
        for index in range(batch.size):
            target = Path(batch.targets[index])
            body = batch.bodies[index]

            self.fs.remove(target)
            self.fs.make_dirs(target.parent)
            self.fs.create(target)
            self.fs.write_records(target, split_records(body), self.record_terminator)
            written.append(target)

        return written

    def write(self, bodies: List[str], targets: List[Path]) -> List[Path]:
        return self.reconcile(WriteBatch(tuple(bodies), tuple(targets)))
