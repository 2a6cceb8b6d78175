import os
from pathlib import Path
from typing import Union

from stubwright.spec import ClassDescriptor


class OutputPathResolver:
    def __init__(
        self,
        base_path: Union[str, Path],
        output_root: str,
        file_extension: str = ".java",
        separator: str = os.sep,
    ):
        self.base_path = str(base_path)
        self.output_root = output_root
        self.file_extension = file_extension
        self.separator = separator

    def resolve(self, descriptor: ClassDescriptor) -> Path:
        # An absolute output_root is appended to the base path, never substituted.
        test_file = (
            descriptor.canonical_name.replace(".", self.separator)
            + "Test"
            + self.file_extension
        )
        return Path(
            self.base_path + self.separator + self.output_root + self.separator + test_file
        )
