from pathlib import Path
from typing import Optional, Union


class StubwrightError(Exception):
    pass


class BatchSizeMismatchError(StubwrightError, ValueError):
    def __init__(self, body_count: int, target_count: int):
        self.body_count = body_count
        self.target_count = target_count
        super().__init__(
            f"Test files list size ({target_count}) is not equal to the size "
            f"of the list of test strings ({body_count})."
        )


class DescriptorError(StubwrightError):
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class ConfigurationError(StubwrightError):
    pass
