from contextlib import contextmanager
from typing import Any, Dict


class MockNeedle:
    """
    Replaces the global needle lookup with a fixed template table.
    """

    def __init__(self, templates: Dict[str, str]):
        self._templates = templates

    def _mock_get(self, key: Any, **kwargs: Any) -> str:
        key_str = str(key)
        return self._templates.get(key_str, key_str)

    @contextmanager
    def patch(self, monkeypatch: Any):
        # MessageBus resolves templates through the needle it imported.
        monkeypatch.setattr("stubwright.common.messaging.bus.needle.get", self._mock_get)
        yield
