import pytest

import stubwright.common
from stubwright.test_utils.workspace import WorkspaceFactory


@pytest.fixture
def workspace_factory(tmp_path, monkeypatch):
    # Use a fixture to ensure a clean workspace and chdir for each test
    factory = WorkspaceFactory(tmp_path)
    monkeypatch.chdir(tmp_path)
    return factory


@pytest.fixture(autouse=True)
def silent_bus(monkeypatch):
    # The CLI callback installs a renderer on the global bus; keep it test-local.
    monkeypatch.setattr(stubwright.common.bus, "_renderer", None)
