from pathlib import Path

from stubwright.app import StubwrightApp
from stubwright.io import DescriptorLoader


def get_project_root() -> Path:
    return Path.cwd()


def make_app() -> StubwrightApp:
    # Composition root: the CLI reads manifests and writes to the real filesystem.
    return StubwrightApp(
        root_path=get_project_root(),
        descriptor_source=DescriptorLoader(),
    )
