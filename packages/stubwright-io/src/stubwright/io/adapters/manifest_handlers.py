import json
from pathlib import Path
from typing import Any

import yaml

from stubwright.spec import DescriptorError


class YamlManifestHandler:
    def match(self, path: Path) -> bool:
        return path.suffix.lower() in (".yaml", ".yml")

    def load(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise DescriptorError(f"could not parse manifest: {e}", path) from e


class JsonManifestHandler:
    def match(self, path: Path) -> bool:
        return path.suffix.lower() == ".json"

    def load(self, path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DescriptorError(f"could not parse manifest: {e}", path) from e
