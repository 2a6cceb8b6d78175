import json
from pathlib import Path
from textwrap import dedent
from typing import Any, Dict, List

import yaml
import tomli_w


class WorkspaceFactory:
    def __init__(self, root_path: Path):
        self.root_path = root_path
        self._files_to_create: List[Dict[str, Any]] = []
        self._pyproject_data: Dict[str, Any] = {}

    def with_config(self, stubwright_config: Dict[str, Any]) -> "WorkspaceFactory":
        tool = self._pyproject_data.setdefault("tool", {})
        tool["stubwright"] = stubwright_config
        return self

    def with_project_name(self, name: str) -> "WorkspaceFactory":
        project = self._pyproject_data.setdefault("project", {})
        project["name"] = name
        return self

    def with_manifest(self, path: str, classes: List[Dict[str, Any]]) -> "WorkspaceFactory":
        fmt = "json" if path.endswith(".json") else "yaml"
        self._files_to_create.append(
            {"path": path, "content": {"classes": classes}, "format": fmt}
        )
        return self

    def with_source(self, path: str, content: str) -> "WorkspaceFactory":
        self._files_to_create.append(
            {"path": path, "content": dedent(content), "format": "raw"}
        )
        return self

    def build(self) -> Path:
        if self._pyproject_data:
            self._files_to_create.append(
                {
                    "path": "pyproject.toml",
                    "content": self._pyproject_data,
                    "format": "toml",
                }
            )

        for file_spec in self._files_to_create:
            output_path = self.root_path / file_spec["path"]
            output_path.parent.mkdir(parents=True, exist_ok=True)

            fmt = file_spec["format"]
            content = file_spec["content"]

            if fmt == "toml":
                with output_path.open("wb") as f:
                    tomli_w.dump(content, f)
            elif fmt == "yaml":
                output_path.write_text(
                    yaml.dump(content, indent=2, sort_keys=False), encoding="utf-8"
                )
            elif fmt == "json":
                output_path.write_text(json.dumps(content, indent=2), encoding="utf-8")
            else:  # raw
                output_path.write_text(content, encoding="utf-8")

        return self.root_path
