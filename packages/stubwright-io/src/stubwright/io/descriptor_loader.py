from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from stubwright.spec import (
    ClassDescriptor,
    DescriptorError,
    MethodDescriptor,
    ParameterDescriptor,
    Visibility,
)
from .interfaces import ManifestHandler
from .adapters.manifest_handlers import JsonManifestHandler, YamlManifestHandler


class DescriptorLoader:
    """
    Reads class descriptors from manifest files.

    A manifest is a mapping with a ``classes`` list. Each entry names a class
    by its canonical (dotted) name and lists its constructor parameters and
    declared methods in declaration order:

        classes:
          - name: com.example.Widget
            constructor:
              - {name: size, type: int}
            methods:
              - name: resize
                visibility: public
                returns: void
                parameters:
                  - {name: factor, type: double}
    """

    def __init__(self, handlers: Optional[List[ManifestHandler]] = None):
        self.handlers = handlers or [YamlManifestHandler(), JsonManifestHandler()]

    def _find_handler(self, path: Path) -> Optional[ManifestHandler]:
        for handler in self.handlers:
            if handler.match(path):
                return handler
        return None

    def load(self, path: Path) -> List[ClassDescriptor]:
        if not path.exists():
            raise DescriptorError("descriptor path does not exist", path)

        if path.is_dir():
            descriptors: List[ClassDescriptor] = []
            for file_path in sorted(p for p in path.rglob("*") if p.is_file()):
                if self._find_handler(file_path):
                    descriptors.extend(self._load_file(file_path))
            return descriptors

        return self._load_file(path)

    def load_all(self, paths: Iterable[Path]) -> List[ClassDescriptor]:
        descriptors: List[ClassDescriptor] = []
        for path in paths:
            descriptors.extend(self.load(path))
        return descriptors

    def _load_file(self, path: Path) -> List[ClassDescriptor]:
        handler = self._find_handler(path)
        if handler is None:
            raise DescriptorError(f"unsupported manifest format '{path.suffix}'", path)

        data = handler.load(path)
        if data is None:
            # Empty manifest.
            return []
        if not isinstance(data, dict):
            raise DescriptorError("manifest root must be a mapping", path)

        classes = data.get("classes") or []
        if not isinstance(classes, list):
            raise DescriptorError("'classes' must be a list", path)

        return [self._parse_class(entry, path) for entry in classes]

    def _parse_class(self, entry: Any, path: Path) -> ClassDescriptor:
        if not isinstance(entry, dict):
            raise DescriptorError("each class entry must be a mapping", path)
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise DescriptorError("class entry is missing 'name'", path)

        methods = [
            self._parse_method(m, name, path) for m in self._as_list(entry, "methods", path)
        ]
        ctor = [
            self._parse_parameter(p, name, path)
            for p in self._as_list(entry, "constructor", path)
        ]
        return ClassDescriptor(
            canonical_name=name,
            methods=tuple(methods),
            constructor_parameters=tuple(ctor),
            explicit_simple_name=entry.get("simple_name"),
        )

    def _parse_method(self, entry: Any, owner: str, path: Path) -> MethodDescriptor:
        if not isinstance(entry, dict):
            raise DescriptorError(f"{owner}: each method entry must be a mapping", path)
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise DescriptorError(f"{owner}: method entry is missing 'name'", path)

        raw_visibility = str(entry.get("visibility", Visibility.PUBLIC.value)).lower()
        try:
            visibility = Visibility(raw_visibility)
        except ValueError:
            raise DescriptorError(
                f"{owner}.{name}: unknown visibility '{raw_visibility}'", path
            ) from None

        params = [
            self._parse_parameter(p, f"{owner}.{name}", path)
            for p in self._as_list(entry, "parameters", path)
        ]
        return MethodDescriptor(
            name=name,
            visibility=visibility,
            parameters=tuple(params),
            return_type=str(entry.get("returns", "void")),
            is_static=bool(entry.get("static", False)),
        )

    def _parse_parameter(self, entry: Any, owner: str, path: Path) -> ParameterDescriptor:
        if not isinstance(entry, dict) or "name" not in entry or "type" not in entry:
            raise DescriptorError(
                f"{owner}: parameters need both 'name' and 'type'", path
            )
        return ParameterDescriptor(name=str(entry["name"]), type=str(entry["type"]))

    @staticmethod
    def _as_list(entry: Dict[str, Any], key: str, path: Path) -> List[Any]:
        value = entry.get(key) or []
        if not isinstance(value, list):
            raise DescriptorError(f"'{key}' must be a list", path)
        return value
