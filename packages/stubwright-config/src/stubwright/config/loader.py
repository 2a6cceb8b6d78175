import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from stubwright.spec import ConfigurationError

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib


@dataclass
class StubwrightConfig:
    output_path: str = "src/test/java"
    descriptors: List[str] = field(default_factory=lambda: ["stubwright.yaml"])
    variants_per_method: int = 1
    line_separator: str = "\n"
    framework: str = "junit5"
    file_extension: str = ".java"


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while current_dir.parent != current_dir:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def _require_type(data: Dict[str, Any], key: str, expected: type) -> None:
    if key in data and not isinstance(data[key], expected):
        raise ConfigurationError(
            f"[tool.stubwright] '{key}' must be of type {expected.__name__}, "
            f"got {type(data[key]).__name__}."
        )


def _parse_config(data: Dict[str, Any]) -> StubwrightConfig:
    defaults = StubwrightConfig()

    for key in ("output_path", "line_separator", "framework", "file_extension"):
        _require_type(data, key, str)
    _require_type(data, "descriptors", list)

    # bool is an int subclass; "variants_per_method = true" is a mistake.
    variants = data.get("variants_per_method", defaults.variants_per_method)
    if isinstance(variants, bool) or not isinstance(variants, int):
        raise ConfigurationError(
            "[tool.stubwright] 'variants_per_method' must be an integer."
        )
    if variants < 0:
        raise ConfigurationError(
            f"[tool.stubwright] 'variants_per_method' must be >= 0, got {variants}."
        )

    line_separator = data.get("line_separator", defaults.line_separator)
    if not line_separator:
        raise ConfigurationError("[tool.stubwright] 'line_separator' must not be empty.")

    return StubwrightConfig(
        output_path=data.get("output_path", defaults.output_path),
        descriptors=[str(d) for d in data.get("descriptors", defaults.descriptors)],
        variants_per_method=variants,
        line_separator=line_separator,
        framework=data.get("framework", defaults.framework),
        file_extension=data.get("file_extension", defaults.file_extension),
    )


def load_config_from_path(search_path: Path) -> StubwrightConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return StubwrightConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"{config_path}: {e}") from e

    stubwright_data: Dict[str, Any] = data.get("tool", {}).get("stubwright", {})
    return _parse_config(stubwright_data)
