import os
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from .loader import Loader
from .pointer import SemanticPointer

LANG_ENV_VAR = "STUBWRIGHT_LANG"


def project_root(start: Optional[Path] = None) -> Path:
    """Nearest directory holding a pyproject.toml, else the start directory."""
    start = (start or Path.cwd()).resolve()
    for candidate in (start, *start.parents):
        if (candidate / "pyproject.toml").is_file():
            return candidate
    return start


class Needle:
    """
    Message templates keyed by semantic pointer, one catalog per language.

    Each root may carry packaged templates in ``needle/<lang>`` and project
    overrides in ``.stubwright/needle/<lang>``. Roots are merged in list
    order, so later roots win, and within a root the overrides win.
    """

    default_lang = "en"

    def __init__(self, roots: Optional[List[Path]] = None):
        self.roots: List[Path] = list(roots) if roots else [project_root()]
        self._loader = Loader()
        self._catalogs: Dict[str, Dict[str, str]] = {}

    def add_root(self, path: Path) -> None:
        # Prepended roots act as defaults underneath the existing ones.
        if path in self.roots:
            return
        self.roots.insert(0, path)
        self.reset()

    def reset(self) -> None:
        self._catalogs.clear()

    def _template_dirs(self, lang: str) -> Iterator[Path]:
        for root in self.roots:
            yield root / "needle" / lang
            yield root / ".stubwright" / "needle" / lang

    def catalog(self, lang: str) -> Dict[str, str]:
        if lang not in self._catalogs:
            merged: Dict[str, str] = {}
            for directory in self._template_dirs(lang):
                if directory.is_dir():
                    merged.update(self._loader.load_directory(directory))
            self._catalogs[lang] = merged
        return self._catalogs[lang]

    def get(
        self, pointer: Union[SemanticPointer, str], lang: Optional[str] = None
    ) -> str:
        """
        Template for ``pointer`` in ``lang`` (or $STUBWRIGHT_LANG), then in
        English. An unknown key resolves to itself.
        """
        key = str(pointer)
        requested = lang or os.getenv(LANG_ENV_VAR) or self.default_lang
        for candidate in dict.fromkeys((requested, self.default_lang)):
            template = self.catalog(candidate).get(key)
            if template is not None:
                return template
        return key


needle = Needle()
