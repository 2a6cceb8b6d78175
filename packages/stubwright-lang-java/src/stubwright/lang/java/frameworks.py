from dataclasses import dataclass
from typing import Dict, List

from stubwright.spec import ConfigurationError


@dataclass(frozen=True)
class JUnitFramework:
    name: str
    test_import: str
    setup_import: str

    @property
    def test_annotation(self) -> str:
        return "@" + self.test_import.rsplit(".", 1)[-1]

    @property
    def setup_annotation(self) -> str:
        return "@" + self.setup_import.rsplit(".", 1)[-1]

    @property
    def imports(self) -> List[str]:
        return [self.test_import, self.setup_import]


JUNIT5 = JUnitFramework(
    name="junit5",
    test_import="org.junit.jupiter.api.Test",
    setup_import="org.junit.jupiter.api.BeforeEach",
)

JUNIT4 = JUnitFramework(
    name="junit4",
    test_import="org.junit.Test",
    setup_import="org.junit.Before",
)

FRAMEWORKS: Dict[str, JUnitFramework] = {fw.name: fw for fw in (JUNIT5, JUNIT4)}


def get_framework(name: str) -> JUnitFramework:
    try:
        return FRAMEWORKS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(FRAMEWORKS))
        raise ConfigurationError(
            f"Unknown test framework '{name}'. Known frameworks: {known}."
        ) from None
