__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .frameworks import JUnitFramework, JUNIT4, JUNIT5, get_framework
from .values import sample_value
from .generators import JavaStubGenerator, JavaFixtureGenerator

__all__ = [
    "JUnitFramework",
    "JUNIT4",
    "JUNIT5",
    "get_framework",
    "sample_value",
    "JavaStubGenerator",
    "JavaFixtureGenerator",
]
