# This must be the very first line to allow this package to coexist with other
# namespace packages in editable installs.
__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .models import (
    Visibility,
    ParameterDescriptor,
    MethodDescriptor,
    ClassDescriptor,
    GenerationRequest,
    WriteBatch,
)
from .protocols import (
    StubGeneratorProtocol,
    FixtureGeneratorProtocol,
    DescriptorSourceProtocol,
)
from .errors import (
    StubwrightError,
    BatchSizeMismatchError,
    DescriptorError,
    ConfigurationError,
)

__all__ = [
    "StubGeneratorProtocol",
    "FixtureGeneratorProtocol",
    "DescriptorSourceProtocol",
    "Visibility",
    "ParameterDescriptor",
    "MethodDescriptor",
    "ClassDescriptor",
    "GenerationRequest",
    "WriteBatch",
    # Errors
    "StubwrightError",
    "BatchSizeMismatchError",
    "DescriptorError",
    "ConfigurationError",
]
