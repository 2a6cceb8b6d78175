from .assembler import (
    ClassTestAssembler,
    FileBodyBuilder,
    HeaderAssembler,
    derive_fixture_field_name,
)
from .path_resolver import OutputPathResolver

__all__ = [
    "ClassTestAssembler",
    "FileBodyBuilder",
    "HeaderAssembler",
    "OutputPathResolver",
    "derive_fixture_field_name",
]
