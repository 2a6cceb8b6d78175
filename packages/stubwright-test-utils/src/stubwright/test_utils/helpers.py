from pathlib import Path
from typing import Optional

from stubwright.app import StubwrightApp
from stubwright.io import DescriptorLoader, FileSystemAdapter
from stubwright.spec import (
    ClassDescriptor,
    MethodDescriptor,
    ParameterDescriptor,
    Visibility,
)


def create_test_app(
    root_path: Path, fs: Optional[FileSystemAdapter] = None
) -> StubwrightApp:
    return StubwrightApp(
        root_path=root_path,
        descriptor_source=DescriptorLoader(),
        fs=fs,
    )


def make_class(
    canonical_name: str, *methods: str, private: tuple = (), ctor: tuple = ()
) -> ClassDescriptor:
    """
    Shorthand for tests: make_class("pkg.Foo", "doWork", private=("helper",)).
    Public methods come first, then private ones, each taking no parameters.
    """
    declared = [MethodDescriptor(name) for name in methods]
    declared += [MethodDescriptor(name, Visibility.PRIVATE) for name in private]
    return ClassDescriptor(
        canonical_name=canonical_name,
        methods=tuple(declared),
        constructor_parameters=tuple(ParameterDescriptor(n, t) for n, t in ctor),
    )
