import dataclasses
from pathlib import Path
from typing import List, Optional

from stubwright.common import bus
from stubwright.needle import L
from stubwright.config import StubwrightConfig, load_config_from_path
from stubwright.spec import (
    ClassDescriptor,
    ConfigurationError,
    DescriptorSourceProtocol,
    FixtureGeneratorProtocol,
    StubGeneratorProtocol,
)
from stubwright.io import DescriptorLoader, FileSystemAdapter, WriteReconciler
from stubwright.lang.java import (
    JavaFixtureGenerator,
    JavaStubGenerator,
    get_framework,
)
from stubwright.app.services import (
    ClassTestAssembler,
    HeaderAssembler,
    OutputPathResolver,
)
from stubwright.app.runners import GenerateRunner


class StubwrightApp:
    def __init__(
        self,
        root_path: Path,
        descriptor_source: Optional[DescriptorSourceProtocol] = None,
        stub_generator: Optional[StubGeneratorProtocol] = None,
        fixture_generator: Optional[FixtureGeneratorProtocol] = None,
        fs: Optional[FileSystemAdapter] = None,
    ):
        self.root_path = root_path
        self.descriptor_source = descriptor_source or DescriptorLoader()
        self.stub_generator = stub_generator
        self.fixture_generator = fixture_generator
        self.fs = fs

    def load_config(
        self,
        variants_per_method: Optional[int] = None,
        output_path: Optional[str] = None,
        descriptors: Optional[List[str]] = None,
    ) -> StubwrightConfig:
        config = load_config_from_path(self.root_path)

        overrides = {}
        if variants_per_method is not None:
            if variants_per_method < 0:
                raise ConfigurationError(
                    f"variants per method must be >= 0, got {variants_per_method}."
                )
            overrides["variants_per_method"] = variants_per_method
        if output_path is not None:
            overrides["output_path"] = output_path
        if descriptors:
            overrides["descriptors"] = list(descriptors)

        return dataclasses.replace(config, **overrides)

    def make_runner(self, config: StubwrightConfig) -> GenerateRunner:
        framework = get_framework(config.framework)
        ls = config.line_separator

        stub_generator = self.stub_generator or JavaStubGenerator(framework, ls)
        fixture_generator = self.fixture_generator or JavaFixtureGenerator(framework, ls)

        assembler = ClassTestAssembler(
            header_assembler=HeaderAssembler(framework.imports, ls),
            fixture_generator=fixture_generator,
            stub_generator=stub_generator,
            line_separator=ls,
        )
        resolver = OutputPathResolver(
            self.root_path, config.output_path, config.file_extension
        )
        reconciler = WriteReconciler(self.fs, record_terminator=ls)
        return GenerateRunner(assembler, resolver, reconciler)

    def load_descriptors(self, config: StubwrightConfig) -> List[ClassDescriptor]:
        descriptors: List[ClassDescriptor] = []
        for entry in config.descriptors:
            path = self.root_path / entry
            loaded = self.descriptor_source.load(path)
            bus.debug(L.generate.descriptor.loaded, count=len(loaded), path=entry)
            descriptors.extend(loaded)
        return descriptors

    def run_from_config(
        self,
        variants_per_method: Optional[int] = None,
        output_path: Optional[str] = None,
        descriptors: Optional[List[str]] = None,
    ) -> List[Path]:
        config = self.load_config(variants_per_method, output_path, descriptors)
        runner = self.make_runner(config)

        classes = self.load_descriptors(config)
        if not classes:
            bus.warning(L.generate.run.empty)
            return []

        bus.info(L.generate.run.start, count=len(classes), output=config.output_path)
        written = runner.run_batch(classes, config.variants_per_method)
        bus.success(L.generate.run.complete, count=len(written))
        return written
