from pathlib import Path
from typing import List

from stubwright.common import bus
from stubwright.needle import L
from stubwright.spec import ClassDescriptor, GenerationRequest, WriteBatch
from stubwright.io import WriteReconciler
from stubwright.app.services import ClassTestAssembler, OutputPathResolver


class GenerateRunner:
    def __init__(
        self,
        assembler: ClassTestAssembler,
        path_resolver: OutputPathResolver,
        reconciler: WriteReconciler,
    ):
        self.assembler = assembler
        self.path_resolver = path_resolver
        self.reconciler = reconciler

    def assemble_batch(
        self, descriptors: List[ClassDescriptor], variants_per_method: int
    ) -> WriteBatch:
        bodies: List[str] = []
        for descriptor in descriptors:
            request = GenerationRequest(descriptor, variants_per_method)
            bodies.append(self.assembler.assemble(request))
            bus.debug(
                L.generate.body.assembled,
                name=descriptor.simple_name,
                stubs=len(descriptor.public_methods) * variants_per_method,
            )

        targets = [self.path_resolver.resolve(d) for d in descriptors]
        return WriteBatch(tuple(bodies), tuple(targets))

    def run_batch(
        self, descriptors: List[ClassDescriptor], variants_per_method: int
    ) -> List[Path]:
        batch = self.assemble_batch(descriptors, variants_per_method)
        written = self.reconciler.reconcile(batch)
        for path in written:
            bus.success(L.generate.file.success, path=path)
        return written
