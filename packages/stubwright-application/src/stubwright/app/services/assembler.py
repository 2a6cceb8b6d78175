from typing import List, Sequence

from stubwright.spec import (
    ClassDescriptor,
    FixtureGeneratorProtocol,
    GenerationRequest,
    StubGeneratorProtocol,
)


def derive_fixture_field_name(simple_name: str) -> str:
    """
    Lowercases only the first character: "Widget" -> "widget",
    "URLParser" -> "uRLParser".
    """
    return simple_name[:1].lower() + simple_name[1:]


class FileBodyBuilder:
    """
    Ordered list of text fragments, materialized once by build().
    """

    def __init__(self):
        self._fragments: List[str] = []

    def append(self, fragment: str) -> "FileBodyBuilder":
        self._fragments.append(fragment)
        return self

    def extend(self, fragments: Sequence[str]) -> "FileBodyBuilder":
        self._fragments.extend(fragments)
        return self

    @property
    def fragments(self) -> List[str]:
        return list(self._fragments)

    def build(self) -> str:
        return "".join(self._fragments)


class HeaderAssembler:
    def __init__(self, imports: Sequence[str], line_separator: str = "\n"):
        self.imports = list(imports)
        self.line_separator = line_separator

    def package_statement(self, package_name: str) -> str:
        ls = self.line_separator
        return f"package {package_name};{ls}{ls}"

    def import_statement(self, import_name: str) -> str:
        return f"import {import_name};{self.line_separator}"

    def assemble(self, descriptor: ClassDescriptor) -> str:
        builder = FileBodyBuilder()
        # Classes in the default package get no package statement.
        if descriptor.package_name:
            builder.append(self.package_statement(descriptor.package_name))
        for import_name in self.imports:
            builder.append(self.import_statement(import_name))
        builder.append(self.line_separator)
        return builder.build()


class ClassTestAssembler:
    def __init__(
        self,
        header_assembler: HeaderAssembler,
        fixture_generator: FixtureGeneratorProtocol,
        stub_generator: StubGeneratorProtocol,
        line_separator: str = "\n",
    ):
        self.header_assembler = header_assembler
        self.fixture_generator = fixture_generator
        self.stub_generator = stub_generator
        self.line_separator = line_separator

    def class_declaration(self, descriptor: ClassDescriptor) -> str:
        return f"public class {descriptor.simple_name}Test {{{self.line_separator}"

    def field_declaration(self, modifier: str, type_name: str, field_name: str) -> str:
        return f"\t{modifier} {type_name} {field_name};{self.line_separator}"

    def collect_stubs(self, request: GenerationRequest, fixture_field_name: str) -> List[str]:
        stubs: List[str] = []
        for method in request.descriptor.methods:
            if not method.is_public:
                continue
            for variant_index in range(request.variants_per_method):
                stubs.append(
                    self.stub_generator.generate(method, fixture_field_name, variant_index)
                )
        return stubs

    def build(self, request: GenerationRequest) -> FileBodyBuilder:
        descriptor = request.descriptor
        ls = self.line_separator
        fixture_field_name = derive_fixture_field_name(descriptor.simple_name)

        builder = FileBodyBuilder()
        builder.append(self.header_assembler.assemble(descriptor))
        builder.append(self.class_declaration(descriptor))
        builder.append(
            self.field_declaration("private", descriptor.simple_name, fixture_field_name)
        )
        builder.append(ls)
        builder.append(self.fixture_generator.generate(descriptor, fixture_field_name))
        builder.append(ls)
        builder.append(ls.join(self.collect_stubs(request, fixture_field_name)))
        builder.append(f"}}{ls}")
        return builder

    def assemble(self, request: GenerationRequest) -> str:
        return self.build(request).build()
