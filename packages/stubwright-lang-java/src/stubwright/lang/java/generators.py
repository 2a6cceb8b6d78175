from typing import List

from stubwright.spec import ClassDescriptor, MethodDescriptor
from .frameworks import JUnitFramework, JUNIT5
from .values import erase_generics, sample_value, split_array_dims


def _capitalize_first(name: str) -> str:
    return name[:1].upper() + name[1:]


class _JavaSourceGenerator:
    def __init__(
        self,
        framework: JUnitFramework = JUNIT5,
        line_separator: str = "\n",
        indent: str = "\t",
    ):
        self.framework = framework
        self.line_separator = line_separator
        self.indent = indent

    def _join(self, lines: List[str]) -> str:
        # Every generated member ends with its own line separator.
        return self.line_separator.join(lines) + self.line_separator


class JavaFixtureGenerator(_JavaSourceGenerator):
    def generate(self, descriptor: ClassDescriptor, fixture_field_name: str) -> str:
        i = self.indent
        args = ", ".join(
            sample_value(p.type, 0) for p in descriptor.constructor_parameters
        )
        return self._join(
            [
                f"{i}{self.framework.setup_annotation}",
                f"{i}public void setUp() throws Exception {{",
                f"{i}{i}{fixture_field_name} = new {descriptor.simple_name}({args});",
                f"{i}}}",
            ]
        )


def _type_token(java_type: str) -> str:
    """
    Turns a parameter type into a name fragment: "java.util.List<String>" ->
    "List", "int[]" -> "IntArray", "String..." -> "StringArray".
    """
    element, dims = split_array_dims(java_type)
    simple = erase_generics(element).strip().rsplit(".", 1)[-1]
    return _capitalize_first(simple) + "Array" * dims


class JavaStubGenerator(_JavaSourceGenerator):
    def test_name(self, method: MethodDescriptor, variant_index: int) -> str:
        # Parameter types keep overloads apart: testAddInt0, testAddString0.
        signature = "".join(_type_token(p.type) for p in method.parameters)
        return f"test{_capitalize_first(method.name)}{signature}{variant_index}"

    def generate(
        self, method: MethodDescriptor, fixture_field_name: str, variant_index: int
    ) -> str:
        i = self.indent
        args = ", ".join(sample_value(p.type, variant_index) for p in method.parameters)
        # The fixture field is the class's simple name with a lowercased head.
        receiver = (
            _capitalize_first(fixture_field_name) if method.is_static else fixture_field_name
        )
        call = f"{receiver}.{method.name}({args});"
        if method.return_type != "void":
            call = f"{method.return_type} result = {call}"

        return self._join(
            [
                f"{i}{self.framework.test_annotation}",
                f"{i}public void {self.test_name(method, variant_index)}() throws Exception {{",
                f"{i}{i}{call}",
                f"{i}}}",
            ]
        )
