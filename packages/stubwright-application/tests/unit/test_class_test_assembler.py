import pytest

from stubwright.app.services import (
    ClassTestAssembler,
    FileBodyBuilder,
    HeaderAssembler,
    derive_fixture_field_name,
)
from stubwright.spec import (
    ClassDescriptor,
    GenerationRequest,
    MethodDescriptor,
    Visibility,
)
from stubwright.test_utils import make_class


class FakeStubGenerator:
    def __init__(self):
        self.calls = []

    def generate(self, method, fixture_field_name, variant_index):
        self.calls.append((method.name, fixture_field_name, variant_index))
        return f"<stub {method.name}#{variant_index}>\n"


class FakeFixtureGenerator:
    def __init__(self):
        self.calls = []

    def generate(self, descriptor, fixture_field_name):
        self.calls.append((descriptor.canonical_name, fixture_field_name))
        return f"<setup {fixture_field_name}>\n"


@pytest.fixture
def stubs():
    return FakeStubGenerator()


@pytest.fixture
def fixtures():
    return FakeFixtureGenerator()


@pytest.fixture
def assembler(stubs, fixtures):
    return ClassTestAssembler(
        header_assembler=HeaderAssembler(["org.junit.Test"]),
        fixture_generator=fixtures,
        stub_generator=stubs,
    )


@pytest.mark.parametrize(
    "simple_name, expected",
    [
        ("Widget", "widget"),
        ("URLParser", "uRLParser"),
        ("X", "x"),
        ("widget", "widget"),
        ("", ""),
    ],
)
def test_fixture_field_name_lowercases_only_the_first_character(simple_name, expected):
    assert derive_fixture_field_name(simple_name) == expected


def test_full_body_layout(assembler):
    request = GenerationRequest(make_class("a.b.Widget", "run", "stop"), 1)

    body = assembler.assemble(request)

    assert body == (
        "package a.b;\n"
        "\n"
        "import org.junit.Test;\n"
        "\n"
        "public class WidgetTest {\n"
        "\tprivate Widget widget;\n"
        "\n"
        "<setup widget>\n"
        "\n"
        "<stub run#0>\n"
        "\n"
        "<stub stop#0>\n"
        "}\n"
    )


def test_stub_count_is_public_methods_times_variants(assembler, stubs):
    descriptor = make_class("a.Widget", "a", "b", "c", private=("x", "y"))

    assembler.assemble(GenerationRequest(descriptor, 4))

    assert len(stubs.calls) == 3 * 4


def test_stubs_are_method_major_then_variant_minor(assembler, stubs):
    descriptor = ClassDescriptor(
        "a.Widget",
        methods=(
            MethodDescriptor("second"),
            MethodDescriptor("hidden", Visibility.PROTECTED),
            MethodDescriptor("first"),
        ),
    )

    body = assembler.assemble(GenerationRequest(descriptor, 3))

    assert stubs.calls == [
        ("second", "widget", 0),
        ("second", "widget", 1),
        ("second", "widget", 2),
        ("first", "widget", 0),
        ("first", "widget", 1),
        ("first", "widget", 2),
    ]
    positions = [body.index(f"<stub {n}#{i}>") for n, _, i in stubs.calls]
    assert positions == sorted(positions)


def test_non_public_methods_never_reach_the_stub_generator(assembler, stubs):
    descriptor = make_class("a.Widget", private=("helper", "cache"))

    body = assembler.assemble(GenerationRequest(descriptor, 10))

    assert stubs.calls == []
    assert "<stub" not in body


def test_zero_variants_still_yields_a_well_formed_file(assembler, stubs, fixtures):
    body = assembler.assemble(GenerationRequest(make_class("a.Widget", "run"), 0))

    assert stubs.calls == []
    assert fixtures.calls == [("a.Widget", "widget")]
    assert body.endswith("\tprivate Widget widget;\n\n<setup widget>\n\n}\n")


def test_fixture_generator_receives_derived_field_name(assembler, fixtures):
    assembler.assemble(GenerationRequest(make_class("net.URLParser"), 1))

    assert fixtures.calls == [("net.URLParser", "uRLParser")]


def test_assembly_is_deterministic(assembler):
    request = GenerationRequest(make_class("a.Widget", "run", "stop"), 2)

    assert assembler.assemble(request) == assembler.assemble(request)


def test_build_exposes_ordered_fragments(assembler):
    builder = assembler.build(GenerationRequest(make_class("a.Widget", "run"), 1))

    fragments = builder.fragments
    assert fragments[1] == "public class WidgetTest {\n"
    assert fragments[2] == "\tprivate Widget widget;\n"
    assert fragments[-1] == "}\n"
    assert builder.build() == "".join(fragments)


def test_file_body_builder_preserves_append_order():
    builder = FileBodyBuilder().append("a").extend(["b", "c"]).append("d")
    assert builder.build() == "abcd"
