import pytest

from stubwright.io import DescriptorLoader
from stubwright.spec import (
    DescriptorError,
    MethodDescriptor,
    ParameterDescriptor,
    Visibility,
)
from stubwright.test_utils import WorkspaceFactory


WIDGET = {
    "name": "com.example.Widget",
    "constructor": [{"name": "size", "type": "int"}],
    "methods": [
        {
            "name": "resize",
            "returns": "boolean",
            "parameters": [{"name": "factor", "type": "double"}],
        },
        {"name": "recalculate", "visibility": "private"},
        {"name": "create", "static": True, "returns": "Widget"},
    ],
}


def test_load_yaml_manifest(tmp_path):
    root = WorkspaceFactory(tmp_path).with_manifest("stubwright.yaml", [WIDGET]).build()

    [widget] = DescriptorLoader().load(root / "stubwright.yaml")

    assert widget.canonical_name == "com.example.Widget"
    assert widget.simple_name == "Widget"
    assert widget.constructor_parameters == (ParameterDescriptor("size", "int"),)
    assert widget.methods == (
        MethodDescriptor(
            "resize",
            Visibility.PUBLIC,
            (ParameterDescriptor("factor", "double"),),
            return_type="boolean",
        ),
        MethodDescriptor("recalculate", Visibility.PRIVATE),
        MethodDescriptor("create", return_type="Widget", is_static=True),
    )


def test_load_json_manifest_matches_yaml(tmp_path):
    root = (
        WorkspaceFactory(tmp_path)
        .with_manifest("a.yaml", [WIDGET])
        .with_manifest("b.json", [WIDGET])
        .build()
    )
    loader = DescriptorLoader()

    assert loader.load(root / "a.yaml") == loader.load(root / "b.json")


def test_directory_is_walked_in_sorted_order(tmp_path):
    root = (
        WorkspaceFactory(tmp_path)
        .with_manifest("manifests/b.yaml", [{"name": "pkg.B"}])
        .with_manifest("manifests/a/one.yml", [{"name": "pkg.A1"}, {"name": "pkg.A2"}])
        .with_source("manifests/README.md", "not a manifest")
        .build()
    )

    names = [d.canonical_name for d in DescriptorLoader().load(root / "manifests")]

    assert names == ["pkg.A1", "pkg.A2", "pkg.B"]


def test_load_all_concatenates_in_argument_order(tmp_path):
    root = (
        WorkspaceFactory(tmp_path)
        .with_manifest("first.yaml", [{"name": "pkg.Z"}])
        .with_manifest("second.yaml", [{"name": "pkg.A"}])
        .build()
    )

    descriptors = DescriptorLoader().load_all([root / "first.yaml", root / "second.yaml"])

    assert [d.canonical_name for d in descriptors] == ["pkg.Z", "pkg.A"]


def test_empty_manifest_yields_no_classes(tmp_path):
    (tmp_path / "stubwright.yaml").write_text("", encoding="utf-8")
    assert DescriptorLoader().load(tmp_path / "stubwright.yaml") == []


def test_missing_path_raises(tmp_path):
    with pytest.raises(DescriptorError) as exc_info:
        DescriptorLoader().load(tmp_path / "nowhere.yaml")

    assert exc_info.value.path == tmp_path / "nowhere.yaml"


@pytest.mark.parametrize(
    "content",
    [
        "classes: [unclosed",
        "- just\n- a list\n",
        "classes: nope\n",
        "classes:\n  - methods: []\n",
        "classes:\n  - name: a.B\n    methods:\n      - name: m\n        visibility: friend\n",
        "classes:\n  - name: a.B\n    methods:\n      - name: m\n        parameters:\n          - {name: x}\n",
        "classes:\n  - name: a.B\n    methods: {m: 1}\n",
    ],
)
def test_malformed_manifests_raise_descriptor_error(tmp_path, content):
    manifest = tmp_path / "stubwright.yaml"
    manifest.write_text(content, encoding="utf-8")

    with pytest.raises(DescriptorError) as exc_info:
        DescriptorLoader().load(manifest)

    assert str(manifest) in str(exc_info.value)


def test_unsupported_file_type_raises(tmp_path):
    manifest = tmp_path / "classes.txt"
    manifest.write_text("com.example.Widget", encoding="utf-8")

    with pytest.raises(DescriptorError, match="unsupported manifest format"):
        DescriptorLoader().load(manifest)
