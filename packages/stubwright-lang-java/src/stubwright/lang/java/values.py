from typing import Dict, List, Tuple

_PRIMITIVE_SAMPLES: Dict[str, List[str]] = {
    "byte": ["(byte) 0", "(byte) 1", "Byte.MAX_VALUE", "Byte.MIN_VALUE"],
    "short": ["(short) 0", "(short) 1", "Short.MAX_VALUE", "Short.MIN_VALUE"],
    "int": ["0", "1", "-1", "Integer.MAX_VALUE", "Integer.MIN_VALUE"],
    "long": ["0L", "1L", "-1L", "Long.MAX_VALUE", "Long.MIN_VALUE"],
    "float": ["0.0f", "1.0f", "-1.0f", "Float.NaN"],
    "double": ["0.0", "1.0", "-1.0", "Double.NaN"],
    "boolean": ["false", "true"],
    "char": ["'a'", "'0'", "' '"],
}

_BOXED = {
    "Byte": "byte",
    "Short": "short",
    "Integer": "int",
    "Long": "long",
    "Float": "float",
    "Double": "double",
    "Boolean": "boolean",
    "Character": "char",
}

_REFERENCE_SAMPLES: Dict[str, List[str]] = {
    "String": ['""', '"test"', "null"],
    "CharSequence": ['""', '"test"', "null"],
    "Object": ["new Object()", "null"],
    "List": ["new java.util.ArrayList<>()", "null"],
    "Collection": ["new java.util.ArrayList<>()", "null"],
    "Iterable": ["new java.util.ArrayList<>()", "null"],
    "Set": ["new java.util.HashSet<>()", "null"],
    "Map": ["new java.util.HashMap<>()", "null"],
    "Optional": ["java.util.Optional.empty()", "null"],
}


def _normalize(java_type: str) -> str:
    java_type = java_type.strip()
    if java_type.startswith("java.lang."):
        java_type = java_type[len("java.lang.") :]
    if java_type.startswith("java.util."):
        java_type = java_type[len("java.util.") :]
    return java_type


def erase_generics(java_type: str) -> str:
    generic_start = java_type.find("<")
    if generic_start == -1:
        return java_type
    return java_type[:generic_start]


def split_array_dims(java_type: str) -> Tuple[str, int]:
    """Splits "int[][]" into ("int", 2); varargs count as one dimension."""
    java_type = java_type.strip()
    dims = 0
    if java_type.endswith("..."):
        java_type = java_type[:-3]
        dims = 1
    while java_type.endswith("[]"):
        java_type = java_type[:-2].rstrip()
        dims += 1
    return java_type, dims


def _samples_for(java_type: str) -> List[str]:
    java_type = _normalize(java_type)

    if java_type.endswith("..."):
        java_type = java_type[:-3] + "[]"
    if java_type.endswith("[]"):
        element, dims = split_array_dims(java_type)
        # Only the first dimension takes a size: new int[0][].
        return [f"new {erase_generics(element)}[0]" + "[]" * (dims - 1), "null"]

    if java_type in _PRIMITIVE_SAMPLES:
        return _PRIMITIVE_SAMPLES[java_type]
    if java_type in _BOXED:
        return _PRIMITIVE_SAMPLES[_BOXED[java_type]] + ["null"]

    return _REFERENCE_SAMPLES.get(erase_generics(java_type), ["null"])


def sample_value(java_type: str, variant_index: int) -> str:
    """
    Returns a Java literal of the given type, cycling through the type's
    sample pool by variant index. Unknown reference types yield ``null``.
    """
    pool = _samples_for(java_type)
    return pool[variant_index % len(pool)]
