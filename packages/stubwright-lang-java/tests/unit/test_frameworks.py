import pytest

from stubwright.lang.java import JUNIT4, JUNIT5, get_framework
from stubwright.spec import ConfigurationError


def test_junit5_profile():
    assert JUNIT5.imports == [
        "org.junit.jupiter.api.Test",
        "org.junit.jupiter.api.BeforeEach",
    ]
    assert JUNIT5.test_annotation == "@Test"
    assert JUNIT5.setup_annotation == "@BeforeEach"


def test_junit4_profile():
    assert JUNIT4.imports == ["org.junit.Test", "org.junit.Before"]
    assert JUNIT4.setup_annotation == "@Before"


def test_lookup_is_case_insensitive():
    assert get_framework("JUnit5") is JUNIT5


def test_unknown_framework_raises():
    with pytest.raises(ConfigurationError, match="junit4, junit5"):
        get_framework("testng")
