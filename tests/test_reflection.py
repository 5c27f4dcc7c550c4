import pytest

from constlabel.core.enums import MethodKind
from constlabel.core.reflection import (
    coerce_value,
    detect_var_type,
    get_constants,
    get_methods,
    list_constants,
)
from sample_types import Child, Simple, WithMethods


def test_get_constants_by_prefix():
    assert get_constants(Simple, "GROUP_TEST_") == {
        "GROUP_TEST_ONEWORD": 1,
        "GROUP_TEST_TWO_WORDS": 2,
        "GROUP_TEST_COM_plex_LAbeL": 3,
    }


def test_get_constants_no_match_is_empty():
    assert get_constants(Simple, "MISSING_") == {}


def test_get_constants_is_case_sensitive():
    assert get_constants(Simple, "group_test_") == {}


def test_list_constants_skips_methods_and_private_names():
    constants = list_constants(Simple)
    assert "helper" not in constants
    assert "const_labels" not in constants
    assert not any(name.startswith("_") for name in constants)
    assert constants["NOT_A_GROUP"] == "x"


def test_inherited_constants_are_included_and_redefinitions_win():
    """Subclass constants replace inherited ones and keep declaration order."""
    assert get_constants(Child, "STATUS_") == {
        "STATUS_DELETED": 0,
        "STATUS_ACTIVE": 101,
        "STATUS_ARCHIVED": 50,
    }


def test_get_constants_accepts_instance():
    assert get_constants(Simple(), "STATUS_") == {"STATUS_DELETED": 0, "STATUS_ACTIVE": 100}


def test_get_methods_all_and_by_kind():
    assert get_methods(WithMethods) == ["instance_one", "class_one", "static_one"]
    assert get_methods(WithMethods, kind=MethodKind.STATIC) == ["static_one"]
    assert get_methods(WithMethods, kind="class") == ["class_one"]
    assert get_methods(WithMethods, prefix="inst") == ["instance_one"]
    assert get_methods(WithMethods, prefix="nope") == []


def test_detect_var_type():
    assert detect_var_type(1) == "int"
    assert detect_var_type(1, {"number": "Int"}) == "number"
    assert detect_var_type("s", {"number": "Int"}) == "str"
    assert detect_var_type("s", {"number": "Int"}, default="other") == "other"
    assert detect_var_type(1.5, ["Int", "Float"]) == 1


def test_coerce_value():
    assert coerce_value("2", 1) == 2
    assert coerce_value("2.5", 1.0) == pytest.approx(2.5)
    assert coerce_value("yes", True) is True
    assert coerce_value("off", False) is False
    assert coerce_value("abc", "x") == "abc"

    with pytest.raises(ValueError):
        coerce_value("abc", 1)
    with pytest.raises(ValueError):
        coerce_value("maybe", True)


def test_label_configuration_is_not_a_constant():
    """Settings, fallback and the override table are configuration, not constants."""
    from constlabel import ConstantLabels, LabelSettings
    from sample_types import StaticOverrides

    constants = list_constants(StaticOverrides)
    assert "constMagicLabels" not in constants
    assert "const_label_settings" not in constants
    assert "const_label_fallback" not in constants
    assert set(constants) == {"GROUP_TEST_ONEWORD", "GROUP_TEST_TWO_WORDS", "GROUP_TEST_COM_plex_LAbeL"}

    class RenamedSource(ConstantLabels):
        const_label_settings = LabelSettings(labels_source="myLabels")
        myLabels = {"Level": {1: "Minimum"}}
        LEVEL_LOW = 1

    assert list_constants(RenamedSource) == {"LEVEL_LOW": 1}
