import pytest

from constlabel.core.formatter import format_labels, make_label


@pytest.mark.parametrize(
    "name, expected",
    [
        ("GROUP_TEST_ONEWORD", "Oneword"),
        ("GROUP_TEST_TWO_WORDS", "Two Words"),
        ("GROUP_TEST_COM_plex_LAbeL", "COM plex LAbe L"),
        ("GROUP_TEST_dotted.name-with_seps", "dotted name with seps"),
        ("GROUP_TEST_camelCase", "camel Case"),
        ("GROUP_TEST_HTTP_2", "HTTP 2"),
        ("GROUP_TEST__LEADING", "Leading"),
    ],
)
def test_make_label(name, expected):
    assert make_label("GROUP_TEST_", name) == expected


def test_format_labels_maps_values_to_labels():
    """Values become keys; every scanned value gets a label."""
    symbols = {"STATUS_DELETED": 0, "STATUS_ACTIVE": 100}
    labels = format_labels("STATUS_", symbols)
    assert labels == {0: "Deleted", 100: "Active"}
    assert set(labels) == set(symbols.values())


def test_format_labels_duplicate_values_last_wins():
    symbols = {"LEVEL_LOW": 1, "LEVEL_MINIMAL": 1, "LEVEL_HIGH": 2}
    assert format_labels("LEVEL_", symbols) == {1: "Minimal", 2: "High"}


def test_format_labels_empty():
    assert format_labels("ANY_", {}) == {}
