import pytest

from constlabel import GROUP_CACHE


@pytest.fixture(autouse=True)
def clean_group_cache():
    """Every test starts with an empty process-wide label cache."""
    GROUP_CACHE.clear()
    yield
    GROUP_CACHE.clear()
