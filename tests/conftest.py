import pytest

from retricon.colors import RGBA


@pytest.fixture
def sample_keys():
    """A spread of keys including the awkward ones."""
    return [
        "",
        "test",
        "test1",
        "test2",
        "alice@example.com",
        "ünïcødé ключ 鍵",
        "x" * 10_000,
    ]


@pytest.fixture
def palette():
    """A dark/light palette as produced by the hash search."""
    return (RGBA(10, 20, 30, 255), RGBA(200, 210, 220, 255))
