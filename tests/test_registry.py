"""Tests for the identity registry."""

import pytest

from git_identity_manager.exceptions import IncompleteIdentityError, InvalidSelectionError
from git_identity_manager.registry import Identity, IdentityRegistry, derive_key


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Jane Q Doe", "Jane_Q_Doe"),
        ("Jane  Doe", "Jane__Doe"),
        ("Jane\tDoe\n", "Jane_Doe_"),
        ("jane.doe", "jane.doe"),
        ("", ""),
    ],
)
def test_derive_key(name: str, expected: str) -> None:
    """Test that each whitespace character becomes one underscore."""
    assert derive_key(name) == expected


def test_derive_key_is_idempotent() -> None:
    """Test that deriving a key from a key returns it unchanged."""
    key = derive_key("Ada King Lovelace")
    assert derive_key(key) == key


@pytest.fixture
def registry() -> IdentityRegistry:
    """Registry with identities stored out of order."""
    return IdentityRegistry({
        "Bob_Smith": {"name": "Bob Smith", "email": "bob@example.com"},
        "Ada_Lovelace": {"name": "Ada Lovelace", "email": "ada@example.com"},
        "Charles_Babbage": {"name": "Charles Babbage", "email": "cb@example.com"},
    })


def test_list_sorted(registry: IdentityRegistry) -> None:
    """Test that identities are listed by ascending key."""
    keys = [key for key, _ in registry.list_sorted()]
    assert keys == ["Ada_Lovelace", "Bob_Smith", "Charles_Babbage"]
    assert keys == registry.sorted_keys()


def test_list_sorted_uses_code_point_order() -> None:
    """Test that uppercase keys sort before lowercase ones."""
    registry = IdentityRegistry({"zed": {}, "Zed": {}, "alpha": {}})
    assert registry.sorted_keys() == ["Zed", "alpha", "zed"]


def test_get_by_index(registry: IdentityRegistry) -> None:
    """Test 1-based lookup into the sorted listing."""
    assert registry.get_by_index(1) == Identity("Ada Lovelace", "ada@example.com")
    assert registry.get_by_index(2) == Identity("Bob Smith", "bob@example.com")
    assert registry.get_by_index(3) == Identity("Charles Babbage", "cb@example.com")


def test_get_by_index_with_ordered_keys(registry: IdentityRegistry) -> None:
    """Test lookup against a previously displayed key order."""
    ordered_keys = registry.sorted_keys()
    registry.insert("Aaron_A", Identity("Aaron A", "aaron@example.com"))

    assert registry.get_by_index(1, ordered_keys).name == "Ada Lovelace"
    assert registry.get_by_index(1).name == "Aaron A"


@pytest.mark.parametrize("index", [0, -1, 4, 99])
def test_get_by_index_out_of_range(registry: IdentityRegistry, index: int) -> None:
    """Test that indexes outside [1, count] are rejected."""
    with pytest.raises(InvalidSelectionError):
        registry.get_by_index(index)


def test_get_by_index_empty() -> None:
    """Test that an empty registry has nothing to select."""
    with pytest.raises(InvalidSelectionError, match="Invalid selection: 1"):
        IdentityRegistry({}).get_by_index(1)


def test_get_by_index_incomplete_record() -> None:
    """Test that a record without an email cannot be selected."""
    registry = IdentityRegistry({"Ada": {"name": "Ada"}})
    with pytest.raises(IncompleteIdentityError, match="Ada") as exc_info:
        registry.get_by_index(1)
    assert exc_info.value.key == "Ada"


def test_insert_overwrites_same_key(registry: IdentityRegistry) -> None:
    """Test that the last identity inserted under a key wins."""
    registry.insert("Bob_Smith", Identity("Bob Smith", "bob@work.example"))

    assert len(registry) == 3
    assert registry.identities["Bob_Smith"] == {
        "name": "Bob Smith",
        "email": "bob@work.example",
    }


def test_insert_colliding_names() -> None:
    """Test that names normalizing to the same key replace each other."""
    registry = IdentityRegistry({})
    registry.insert(derive_key("A_B"), Identity("A_B", "first@example.com"))
    registry.insert(derive_key("A B"), Identity("A B", "second@example.com"))

    assert len(registry) == 1
    assert registry.get_by_index(1) == Identity("A B", "second@example.com")


def test_registry_is_live_view() -> None:
    """Test that inserts land in the wrapped table."""
    identities: dict = {}
    registry = IdentityRegistry(identities)
    registry.insert("Ada", Identity("Ada", "ada@example.com"))

    assert "Ada" in registry
    assert identities == {"Ada": {"name": "Ada", "email": "ada@example.com"}}
