"""Tests for passel membership resolution."""

import pytest

from possum_app.environment.passel import Passel, resolve_passel
from possum_app.errors import TypeMismatch


class TestResolvePassel:
    """Test resolve_passel."""

    def test_preserves_source_order(self):
        """Members come back in the order the credentials list them."""
        passel = resolve_passel({"passel": ["south", "north", "east"]})

        assert passel.members == ("south", "north", "east")
        assert list(passel) == ["south", "north", "east"]
        assert len(passel) == 3

    def test_empty_list_is_valid(self):
        """An empty list resolves to an empty passel."""
        passel = resolve_passel({"passel": []})
        assert len(passel) == 0

    def test_custom_key(self):
        """The credential key is configurable."""
        passel = resolve_passel({"members": ["a"]}, key="members")
        assert "a" in passel

    def test_non_string_member(self):
        """A non-string element is rejected with its index."""
        with pytest.raises(TypeMismatch) as exc_info:
            resolve_passel({"passel": ["a", 42, "b"]})

        error = exc_info.value
        assert error.field == "passel[1]"
        assert error.expected == "str"
        assert error.actual == "int"
        assert error.context == {"value": 42}
        assert "possum was not a string" in str(error)

    def test_missing_key(self):
        """A missing member list is a type mismatch."""
        with pytest.raises(TypeMismatch) as exc_info:
            resolve_passel({"username": "ranger"})
        assert exc_info.value.actual == "missing"

    @pytest.mark.parametrize("raw", ["north", {"north": True}, 7])
    def test_not_a_list(self, raw):
        """Strings, mappings and scalars are not member lists."""
        with pytest.raises(TypeMismatch):
            resolve_passel({"passel": raw})


class TestPassel:
    """Test the Passel value type."""

    def test_is_immutable(self):
        """Passel is a frozen dataclass."""
        passel = Passel(members=("north",))
        with pytest.raises(AttributeError):
            passel.members = ("south",)  # type: ignore[misc]
